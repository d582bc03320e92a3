"""Fixed-dimension vectors for 2D, 3D and 4D game math.

``Vector`` holds the shared implementation; the concrete classes only pin the
dimension and name their components. Components are stored as ``float32`` in
a numpy array, so a vector behaves like the single-precision vectors found in
most game engines.
"""

from __future__ import annotations

import math
import numbers
from typing import ClassVar, Dict, Iterable, Iterator, List, Type

import numpy as np

SCALAR = np.float32

__all__ = [
    "SCALAR",
    "Vector",
    "Vector2D",
    "Vector3D",
    "Vector4D",
    "ZeroVectorError",
    "dot",
    "vector_type",
]


class ZeroVectorError(ValueError):
    """Raised when an operation needs a direction but got the zero vector."""


class _Component:
    """Named accessor (``x``, ``y``, ...) for one slot of a vector."""

    def __init__(self, index: int):
        self.index = index

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return obj[self.index]

    def __set__(self, obj, value: float) -> None:
        obj[self.index] = value


class Vector:
    """Numeric vector with a dimension fixed by the subclass.

    Arithmetic always returns a new vector; ``==`` compares components
    exactly, use :meth:`approx_equal` for results that went through rounding.
    """

    dim: ClassVar[int] = 0
    __slots__ = ("_c",)
    # numpy scalars defer to __rmul__ instead of broadcasting over components
    __array_ufunc__ = None

    def __init__(self, *components: float):
        if self.dim not in _TYPES_BY_DIM:
            raise TypeError("Vector is abstract; use Vector2D, Vector3D or Vector4D")
        if not components:
            self._c = np.zeros(self.dim, dtype=SCALAR)
            return
        if len(components) != self.dim:
            raise TypeError(
                f"{type(self).__name__} takes {self.dim} components, got {len(components)}"
            )
        self._c = np.array(components, dtype=SCALAR)

    @classmethod
    def from_iterable(cls, values: Iterable[float]):
        return cls(*values)

    @classmethod
    def _wrap(cls, arr: np.ndarray):
        out = cls.__new__(cls)
        out._c = np.asarray(arr, dtype=SCALAR)
        return out

    def _check_index(self, i) -> int:
        if not isinstance(i, numbers.Integral) or isinstance(i, bool):
            raise TypeError(f"component index must be an int, not {type(i).__name__}")
        if not 0 <= i < self.dim:
            raise IndexError(f"component index {i} out of range for {type(self).__name__}")
        return int(i)

    def __getitem__(self, i) -> float:
        return float(self._c[self._check_index(i)])

    def __setitem__(self, i, value: float) -> None:
        self._c[self._check_index(i)] = value

    def __len__(self) -> int:
        return self.dim

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._c)

    def to_list(self) -> List[float]:
        return [float(c) for c in self._c]

    def to_array(self) -> np.ndarray:
        """Return a copy of the components as a ``float32`` array."""
        return self._c.copy()

    def copy(self):
        return self._wrap(self._c.copy())

    def _same_type(self, other) -> bool:
        return type(other) is type(self)

    def __add__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return self._wrap(self._c + other._c)

    def __sub__(self, other):
        if not self._same_type(other):
            return NotImplemented
        return self._wrap(self._c - other._c)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self._wrap(self._c * SCALAR(scalar))

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        if scalar == 0:
            raise ValueError("Cannot divide by zero.")
        return self._wrap(self._c / SCALAR(scalar))

    def __neg__(self):
        return self._wrap(-self._c)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._same_type(other) and bool(np.array_equal(self._c, other._c))

    __hash__ = None  # components are mutable

    def dot(self, other: "Vector") -> float:
        return dot(self, other)

    def magnitude_squared(self) -> float:
        return dot(self, self)

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalize(self):
        mag = self.magnitude()
        if mag == 0:
            raise ZeroVectorError("Cannot normalize a zero-length vector.")
        return self / mag

    def approx_equal(self, other: "Vector", tol: float = 1e-5) -> bool:
        """Compare within ``tol`` scaled by the larger magnitude (at least 1)."""
        if not self._same_type(other):
            raise TypeError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        scale = max(1.0, self.magnitude(), other.magnitude())
        return (self - other).magnitude() <= tol * scale

    def __str__(self) -> str:
        return "(" + ", ".join(f"{c:g}" for c in self) + ")"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self)})"


class Vector2D(Vector):
    dim = 2
    __slots__ = ()
    x = _Component(0)
    y = _Component(1)


class Vector3D(Vector):
    dim = 3
    __slots__ = ()
    x = _Component(0)
    y = _Component(1)
    z = _Component(2)


class Vector4D(Vector):
    dim = 4
    __slots__ = ()
    x = _Component(0)
    y = _Component(1)
    z = _Component(2)
    w = _Component(3)


_TYPES_BY_DIM: Dict[int, Type[Vector]] = {2: Vector2D, 3: Vector3D, 4: Vector4D}


def vector_type(dim: int) -> Type[Vector]:
    """Return the vector class for ``dim`` (2, 3 or 4)."""
    try:
        return _TYPES_BY_DIM[dim]
    except KeyError:
        raise ValueError(f"unsupported vector dimension: {dim}") from None


def dot(a: Vector, b: Vector) -> float:
    """Sum of the component-wise products of two vectors of equal dimension."""
    if not isinstance(a, Vector) or type(a) is not type(b):
        raise TypeError(
            f"dot needs two vectors of the same dimension, got "
            f"{type(a).__name__} and {type(b).__name__}"
        )
    return float(np.dot(a._c, b._c))
