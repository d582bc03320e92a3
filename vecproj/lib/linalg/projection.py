from __future__ import annotations

import math
from typing import Tuple, TypeVar

import numpy as np

from .vector import Vector, dot

V = TypeVar("V", bound=Vector)

__all__ = [
    "DegenerateBasisError",
    "project",
    "reject",
    "project_unit",
    "scalar_component",
    "decompose",
]


class DegenerateBasisError(ValueError):
    """Raised when projecting onto (or rejecting from) the zero vector."""


def _basis_norm_sq(b: Vector) -> float:
    # float64 so tiny non-zero bases do not underflow to zero
    c = b.to_array().astype(np.float64)
    bb = float(np.dot(c, c))
    if bb == 0.0:
        raise DegenerateBasisError(f"cannot project onto the zero basis vector {b}")
    return bb


def project(a: V, b: V) -> V:
    """Return the part of ``a`` parallel to ``b``: ``dot(a, b) / dot(b, b) * b``.

    Not commutative: ``project(a, b)`` is a multiple of ``b`` while
    ``project(b, a)`` is a multiple of ``a``.
    """
    return (dot(a, b) / _basis_norm_sq(b)) * b


def reject(a: V, b: V) -> V:
    """Return the part of ``a`` perpendicular to ``b``: ``a - project(a, b)``."""
    return a - project(a, b)


def project_unit(a: V, b_hat: V) -> V:
    """Projection onto a basis already known to have unit length.

    Skips the ``dot(b, b)`` division; ``b_hat`` is not checked.
    """
    return dot(a, b_hat) * b_hat


def scalar_component(a: Vector, b: Vector) -> float:
    """Signed length of ``a`` along ``b``, i.e. ``|a| cos(theta)``."""
    return dot(a, b) / math.sqrt(_basis_norm_sq(b))


def decompose(a: V, b: V) -> Tuple[V, V]:
    """Split ``a`` into ``(parallel, perpendicular)`` parts relative to ``b``.

    The parts add back up to ``a`` only up to rounding error.
    """
    parallel = project(a, b)
    return parallel, a - parallel
