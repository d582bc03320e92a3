from __future__ import annotations
from typing import Protocol, Type, TypeVar
from ..linalg import Vector

V = TypeVar("V", bound=Vector)


class RandomSource(Protocol):
    """Anything with ``uniform(low, high)``: numpy ``Generator``, ``random.Random``."""

    def uniform(self, low: float, high: float) -> float: ...


def rand_float(rng: RandomSource, low: float, high: float) -> float:
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    return float(rng.uniform(low, high))


def random_vector(rng: RandomSource, cls: Type[V], low: float, high: float) -> V:
    """Draw every component of a ``cls`` vector from ``[low, high)``."""
    return cls(*(rand_float(rng, low, high) for _ in range(cls.dim)))
