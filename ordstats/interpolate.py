"""
Interpolation methods for quantiles that fall between two ranks.

The quantile q of n values is found at the fractional index ``q * (n - 1)``
of the sorted values. If that index is not an integer, it lies between a
lower and a higher rank, and the method decides what to return:

* "lower": the value at the lower rank.
* "higher": the value at the higher rank.
* "nearest": the value at the nearest rank; halfway resolves to the higher.
* "linear": linear interpolation between both values.
* "midpoint": the mean of both values.

q = 0 and q = 1 always resolve to the first and last rank, for every method.
"""
import abc
import math
from typing import Callable, Dict, Tuple

import numpy as np


def lower_rank(q: float, n: int) -> int:
    if q >= 1.0:
        return n - 1
    return math.floor(q * (n - 1))


def higher_rank(q: float, n: int) -> int:
    if q <= 0.0:
        return 0
    return min(math.ceil(q * (n - 1)), n - 1)


def fraction(q: float, n: int) -> float:
    """Fractional part of the index: 0.0 at the lower rank, 1.0 at the higher."""
    if q <= 0.0 or q >= 1.0:
        return 0.0
    index = q * (n - 1)
    return index - math.floor(index)


def lerp(a, b, t: float):
    """Linear interpolation: ``a + t * (b - a)``."""
    with np.errstate(invalid="ignore"):
        return a + (b - a) * t


def midpoint(a, b):
    """Mean of a and b: ``(a + b) / 2``."""
    with np.errstate(invalid="ignore", over="ignore"):
        return (a + b) / 2


# value_at(rank) returns the values at rank for every lane.
ValueAt = Callable[[int], np.ndarray]


class Interpolation(abc.ABC):
    # Whether the method computes new values from the selected ones.
    arithmetic = False

    @abc.abstractmethod
    def ranks(self, q: float, n: int) -> Tuple[int, ...]:
        """The ranks whose values are required to resolve quantile q."""

    @abc.abstractmethod
    def combine(self, value_at: ValueAt, q: float, n: int):
        """Resolve quantile q from the values at the required ranks."""


class Lower(Interpolation):
    def ranks(self, q, n):
        return (lower_rank(q, n),)

    def combine(self, value_at, q, n):
        return value_at(lower_rank(q, n))


class Higher(Interpolation):
    def ranks(self, q, n):
        return (higher_rank(q, n),)

    def combine(self, value_at, q, n):
        return value_at(higher_rank(q, n))


class Nearest(Interpolation):
    @staticmethod
    def _rank(q, n):
        if fraction(q, n) < 0.5:
            return lower_rank(q, n)
        return higher_rank(q, n)

    def ranks(self, q, n):
        return (self._rank(q, n),)

    def combine(self, value_at, q, n):
        return value_at(self._rank(q, n))


class Linear(Interpolation):
    arithmetic = True

    def ranks(self, q, n):
        return (lower_rank(q, n), higher_rank(q, n))

    def combine(self, value_at, q, n):
        lower = lower_rank(q, n)
        higher = higher_rank(q, n)
        if lower == higher:
            return value_at(lower)
        return lerp(value_at(lower), value_at(higher), fraction(q, n))


class Midpoint(Interpolation):
    arithmetic = True

    def ranks(self, q, n):
        return (lower_rank(q, n), higher_rank(q, n))

    def combine(self, value_at, q, n):
        lower = lower_rank(q, n)
        higher = higher_rank(q, n)
        if lower == higher:
            return value_at(lower)
        return midpoint(value_at(lower), value_at(higher))


INTERPOLATION_METHODS: Dict[str, Interpolation] = {
    "lower": Lower(),
    "higher": Higher(),
    "nearest": Nearest(),
    "linear": Linear(),
    "midpoint": Midpoint(),
}


def get_interpolation(method: str) -> Interpolation:
    if not isinstance(method, str):
        raise TypeError(f"method must be a string, received: {type(method).__name__}")
    try:
        return INTERPOLATION_METHODS[method]
    except KeyError as e:
        raise ValueError(
            "Invalid interpolation method: {}. Available methods are: {}".format(
                method, ", ".join(INTERPOLATION_METHODS)
            )
        ) from e
