"""
Present the lanes along an axis of an n-dimensional array as a 2D array.

The kernels operate on a 2D array of shape ``(n_lanes, n)``: every row is a
lane along the requested axis. All additional dimensions are flattened into
one, in front. E.g. for an array of shape ("time", "y", "x"):

  * axis="time" -> ("stacked_y_x", "time")
  * axis="x" -> ("stacked_time_y", "x")

Whenever possible the 2D array is a view on the input, so that selection
reorders the caller's data in place. Otherwise it is a copy, and the
reordered copy has to be written back with ``commit``.
"""
from typing import NamedTuple, Tuple

import numpy as np

from ordstats.errors import EmptyInputError


class Lanes(NamedTuple):
    # The input, with the lane axis moved to the end.
    moved: np.ndarray
    # Shape (n_lanes, n).
    data: np.ndarray

    @property
    def n(self) -> int:
        return self.moved.shape[-1]

    @property
    def shape(self) -> Tuple[int, ...]:
        """Shape of the input without the lane axis."""
        return self.moved.shape[:-1]

    def commit(self) -> None:
        """Write the reordered lanes back into the input, if necessary."""
        if not np.may_share_memory(self.data, self.moved):
            self.moved[...] = self.data.reshape(self.moved.shape)


def as_lanes(a: np.ndarray, axis: int, writeable: bool = True) -> Lanes:
    if not isinstance(a, np.ndarray):
        raise TypeError(f"Expected numpy.ndarray, received: {type(a).__name__}")
    if a.ndim == 0:
        raise ValueError("Cannot select along an axis of a 0-dimensional array")
    if writeable and not a.flags.writeable:
        raise ValueError(
            "array is read-only. Selection reorders the array in place: "
            "pass a copy instead."
        )
    moved = np.moveaxis(a, axis, -1)
    n = moved.shape[-1]
    if n == 0:
        raise EmptyInputError(f"Cannot select from axis {axis}: it has length 0")
    return Lanes(moved, moved.reshape((-1, n)))
