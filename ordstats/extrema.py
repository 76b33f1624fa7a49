"""
Minimum and maximum, and their indices.

The ``skipnan`` functions ignore unorderable values (NaN, NaT); the others
raise an UndefinedOrderError when they encounter one. In case of ties the
first occurrence wins. Nothing is reordered: these are plain linear scans.
"""
from typing import Optional, Tuple, Union

import numpy as np

from ordstats.comparator import get_comparator
from ordstats.constants import IntArray
from ordstats.errors import EmptyInputError, UndefinedOrderError
from ordstats.lanes import as_lanes
from ordstats.selection import get_engine

Index = Union[int, Tuple[int, ...], IntArray]


def _argextreme(a, axis: Optional[int], skipnan: bool, kind: str) -> Index:
    a = np.asarray(a)
    comparator = get_comparator(a.dtype)
    engine = get_engine(comparator)
    if a.size == 0:
        raise EmptyInputError(f"Cannot compute the arg{kind} of an empty array")
    if not skipnan and comparator.has_unorderable(a):
        raise UndefinedOrderError(
            "Array contains unorderable values (e.g. NaN). Use "
            f"arg{kind}_skipnan to ignore them."
        )

    if axis is None:
        scan = engine.argmin if kind == "min" else engine.argmax
        index = scan(a.ravel())
        if index < 0:
            raise EmptyInputError("Array contains no orderable values")
        if a.ndim <= 1:
            return int(index)
        return tuple(int(i) for i in np.unravel_index(index, a.shape))

    lanes = as_lanes(a, axis, writeable=False)
    scan = engine.argmin_lanes if kind == "min" else engine.argmax_lanes
    out = np.empty(lanes.data.shape[0], dtype=np.intp)
    scan(lanes.data, out)
    if (out < 0).any():
        raise EmptyInputError(
            f"Array contains lanes along axis {axis} without orderable values"
        )
    return out.reshape(lanes.shape)


def _extreme(a, axis: Optional[int], skipnan: bool, kind: str):
    a = np.asarray(a)
    index = _argextreme(a, axis, skipnan, kind)
    if axis is None:
        if a.ndim == 0:
            return a[()]
        return a[index]
    lanes = as_lanes(a, axis, writeable=False)
    return np.take_along_axis(lanes.moved, index[..., np.newaxis], axis=-1)[..., 0]


def argmin_skipnan(a, axis: Optional[int] = None) -> Index:
    """
    Return the index of the minimum, ignoring NaN values.

    Parameters
    ----------
    a: array_like
    axis: int, optional
        By default, the array is scanned as a whole and the result is an int
        for 1D input, and a tuple of indices for n-dimensional input. With
        an axis, the result is an array of indices along that axis.

    Returns
    -------
    index: int, tuple of int, or np.ndarray of int

    Raises
    ------
    EmptyInputError
        If the array is empty, or if there are no values besides NaN (within
        a lane, if axis is given).
    """
    return _argextreme(a, axis, skipnan=True, kind="min")


def argmax_skipnan(a, axis: Optional[int] = None) -> Index:
    """Return the index of the maximum, ignoring NaN values. See argmin_skipnan."""
    return _argextreme(a, axis, skipnan=True, kind="max")


def argmin(a, axis: Optional[int] = None) -> Index:
    """
    Return the index of the minimum. Raises an UndefinedOrderError if ``a``
    contains NaN. See argmin_skipnan.
    """
    return _argextreme(a, axis, skipnan=False, kind="min")


def argmax(a, axis: Optional[int] = None) -> Index:
    return _argextreme(a, axis, skipnan=False, kind="max")


def min_skipnan(a, axis: Optional[int] = None):
    """Return the minimum, ignoring NaN values."""
    return _extreme(a, axis, skipnan=True, kind="min")


def max_skipnan(a, axis: Optional[int] = None):
    """Return the maximum, ignoring NaN values."""
    return _extreme(a, axis, skipnan=True, kind="max")


def min(a, axis: Optional[int] = None):
    return _extreme(a, axis, skipnan=False, kind="min")


def max(a, axis: Optional[int] = None):
    return _extreme(a, axis, skipnan=False, kind="max")
