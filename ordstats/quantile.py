"""
Quantiles and rank selection along an axis of a numpy array.

Every function in this module reorders the array **in place** along the
requested axis: this is what makes selection O(n) instead of O(n log n), and
avoids a copy of the data. The values of every lane are preserved, but their
order afterwards is unspecified (beyond being partitioned around the selected
ranks). Callers that need the original order must pass a copy:

>>> median = quantile_mut(data.copy(), 0.5)

Functions with ``skipnan`` in their name ignore unorderable values (NaN,
NaT); the others raise an UndefinedOrderError when they encounter one.
"""
import warnings
from typing import Dict, Sequence, Union

import numpy as np

from ordstats.comparator import TotalOrder, get_comparator
from ordstats.constants import FloatArray, IntArray
from ordstats.errors import (
    InvalidQuantileError,
    OutOfBoundsError,
    UndefinedOrderError,
    UnsupportedPolicyError,
)
from ordstats.interpolate import Interpolation, get_interpolation
from ordstats.lanes import Lanes, as_lanes
from ordstats.selection import SelectionEngine, get_engine

ArrayLike = Union[float, Sequence[float], np.ndarray]


def _check_quantiles(qs: ArrayLike) -> FloatArray:
    qs = np.atleast_1d(np.asarray(qs, dtype=np.float64))
    if qs.ndim != 1:
        raise ValueError(f"quantiles must be 1D, received shape: {qs.shape}")
    invalid = np.isnan(qs) | (qs < 0.0) | (qs > 1.0)
    if invalid.any():
        raise InvalidQuantileError(
            f"quantile must be in the range [0, 1], received: {qs[invalid]}"
        )
    return qs


def _check_percentiles(ps: ArrayLike) -> FloatArray:
    ps = np.atleast_1d(np.asarray(ps, dtype=np.float64))
    if ps.ndim != 1:
        raise ValueError(f"percentiles must be 1D, received shape: {ps.shape}")
    invalid = np.isnan(ps) | (ps < 0.0) | (ps > 100.0)
    if invalid.any():
        raise InvalidQuantileError(
            f"percentile must be in the range [0, 100], received: {ps[invalid]}"
        )
    return ps / 100.0


def _check_scalar(value, name: str) -> None:
    if np.ndim(value) != 0:
        raise TypeError(
            f"{name} must be a scalar, received an array of shape "
            f"{np.shape(value)}. Use the plural function for multiple values."
        )


def _check_ranks(ranks, n: int) -> IntArray:
    ranks = np.atleast_1d(np.asarray(ranks))
    if not np.issubdtype(ranks.dtype, np.integer):
        raise TypeError(f"ranks must be integers, received dtype: {ranks.dtype}")
    if ranks.ndim != 1:
        raise ValueError(f"ranks must be 1D, received shape: {ranks.shape}")
    ranks = ranks.astype(np.intp)
    out_of_bounds = (ranks >= n) | (ranks < -n)
    if out_of_bounds.any():
        raise OutOfBoundsError(
            f"rank out of bounds for axis of length {n}: {ranks[out_of_bounds]}"
        )
    return np.where(ranks < 0, ranks + n, ranks)


def _check_interpolation(method: str, comparator: TotalOrder, dtype) -> Interpolation:
    interpolation = get_interpolation(method)
    if interpolation.arithmetic and not comparator.supports_arithmetic:
        raise UnsupportedPolicyError(
            f'Interpolation method "{method}" requires arithmetic, which '
            f"elements of dtype {dtype} do not support. Use one of: lower, "
            "higher, nearest."
        )
    return interpolation


def _check_orderable(lanes: Lanes, comparator: TotalOrder) -> None:
    if comparator.has_unorderable(lanes.data):
        raise UndefinedOrderError(
            "Array contains unorderable values (e.g. NaN). Use the skipnan "
            "variant to ignore them."
        )


def _combine(interpolation: Interpolation, value_at, q: float, n: int):
    try:
        return interpolation.combine(value_at, q, n)
    except TypeError as e:
        # Only reachable for object arrays.
        raise UnsupportedPolicyError(
            f"Cannot interpolate between the elements: {e}"
        ) from e


def _required_ranks(interpolation: Interpolation, qs: FloatArray, n: int) -> IntArray:
    ranks = set()
    for q in qs:
        ranks.update(interpolation.ranks(q, n))
    return np.array(sorted(ranks), dtype=np.intp)


def _quantiles_strict(
    lanes: Lanes,
    engine: SelectionEngine,
    qs: FloatArray,
    interpolation: Interpolation,
    dtype: np.dtype,
) -> np.ndarray:
    n = lanes.n
    n_lanes = lanes.data.shape[0]
    ranks = _required_ranks(interpolation, qs, n)
    selected = np.empty((n_lanes, ranks.size), dtype=lanes.data.dtype)
    engine.select_many_lanes(lanes.data, ranks, selected)
    lanes.commit()

    selected = selected.astype(dtype, copy=False)
    column = {rank: i for i, rank in enumerate(ranks)}

    def value_at(rank):
        return selected[:, column[rank]]

    out = np.empty((qs.size, n_lanes), dtype=dtype)
    for i, q in enumerate(qs):
        out[i] = _combine(interpolation, value_at, q, n)
    return out


def _quantiles_skipnan(
    lanes: Lanes,
    engine: SelectionEngine,
    qs: FloatArray,
    interpolation: Interpolation,
    dtype: np.dtype,
) -> np.ndarray:
    # Every lane has its own number of orderable values, hence its own ranks.
    n_lanes = lanes.data.shape[0]
    out = np.empty((qs.size, n_lanes), dtype=dtype)
    all_unorderable = False
    for i in range(n_lanes):
        lane = lanes.data[i]
        n = engine.partition_unorderable(lane)
        if n == 0:
            out[:, i] = engine.comparator.fill_value
            all_unorderable = True
            continue

        ranks = _required_ranks(interpolation, qs, n)
        selected = np.empty(ranks.size, dtype=lane.dtype)
        engine.select_many(lane[:n], ranks, selected)
        selected = selected.astype(dtype, copy=False)

        def value_at(rank):
            return selected[np.searchsorted(ranks, rank)]

        for j, q in enumerate(qs):
            out[j, i] = _combine(interpolation, value_at, q, n)

    lanes.commit()
    if all_unorderable:
        # Points at the caller of the public function, which calls _quantiles.
        warnings.warn("All-NaN slice encountered", RuntimeWarning, stacklevel=4)
    return out


def _quantiles(
    a: np.ndarray, qs: FloatArray, axis: int, method: str, skipnan: bool
) -> np.ndarray:
    lanes = as_lanes(a, axis)
    comparator = get_comparator(a.dtype)
    interpolation = _check_interpolation(method, comparator, a.dtype)
    dtype = comparator.result_dtype(a.dtype, interpolation.arithmetic)
    engine = get_engine(comparator)

    if skipnan and comparator.has_sentinel:
        out = _quantiles_skipnan(lanes, engine, qs, interpolation, dtype)
    else:
        _check_orderable(lanes, comparator)
        out = _quantiles_strict(lanes, engine, qs, interpolation, dtype)
    return out.reshape((qs.size,) + lanes.shape)


def quantiles_mut(
    a: np.ndarray, qs: ArrayLike, axis: int = -1, method: str = "linear"
) -> np.ndarray:
    """
    Compute multiple quantiles along an axis, reordering ``a`` in place.

    All quantiles are resolved in a single traversal of every lane, which is
    considerably cheaper than computing them one by one.

    Parameters
    ----------
    a: np.ndarray
        Data. Must be writeable; it is reordered along ``axis``.
    qs: sequence of floats
        Quantiles in the range [0, 1].
    axis: int, default -1
    method: str, default "linear"
        One of "lower", "higher", "nearest", "linear", "midpoint".

    Returns
    -------
    quantiles: np.ndarray
        Shape ``(len(qs),)`` followed by the shape of ``a`` without ``axis``.
        Integer data is promoted to float64 by "linear" and "midpoint".
    """
    qs = _check_quantiles(qs)
    return _quantiles(a, qs, axis, method, skipnan=False)


def quantile_mut(a: np.ndarray, q: float, axis: int = -1, method: str = "linear"):
    """
    Compute the q'th quantile along an axis, reordering ``a`` in place.

    The quantile is found at the fractional index ``q * (n - 1)`` of the
    sorted lane; ``method`` decides how to resolve a fractional index. q = 0
    returns the minimum, q = 0.5 the median, q = 1 the maximum.

    Complexity is O(n) per lane in the average and the worst case.

    Parameters
    ----------
    a: np.ndarray
        Data. Must be writeable; it is reordered along ``axis``.
    q: float
        Quantile in the range [0, 1].
    axis: int, default -1
    method: str, default "linear"
        One of "lower", "higher", "nearest", "linear", "midpoint".

    Returns
    -------
    quantile: np.ndarray or scalar
        The shape of ``a`` without ``axis``; a scalar for 1D input.

    Raises
    ------
    InvalidQuantileError
        If q is not in [0, 1].
    EmptyInputError
        If the axis has length 0.
    UndefinedOrderError
        If ``a`` contains NaN. See quantile_skipnan_mut.
    UnsupportedPolicyError
        If "linear" or "midpoint" is used on e.g. strings or datetimes.
    """
    _check_scalar(q, "q")
    return _quantiles(a, _check_quantiles(q), axis, method, skipnan=False)[0]


def quantiles_skipnan_mut(
    a: np.ndarray, qs: ArrayLike, axis: int = -1, method: str = "linear"
) -> np.ndarray:
    """
    Compute multiple quantiles along an axis, ignoring NaN (or NaT) values.
    Reorders ``a`` in place: NaN values end up at the end of their lane.

    A lane without any orderable value results in NaN (NaT for datetimes,
    None for objects), and a RuntimeWarning.

    See quantiles_mut for the parameters.
    """
    qs = _check_quantiles(qs)
    return _quantiles(a, qs, axis, method, skipnan=True)


def quantile_skipnan_mut(
    a: np.ndarray, q: float, axis: int = -1, method: str = "linear"
):
    """
    Compute the q'th quantile along an axis, ignoring NaN (or NaT) values.

    See quantile_mut and quantiles_skipnan_mut.
    """
    _check_scalar(q, "q")
    return _quantiles(a, _check_quantiles(q), axis, method, skipnan=True)[0]


def percentiles_mut(
    a: np.ndarray, ps: ArrayLike, axis: int = -1, method: str = "linear"
) -> np.ndarray:
    """Like quantiles_mut, with percentiles in the range [0, 100]."""
    qs = _check_percentiles(ps)
    return _quantiles(a, qs, axis, method, skipnan=False)


def percentile_mut(a: np.ndarray, p: float, axis: int = -1, method: str = "linear"):
    """Like quantile_mut, with a percentile in the range [0, 100]."""
    _check_scalar(p, "p")
    return _quantiles(a, _check_percentiles(p), axis, method, skipnan=False)[0]


def percentiles_skipnan_mut(
    a: np.ndarray, ps: ArrayLike, axis: int = -1, method: str = "linear"
) -> np.ndarray:
    qs = _check_percentiles(ps)
    return _quantiles(a, qs, axis, method, skipnan=True)


def percentile_skipnan_mut(
    a: np.ndarray, p: float, axis: int = -1, method: str = "linear"
):
    _check_scalar(p, "p")
    return _quantiles(a, _check_percentiles(p), axis, method, skipnan=True)[0]


def select_ranks_mut(a: np.ndarray, ranks, axis: int = -1) -> np.ndarray:
    """
    Select the values that would be found at ``ranks`` if every lane along
    ``axis`` were sorted. Reorders ``a`` in place.

    Parameters
    ----------
    a: np.ndarray
    ranks: sequence of int
        Zero-based ranks; negative ranks count from the end.
    axis: int, default -1

    Returns
    -------
    values: np.ndarray
        Shape ``(len(ranks),)`` followed by the shape of ``a`` without
        ``axis``, in the order of ``ranks``.
    """
    lanes = as_lanes(a, axis)
    ranks = _check_ranks(ranks, lanes.n)
    comparator = get_comparator(a.dtype)
    _check_orderable(lanes, comparator)
    engine = get_engine(comparator)

    unique, inverse = np.unique(ranks, return_inverse=True)
    selected = np.empty((lanes.data.shape[0], unique.size), dtype=a.dtype)
    engine.select_many_lanes(lanes.data, unique.astype(np.intp), selected)
    lanes.commit()
    out = selected[:, inverse.ravel()].T
    return out.reshape((ranks.size,) + lanes.shape)


def select_rank_mut(a: np.ndarray, rank: int, axis: int = -1):
    """
    Select the value that would be found at ``rank`` if every lane along
    ``axis`` were sorted. Reorders ``a`` in place: afterwards every lane is
    partitioned around ``rank``.

    Complexity is O(n) per lane in the average and the worst case.

    Raises
    ------
    EmptyInputError
        If the axis has length 0.
    OutOfBoundsError
        If rank >= n.
    UndefinedOrderError
        If ``a`` contains NaN.
    """
    _check_scalar(rank, "rank")
    return select_ranks_mut(a, [rank], axis)[0]


def sorted_values_mut(a: np.ndarray, ranks) -> Dict[int, object]:
    """
    Select multiple ranks from a 1D array, reordering it in place.

    Returns a dict from rank to value, ordered by increasing rank. Duplicate
    ranks are resolved once.
    """
    if not isinstance(a, np.ndarray):
        raise TypeError(f"Expected numpy.ndarray, received: {type(a).__name__}")
    if a.ndim != 1:
        raise ValueError(f"Expected a 1D array, received {a.ndim} dimensions")
    values = select_ranks_mut(a, ranks)
    lookup = {}
    for rank, value in zip(_check_ranks(ranks, a.size), values):
        lookup[int(rank)] = value
    return dict(sorted(lookup.items()))
