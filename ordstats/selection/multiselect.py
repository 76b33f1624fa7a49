"""
Select many ranks in a single traversal.

Once rank k has been selected, A[:k] holds exactly the k smallest values, and
A[k + 1:] the largest. A smaller target rank can therefore only be found
before k, and a larger one only after k. Every target rank is resolved within
the range bounded by the ranks resolved before it, so the partitioning work
is shared between all targets.

Selecting the middle target first halves the set of remaining targets with
every step. The pending work lives on an explicit stack of
``(lo, hi, first, last)`` entries: the targets ``ranks[first:last]`` must be
resolved within ``A[lo:hi]``.
"""
from typing import Callable, NamedTuple

import numpy as np

from ordstats.selection.utils import Compilers


class MultiSelectKernels(NamedTuple):
    select_many: Callable
    select_many_lanes: Callable


def make_multiselect_kernels(
    select: Callable, compilers: Compilers
) -> MultiSelectKernels:
    kernel = compilers.kernel

    @kernel
    def select_many(A, ranks, out):
        """
        Select the values at every rank into ``out``.

        ``ranks`` must be sorted, unique, and within bounds. Returns the peak
        size of the work stack, which never exceeds floor(log2(m)) + 1 for m
        ranks.
        """
        m = len(ranks)
        if m == 0:
            return 0
        # Every entry holds at least one rank that no other entry holds:
        # m entries always suffice.
        stack_lo = np.empty(m, dtype=np.intp)
        stack_hi = np.empty(m, dtype=np.intp)
        stack_first = np.empty(m, dtype=np.intp)
        stack_last = np.empty(m, dtype=np.intp)
        stack_lo[0] = 0
        stack_hi[0] = len(A)
        stack_first[0] = 0
        stack_last[0] = m
        size = 1
        peak = 1

        while size > 0:
            size -= 1
            lo = stack_lo[size]
            hi = stack_hi[size]
            first = stack_first[size]
            last = stack_last[size]

            mid = (first + last) >> 1
            k = ranks[mid]
            out[mid] = select(A, k, lo, hi)

            # Push the upper half first, so the lower half is resolved first.
            if mid + 1 < last:
                stack_lo[size] = k + 1
                stack_hi[size] = hi
                stack_first[size] = mid + 1
                stack_last[size] = last
                size += 1
            if first < mid:
                stack_lo[size] = lo
                stack_hi[size] = k
                stack_first[size] = first
                stack_last[size] = mid
                size += 1
            peak = max(peak, size)

        return peak

    @kernel
    def select_many_lanes(lanes, ranks, out):
        """Run select_many on every row of the 2D ``lanes``."""
        peak = 0
        for i in range(lanes.shape[0]):
            peak = max(peak, select_many(lanes[i], ranks, out[i]))
        return peak

    return MultiSelectKernels(select_many, select_many_lanes)
