"""
Single rank selection.

``select`` is a quickselect with median-of-three pivots. Quickselect is
linear on average, but a pathological input can make every split a poor one.
After MAX_POOR_SPLITS poor splits in a row, the remainder of the call is
handed to ``select_linear``: median-of-medians selection (Blum, Floyd, Pratt,
Rivest & Tarjan, 1973), which is linear in the worst case.

Median-of-medians is recursive by nature: finding the pivot is itself a
selection. Here the recursion is replaced by an explicit stack of frames, so
its depth is a fixed, known bound.
"""
from typing import Callable, NamedTuple

import numpy as np

from ordstats.constants import (
    GROUP_SIZE,
    MAX_POOR_SPLITS,
    MEDIAN_OF_MEDIANS_DEPTH,
    POOR_SPLIT_RATIO,
)
from ordstats.selection.partition import PartitionKernels
from ordstats.selection.utils import Compilers


class SelectKernels(NamedTuple):
    group_medians: Callable
    select_linear: Callable
    select: Callable


def make_select_kernels(
    partition_kernels: PartitionKernels, compilers: Compilers
) -> SelectKernels:
    kernel = compilers.kernel
    median_of_three = partition_kernels.median_of_three
    partition = partition_kernels.partition
    insertion_sort = partition_kernels.insertion_sort

    @kernel
    def group_medians(A, lo, hi):
        """
        Sort every group of five in A[lo:hi] and move the group medians to the
        front of the range. Returns the number of groups.
        """
        n_group = 0
        for start in range(lo, hi, GROUP_SIZE):
            end = min(start + GROUP_SIZE, hi)
            insertion_sort(A, start, end)
            median = (start + end - 1) >> 1
            # The target always lies in a group that has been processed.
            target = lo + n_group
            A[target], A[median] = A[median], A[target]
            n_group += 1
        return n_group

    @kernel
    def select_linear(A, k, lo, hi):
        """Select the k'th smallest element in A[lo:hi], in worst case O(n)."""
        frame_lo = np.empty(MEDIAN_OF_MEDIANS_DEPTH, dtype=np.intp)
        frame_hi = np.empty(MEDIAN_OF_MEDIANS_DEPTH, dtype=np.intp)
        frame_k = np.empty(MEDIAN_OF_MEDIANS_DEPTH, dtype=np.intp)
        # A waiting frame has pushed the selection of its median of medians.
        waiting = np.zeros(MEDIAN_OF_MEDIANS_DEPTH, dtype=np.bool_)
        top = 0
        frame_lo[0] = lo
        frame_hi[0] = hi
        frame_k[0] = k

        while top >= 0:
            start = frame_lo[top]
            end = frame_hi[top]
            target = frame_k[top]
            if waiting[top]:
                # The median of medians now sits in the middle of the group
                # medians at the front of the range.
                waiting[top] = False
                n_group = (end - start + GROUP_SIZE - 1) // GROUP_SIZE
                i = partition(A, start, end, start + (n_group - 1) // 2)
                if i == target:
                    top -= 1
                elif target < i:
                    frame_hi[top] = i
                else:
                    frame_lo[top] = i + 1
            elif end - start <= GROUP_SIZE:
                insertion_sort(A, start, end)
                top -= 1
            else:
                n_group = group_medians(A, start, end)
                waiting[top] = True
                top += 1
                frame_lo[top] = start
                frame_hi[top] = start + n_group
                frame_k[top] = start + (n_group - 1) // 2
                waiting[top] = False

        return A[k]

    @kernel
    def select(A, k, lo, hi):
        """
        Select the k'th smallest element in A[lo:hi].

        Afterwards, A[lo:hi] is partitioned around index k.
        """
        n_poor = 0
        while hi - lo > 1:
            if n_poor >= MAX_POOR_SPLITS:
                return select_linear(A, k, lo, hi)
            size = hi - lo
            i = partition(A, lo, hi, median_of_three(A, lo, hi))
            if i == k:
                return A[k]
            elif k < i:
                hi = i
            else:
                lo = i + 1
            if (hi - lo) > POOR_SPLIT_RATIO * size:
                n_poor += 1
            else:
                n_poor = 0
        return A[k]

    return SelectKernels(group_medians, select_linear, select)
