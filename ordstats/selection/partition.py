"""
The partition primitive, and the small helpers around it.

The partitioning scheme is a generalized port of the numba percentile
helpers:
# https://github.com/numba/numba/blob/0441bb17c7820efc2eba4fd141b68dac2afa4740/numba/np/arraymath.py#L1595

All ranges are half-open: ``[lo, hi)``.
"""
from typing import Callable, NamedTuple

from ordstats.comparator import TotalOrder
from ordstats.selection.utils import Compilers


class PartitionKernels(NamedTuple):
    median_of_three: Callable
    partition: Callable
    insertion_sort: Callable
    partition_unorderable: Callable


def make_partition_kernels(
    comparator: TotalOrder, compilers: Compilers
) -> PartitionKernels:
    inline, kernel = compilers
    less = inline(comparator.less)
    unorderable = inline(comparator.unorderable)

    @kernel
    def median_of_three(A, lo, hi):
        """
        Order the first, middle, and last element of A[lo:hi], return the
        index of the middle one.
        """
        # NOTE: the pattern of swaps below for the pivot choice and the
        # partitioning gives good results (i.e. regular O(n log n))
        # on sorted, reverse-sorted, and uniform arrays.  Subtle changes
        # risk breaking this property.
        last = hi - 1
        mid = (lo + last) >> 1
        if less(A[mid], A[lo]):
            A[lo], A[mid] = A[mid], A[lo]
        if less(A[last], A[mid]):
            A[last], A[mid] = A[mid], A[last]
        if less(A[mid], A[lo]):
            A[lo], A[mid] = A[mid], A[lo]
        return mid

    @kernel
    def partition(A, lo, hi, p):
        """
        Partition A[lo:hi] around the value at index p.

        Returns the final index of the pivot value: every element before it
        is <= pivot, every element after it is >= pivot. Elements equal to the
        pivot stop both scans, so runs of duplicates are split evenly.
        """
        last = hi - 1
        pivot = A[p]
        A[p], A[last] = A[last], A[p]
        i = lo
        j = last - 1
        while True:
            while i < last and less(A[i], pivot):
                i += 1
            while j >= lo and less(pivot, A[j]):
                j -= 1
            if i >= j:
                break
            A[i], A[j] = A[j], A[i]
            i += 1
            j -= 1
        # Put the pivot back in its final place (all items before `i`
        # are smaller than the pivot, all items at/after `i` are larger)
        A[i], A[last] = A[last], A[i]
        return i

    @kernel
    def insertion_sort(A, lo, hi):
        for i in range(lo + 1, hi):
            value = A[i]
            j = i - 1
            while j >= lo and less(value, A[j]):
                A[j + 1] = A[j]
                j -= 1
            A[j + 1] = value

    @kernel
    def partition_unorderable(A):
        """
        Move the unorderable values of A to its end.

        Returns the number of orderable values: A[:n] is free of them.
        """
        i = 0
        j = len(A) - 1
        while True:
            while i <= j and not unorderable(A[i]):
                i += 1
            while j > i and unorderable(A[j]):
                j -= 1
            if i >= j:
                return i
            A[i], A[j] = A[j], A[i]
            i += 1
            j -= 1

    return PartitionKernels(
        median_of_three, partition, insertion_sort, partition_unorderable
    )
