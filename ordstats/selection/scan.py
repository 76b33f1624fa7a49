"""Linear scans for extrema. They never reorder the array."""
from typing import Callable, NamedTuple

from ordstats.comparator import TotalOrder
from ordstats.selection.utils import Compilers


class ScanKernels(NamedTuple):
    argmin: Callable
    argmax: Callable
    argmin_lanes: Callable
    argmax_lanes: Callable


def make_scan_kernels(comparator: TotalOrder, compilers: Compilers) -> ScanKernels:
    inline, kernel = compilers
    less = inline(comparator.less)
    unorderable = inline(comparator.unorderable)

    # Both scans skip unorderable values and keep the first occurrence in
    # case of ties. They return -1 if there is no orderable value.
    @kernel
    def argmin(A):
        best = -1
        for i in range(len(A)):
            value = A[i]
            if unorderable(value):
                continue
            if best < 0 or less(value, A[best]):
                best = i
        return best

    @kernel
    def argmax(A):
        best = -1
        for i in range(len(A)):
            value = A[i]
            if unorderable(value):
                continue
            if best < 0 or less(A[best], value):
                best = i
        return best

    @kernel
    def argmin_lanes(lanes, out):
        for i in range(lanes.shape[0]):
            out[i] = argmin(lanes[i])

    @kernel
    def argmax_lanes(lanes, out):
        for i in range(lanes.shape[0]):
            out[i] = argmax(lanes[i])

    return ScanKernels(argmin, argmax, argmin_lanes, argmax_lanes)
