"""
Assemble the selection kernels for a comparator.

Compiling the kernels is expensive, so an engine is built once per
comparator and cached. Since numba specializes on argument types, a single
engine serves e.g. every integer width.
"""
from typing import Callable, Dict, NamedTuple

from ordstats.comparator import TotalOrder, get_comparator
from ordstats.selection.multiselect import make_multiselect_kernels
from ordstats.selection.partition import make_partition_kernels
from ordstats.selection.scan import make_scan_kernels
from ordstats.selection.select import make_select_kernels
from ordstats.selection.utils import get_compilers


class SelectionEngine(NamedTuple):
    comparator: TotalOrder
    # partition.py
    median_of_three: Callable
    partition: Callable
    insertion_sort: Callable
    partition_unorderable: Callable
    # select.py
    group_medians: Callable
    select_linear: Callable
    select: Callable
    # multiselect.py
    select_many: Callable
    select_many_lanes: Callable
    # scan.py
    argmin: Callable
    argmax: Callable
    argmin_lanes: Callable
    argmax_lanes: Callable


_ENGINES: Dict[TotalOrder, SelectionEngine] = {}


def build_engine(comparator: TotalOrder) -> SelectionEngine:
    compilers = get_compilers(comparator.jit)
    partition_kernels = make_partition_kernels(comparator, compilers)
    select_kernels = make_select_kernels(partition_kernels, compilers)
    multiselect_kernels = make_multiselect_kernels(
        select_kernels.select, compilers
    )
    scan_kernels = make_scan_kernels(comparator, compilers)
    return SelectionEngine(
        comparator=comparator,
        **partition_kernels._asdict(),
        **select_kernels._asdict(),
        **multiselect_kernels._asdict(),
        **scan_kernels._asdict(),
    )


def get_engine(comparator: TotalOrder) -> SelectionEngine:
    try:
        return _ENGINES[comparator]
    except KeyError:
        engine = build_engine(comparator)
        _ENGINES[comparator] = engine
        return engine


def engine_for(dtype) -> SelectionEngine:
    return get_engine(get_comparator(dtype))
