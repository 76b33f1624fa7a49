from ordstats.selection.engine import (
    SelectionEngine,
    build_engine,
    engine_for,
    get_engine,
)

__all__ = (
    "SelectionEngine",
    "build_engine",
    "engine_for",
    "get_engine",
)
