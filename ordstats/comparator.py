"""
Total orders over array elements.

Every selection kernel is built around a single comparison function,
``less(a, b)``. This module provides one comparator per family of dtypes.
Each comparator states:

* how two elements compare (``less``);
* which elements are unorderable (``unorderable``), e.g. NaN for floats;
* whether the quantile interpolation methods that need arithmetic
  ("linear", "midpoint") are available;
* whether its kernels can be compiled by numba (``jit``).

Unorderable values are ordered after every other value, so that ``less``
remains a strict total order. The quantile functions never rely on this
though: in strict mode an unorderable value raises an UndefinedOrderError
before anything is reordered, in skip mode unorderable values are moved out
of the way first.
"""
import numpy as np

from ordstats.errors import UndefinedOrderError


class TotalOrder:
    """Natural order of integers, without unorderable values."""

    name = "natural"
    has_sentinel = False
    supports_arithmetic = True
    fill_value = None

    def __init__(self, jit: bool = True):
        self.jit = jit

    def __repr__(self):
        return f"{type(self).__name__}(jit={self.jit})"

    @staticmethod
    def less(a, b) -> bool:
        return a < b

    @staticmethod
    def unorderable(a) -> bool:
        return False

    def has_unorderable(self, values: np.ndarray) -> bool:
        return False

    def result_dtype(self, dtype: np.dtype, arithmetic: bool) -> np.dtype:
        """Dtype of a quantile computed from values of ``dtype``."""
        if arithmetic:
            return np.dtype(np.float64)
        return np.dtype(dtype)


class BooleanOrder(TotalOrder):
    name = "boolean"
    supports_arithmetic = False


class FloatOrder(TotalOrder):
    """IEEE floats: NaN is unorderable, and sorts after +inf."""

    name = "float"
    has_sentinel = True
    fill_value = np.nan

    @staticmethod
    def less(a, b) -> bool:
        # Nan-aware <
        if np.isnan(a):
            return False
        elif np.isnan(b):
            return True
        else:
            return a < b

    @staticmethod
    def unorderable(a) -> bool:
        return np.isnan(a)

    def has_unorderable(self, values: np.ndarray) -> bool:
        return bool(np.isnan(values).any())

    def result_dtype(self, dtype: np.dtype, arithmetic: bool) -> np.dtype:
        return np.dtype(dtype)


class DatetimeOrder(TotalOrder):
    """datetime64 and timedelta64: NaT is unorderable."""

    name = "datetime"
    has_sentinel = True
    supports_arithmetic = False
    fill_value = "NaT"

    @staticmethod
    def less(a, b) -> bool:
        if np.isnat(a):
            return False
        elif np.isnat(b):
            return True
        else:
            return a < b

    @staticmethod
    def unorderable(a) -> bool:
        return np.isnat(a)

    def has_unorderable(self, values: np.ndarray) -> bool:
        return bool(np.isnat(values).any())


class TextOrder(TotalOrder):
    """Lexicographic order of str and bytes."""

    name = "text"
    supports_arithmetic = False


class ObjectOrder(TotalOrder):
    """
    Python objects, compared with ``<``.

    Values that do not equal themselves (float("nan"), Decimal("NaN")) are
    unorderable. Whether "linear" and "midpoint" work depends on the objects:
    Fraction and Decimal support it, str does not.
    """

    name = "object"
    has_sentinel = True
    fill_value = None

    @staticmethod
    def less(a, b) -> bool:
        if a != a:
            return False
        elif b != b:
            return True
        try:
            return a < b
        except TypeError as e:
            raise UndefinedOrderError(
                f"Cannot order {type(a).__name__} and {type(b).__name__}"
            ) from e

    @staticmethod
    def unorderable(a) -> bool:
        return a != a

    def has_unorderable(self, values: np.ndarray) -> bool:
        return bool(np.asarray(values != values, dtype=bool).any())

    def result_dtype(self, dtype: np.dtype, arithmetic: bool) -> np.dtype:
        return np.dtype(object)


INTEGER = TotalOrder()
INTEGER_PYTHON = TotalOrder(jit=False)
BOOLEAN = BooleanOrder()
FLOAT = FloatOrder()
FLOAT_PYTHON = FloatOrder(jit=False)
DATETIME = DatetimeOrder(jit=False)
TEXT = TextOrder(jit=False)
OBJECT = ObjectOrder(jit=False)


def get_comparator(dtype) -> TotalOrder:
    """
    Return the total order for elements of ``dtype``.

    numba compiles the kernels for native byte order booleans, integers,
    float32 and float64. Every other orderable dtype runs the same kernels as
    plain Python.

    Parameters
    ----------
    dtype: numpy dtype or anything np.dtype accepts

    Returns
    -------
    comparator: TotalOrder
    """
    dtype = np.dtype(dtype)
    kind = dtype.kind
    if kind == "f":
        if dtype.isnative and dtype.itemsize in (4, 8):
            return FLOAT
        return FLOAT_PYTHON
    elif kind in "iu":
        if dtype.isnative:
            return INTEGER
        return INTEGER_PYTHON
    elif kind == "b":
        return BOOLEAN
    elif kind in "mM":
        return DATETIME
    elif kind in "US":
        return TEXT
    elif kind == "O":
        return OBJECT
    raise TypeError(f"Elements of dtype {dtype} have no total order")
