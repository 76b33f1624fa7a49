"""
Errors raised by the selection and quantile functions.

Every error derives from OrderStatisticsError, and from the builtin exception
that describes it best, so ``except ValueError`` keeps working for callers who
do not care about the distinction.
"""


class OrderStatisticsError(Exception):
    pass


class EmptyInputError(OrderStatisticsError, ValueError):
    """Operation requested on zero (orderable) elements."""


class OutOfBoundsError(OrderStatisticsError, IndexError):
    """A rank or index is not smaller than the number of elements."""


class InvalidQuantileError(OrderStatisticsError, ValueError):
    """A quantile outside of [0, 1], or a percentile outside of [0, 100]."""


class UndefinedOrderError(OrderStatisticsError, ValueError):
    """A strict comparison encountered an unorderable value, such as NaN."""


class UnsupportedPolicyError(OrderStatisticsError, TypeError):
    """An interpolation method needs arithmetic the elements do not support."""
