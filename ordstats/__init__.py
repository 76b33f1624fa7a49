from ordstats import accessor
from ordstats.comparator import get_comparator
from ordstats.errors import (
    EmptyInputError,
    InvalidQuantileError,
    OrderStatisticsError,
    OutOfBoundsError,
    UndefinedOrderError,
    UnsupportedPolicyError,
)
from ordstats.extrema import (
    argmax,
    argmax_skipnan,
    argmin,
    argmin_skipnan,
    max,
    max_skipnan,
    min,
    min_skipnan,
)
from ordstats.interpolate import INTERPOLATION_METHODS
from ordstats.quantile import (
    percentile_mut,
    percentile_skipnan_mut,
    percentiles_mut,
    percentiles_skipnan_mut,
    quantile_mut,
    quantile_skipnan_mut,
    quantiles_mut,
    quantiles_skipnan_mut,
    select_rank_mut,
    select_ranks_mut,
    sorted_values_mut,
)

__version__ = "0.1.0"

__all__ = (
    "accessor",
    "get_comparator",
    "EmptyInputError",
    "InvalidQuantileError",
    "OrderStatisticsError",
    "OutOfBoundsError",
    "UndefinedOrderError",
    "UnsupportedPolicyError",
    "argmax",
    "argmax_skipnan",
    "argmin",
    "argmin_skipnan",
    "max",
    "max_skipnan",
    "min",
    "min_skipnan",
    "INTERPOLATION_METHODS",
    "percentile_mut",
    "percentile_skipnan_mut",
    "percentiles_mut",
    "percentiles_skipnan_mut",
    "quantile_mut",
    "quantile_skipnan_mut",
    "quantiles_mut",
    "quantiles_skipnan_mut",
    "select_rank_mut",
    "select_ranks_mut",
    "sorted_values_mut",
)
