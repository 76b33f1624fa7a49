"""
Xarray DataArray "accessor" for order statistics along a named dimension.

>>> da.ordstats.quantile([0.1, 0.5, 0.9], dim="time")
>>> da.ordstats.select_rank(0, dim="time")

Unlike the ``_mut`` functions, the accessor never reorders the DataArray:
the data are copied before selection.
"""
from typing import Union

import numpy as np
import xarray as xr

from ordstats.extrema import argmax_skipnan, argmin_skipnan
from ordstats.quantile import (
    quantiles_mut,
    quantiles_skipnan_mut,
    select_rank_mut,
)


def _check_dim(obj: xr.DataArray, dim: str) -> None:
    if dim not in obj.dims:
        raise ValueError(f"DataArray does not contain dimension: {dim}")


@xr.register_dataarray_accessor("ordstats")
class OrderStatisticsAccessor:
    """
    This "accessor" makes the selection and quantile functions available via
    the ``.ordstats`` attribute of DataArrays.
    """

    def __init__(self, obj: xr.DataArray):
        self.obj = obj

    def quantile(
        self,
        q: Union[float, list],
        dim: str,
        method: str = "linear",
        skipnan: bool = False,
    ) -> xr.DataArray:
        """
        Compute quantiles along a dimension.

        Parameters
        ----------
        q: float or list of floats
            Quantiles in the range [0, 1].
        dim: str
        method: str, default "linear"
            One of "lower", "higher", "nearest", "linear", "midpoint".
        skipnan: bool, default False
            Ignore NaN values. If False, NaN values raise an
            UndefinedOrderError.

        Returns
        -------
        quantiles: xr.DataArray
            Without ``dim``. For a list of quantiles, with a "quantile"
            dimension in front.
        """
        _check_dim(self.obj, dim)
        scalar = np.ndim(q) == 0
        qs = np.atleast_1d(np.asarray(q, dtype=np.float64))
        func = quantiles_skipnan_mut if skipnan else quantiles_mut

        def _quantiles(data: np.ndarray) -> np.ndarray:
            # apply_ufunc moves the core dimension to the end. The output
            # core dimension must be at the end as well.
            out = func(np.array(data), qs, axis=-1, method=method)
            return np.moveaxis(out, 0, -1)

        out = xr.apply_ufunc(
            _quantiles,
            self.obj,
            input_core_dims=[[dim]],
            output_core_dims=[["quantile"]],
            keep_attrs=True,
        )
        out = out.assign_coords(quantile=qs).transpose("quantile", ...)
        if scalar:
            return out.isel(quantile=0)
        return out

    def median(self, dim: str, skipnan: bool = False) -> xr.DataArray:
        return self.quantile(0.5, dim=dim, skipnan=skipnan)

    def select_rank(self, rank: int, dim: str) -> xr.DataArray:
        """
        Select the value at ``rank`` along a dimension: the value that would
        be found at that position if the data were sorted along ``dim``.
        """
        _check_dim(self.obj, dim)
        return xr.apply_ufunc(
            lambda data: select_rank_mut(np.array(data), rank, axis=-1),
            self.obj,
            input_core_dims=[[dim]],
            keep_attrs=True,
        )

    def argmin_skipnan(self, dim: str) -> xr.DataArray:
        """Index of the minimum along a dimension, ignoring NaN values."""
        _check_dim(self.obj, dim)
        return xr.apply_ufunc(
            lambda data: argmin_skipnan(data, axis=-1),
            self.obj,
            input_core_dims=[[dim]],
        )

    def argmax_skipnan(self, dim: str) -> xr.DataArray:
        """Index of the maximum along a dimension, ignoring NaN values."""
        _check_dim(self.obj, dim)
        return xr.apply_ufunc(
            lambda data: argmax_skipnan(data, axis=-1),
            self.obj,
            input_core_dims=[[dim]],
        )
