from pathlib import Path
from typing import Protocol, runtime_checkable

import numpy as np
import xarray as xr
from matplotlib.colors import LinearSegmentedColormap, Normalize

from nomads_forecast.forecast._forecast_grid import ForecastGrid


@runtime_checkable
class Renderer(Protocol):
    """Turns a ForecastGrid into a file on disk."""

    def render(self, grid: ForecastGrid, output_path: Path, **kwargs) -> Path: ...


def gradient_colormap(colors: list[str]) -> LinearSegmentedColormap:
    cmap = LinearSegmentedColormap.from_list("forecast_gradient", colors)
    cmap.set_bad(alpha=0.0)
    return cmap


def value_range(data: xr.DataArray) -> tuple[float, float]:
    """Finite min/max of ``data``; (0, 1) when there is nothing to scale."""
    values = np.asarray(data.values, dtype=float)
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return 0.0, 1.0
    vmin, vmax = float(finite.min()), float(finite.max())
    if vmin == vmax:
        vmax = vmin + 1.0
    return vmin, vmax


def to_rgba(data: xr.DataArray, colors: list[str]) -> np.ndarray:
    """Color-map a 2D field to an RGBA array; NaNs become transparent."""
    values = np.ma.masked_invalid(np.asarray(data.values, dtype=float))
    vmin, vmax = value_range(data)
    rgba = gradient_colormap(colors)(Normalize(vmin=vmin, vmax=vmax)(values))
    rgba[..., 3] = np.where(np.ma.getmaskarray(values), 0.0, 1.0)
    return rgba
