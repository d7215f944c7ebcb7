"""Utility functions for forecast tests."""

import numpy as np
import pandas as pd
import xarray as xr

from nomads_forecast.forecast._forecast_grid import ForecastGrid
from nomads_forecast.forecast._types.model_run import ModelRun
from nomads_forecast.forecast._types.request import ForecastRequest
from nomads_forecast.types.geo import Lattice

RUN_START = "2024-11-17T12:00"


def encode_value(time_idx: int, lat_idx: int, lon_idx: int) -> float:
    """Value stored at a cell of the synthetic datasets, encoding its indices."""
    return time_idx * 1_000_000 + lat_idx * 1_000 + lon_idx


def create_gfs_dataset(
    resolution: float = 10.0,
    num_times: int = 5,
    variables: tuple[str, ...] = ("acpcpsfc",),
) -> xr.Dataset:
    """Create a global dataset laid out like a GFS DODS run.

    Args:
        resolution: Lattice resolution in degrees. Coarse by default to keep
            the arrays small.
        num_times: Number of 3-hourly forecast steps.
        variables: Names of the data variables to create.

    Returns:
        Dataset with dims (time, lat, lon), ascending coordinates.
    """
    lattice = Lattice.for_resolution(resolution)
    t, i, j = np.meshgrid(
        np.arange(num_times),
        np.arange(lattice.n_lat),
        np.arange(lattice.n_lon),
        indexing="ij",
    )
    values = encode_value(t, i, j).astype(float)
    times = pd.date_range(RUN_START, periods=num_times, freq="3h")
    coords = {"time": times, "lat": lattice.latitudes, "lon": lattice.longitudes}

    data_vars = {
        name: (
            ("time", "lat", "lon"),
            values.copy(),
            {"long_name": f"{name} description"},
        )
        for name in variables
    }
    return xr.Dataset(
        data_vars=data_vars,
        coords=coords,
        attrs={"title": "GFS test run starting from 12Z17nov2024"},
    )


def create_model_run(name: str = "gfs_0p50_12z", date: str = "gfs20241117") -> ModelRun:
    hour = name.split("_")[-1][:2].upper()
    return ModelRun(
        model="gfs_0p50",
        date=date,
        name=name,
        description=f"GFS 0.5 deg starting from {hour}Z17nov2024, "
        "downloaded Nov 17 17:13 UTC",
    )


def create_grid(
    request: ForecastRequest, lattice: Lattice, fill: float | None = None
) -> ForecastGrid:
    """Subset of a synthetic run matching ``request`` on ``lattice``.

    Longitudes wrap and latitudes are clamped the way the DODS provider does.
    """
    t0, t1 = request.time_range
    lat_idx = np.arange(
        max(request.lat_window[0], 0), min(request.lat_window[1], lattice.n_lat - 1) + 1
    )
    lon_idx = np.arange(request.lon_window[0], request.lon_window[1] + 1) % lattice.n_lon
    t, i, j = np.meshgrid(np.arange(t0, t1 + 1), lat_idx, lon_idx, indexing="ij")
    values = encode_value(t, i, j).astype(float)
    if fill is not None:
        values[:] = fill
    times = pd.Timestamp(RUN_START) + pd.to_timedelta(np.arange(t0, t1 + 1) * 3, "h")
    data = xr.DataArray(
        values,
        dims=("time", "lat", "lon"),
        coords={
            "time": times,
            "lat": lattice.lat_min + lat_idx * lattice.resolution,
            "lon": lattice.lon_min + lon_idx * lattice.resolution,
        },
        name=request.variable,
    )
    return ForecastGrid(request, data, description="synthetic run")


class FakeProvider:
    """In-memory ForecastDataProvider recording the requests it receives."""

    def __init__(self, lattice: Lattice | None = None, num_steps: int = 129):
        self.lattice = lattice or Lattice.for_resolution(0.5)
        self.num_steps = num_steps
        self.requests: list[ForecastRequest] = []

    def available_steps(self, model_id: str, model_run_id: str) -> list[int]:
        return list(range(self.num_steps))

    def describe_variables(self, model_id: str, model_run_id: str) -> dict[str, str]:
        return {
            "acpcpsfc": "surface convective precipitation [kg/m^2]",
            "tmp2m": "2 m above ground temperature [k]",
        }

    def fetch(self, request: ForecastRequest) -> ForecastGrid:
        self.requests.append(request)
        return create_grid(request, self.lattice)
