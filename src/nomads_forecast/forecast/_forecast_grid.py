from datetime import datetime
from pathlib import Path

import numpy as np
import pandas as pd
import xarray as xr
from pydantic import validate_call

from nomads_forecast.forecast._types.request import ForecastRequest
from nomads_forecast.forecast.conversions import bytes_to_gb
from nomads_forecast.logging import get_logger

logger = get_logger(__name__)


class ForecastGrid:
    """Raw subset returned by a provider for one ForecastRequest.

    The wrapped DataArray has dims ``(time, lat, lon)`` with ascending
    latitudes and longitudes on the provider's 0..360 convention.
    """

    def __init__(
        self,
        request: ForecastRequest,
        raw_data: xr.DataArray,
        description: str = "",
    ):
        self._request = request
        self._raw_data = raw_data
        self._description = description

    @property
    def request(self) -> ForecastRequest:
        return self._request

    @property
    def variable(self) -> str:
        return self._request.variable

    @property
    def description(self) -> str:
        return self._description

    @property
    def nbytes_gb(self) -> float:
        return bytes_to_gb(self._raw_data.nbytes)

    @property
    def forecast_dates(self) -> list[datetime]:
        return [
            pd.Timestamp(t).to_pydatetime() for t in self._raw_data["time"].values
        ]

    def to_xarray(self) -> xr.DataArray:
        return self._raw_data

    def field(self, time_index: int = 0) -> xr.DataArray:
        """2D (lat, lon) slice of one forecast time."""
        return self._raw_data.isel(time=time_index)

    def rotate(self) -> "ForecastGrid":
        """Shift longitudes from 0..360 to -180..180, sorted ascending."""
        lon = self._raw_data["lon"]
        rotated = self._raw_data.assign_coords(lon=((lon + 180) % 360) - 180)
        rotated = rotated.sortby("lon")
        return ForecastGrid(self._request, rotated, description=self._description)

    def to_dataframe(
        self, time_index: int = 0, value_name: str = "precip"
    ) -> pd.DataFrame:
        """Long table with ``lon``, ``lat`` and value columns, NaNs dropped."""
        data = self.field(time_index)
        lon_grid, lat_grid = np.meshgrid(data["lon"].values, data["lat"].values)
        df = pd.DataFrame(
            {
                "lon": lon_grid.ravel(),
                "lat": lat_grid.ravel(),
                value_name: np.asarray(data.values, dtype=float).ravel(),
            }
        )
        return df.dropna(subset=[value_name]).reset_index(drop=True)

    @validate_call
    def to_netcdf(self, output_path: Path, overwrite: bool = False) -> Path:
        if output_path.exists() and not overwrite:
            logger.warning(
                f"{output_path} already exists. Skipping export of {self.variable}."
            )
            return output_path

        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(
            f"Writing {self.nbytes_gb:.4f}GB of {self.variable} to {output_path}..."
        )
        self._raw_data.to_netcdf(output_path)
        return output_path

    def __repr__(self) -> str:
        return (
            f"<ForecastGrid variable='{self.variable}' "
            f"run='{self._request.model_run_id}' step={self._request.step}>"
        )
