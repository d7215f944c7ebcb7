from typing import Protocol, runtime_checkable

import numpy as np
import xarray as xr

from nomads_forecast._utils.progress import download_progress
from nomads_forecast.errors.api_errors import (
    ProviderUnavailableError,
    VariableNotAvailableError,
)
from nomads_forecast.errors.request_errors import InvalidRequestError
from nomads_forecast.forecast._forecast_grid import ForecastGrid
from nomads_forecast.forecast._types.request import ForecastRequest
from nomads_forecast.logging import get_logger
from nomads_forecast.settings.nomads_settings import NomadsSettings

logger = get_logger(__name__)


@runtime_checkable
class ForecastDataProvider(Protocol):
    """Executes ForecastRequests against a forecast distribution service."""

    def available_steps(self, model_id: str, model_run_id: str) -> list[int]: ...

    def describe_variables(self, model_id: str, model_run_id: str) -> dict[str, str]: ...

    def fetch(self, request: ForecastRequest) -> ForecastGrid: ...


def wrap_indices(index_range: tuple[int, int], size: int) -> np.ndarray:
    """Inclusive range taken modulo ``size`` (periodic axis)."""
    start, stop = index_range
    return np.arange(start, stop + 1) % size


def clamp_indices(index_range: tuple[int, int], size: int) -> np.ndarray:
    """Inclusive range restricted to ``0..size-1``."""
    start, stop = index_range
    return np.arange(max(start, 0), min(stop, size - 1) + 1)


class DODSProvider:
    """Provider backed by the NOMADS GrADS-DODS (OPeNDAP) server.

    Longitude indices outside the lattice wrap around the globe; latitude
    indices are clamped to the poles. Both adjustments are logged. Failures
    while opening the run or transferring the subset raise
    ProviderUnavailableError.
    """

    def __init__(self, settings: NomadsSettings | None = None):
        self._settings = settings or NomadsSettings()

    def _get_url(self, model_id: str, model_run_id: str) -> str:
        base = self._settings.dods_base_url.rstrip("/")
        return f"{base}/{model_id}/{model_run_id}"

    def _open_dataset(self, model_id: str, model_run_id: str) -> xr.Dataset:
        url = self._get_url(model_id, model_run_id)
        logger.info(f"Opening dataset from {url}")
        try:
            return xr.open_dataset(
                url, engine=self._settings.opendap_engine, chunks={}
            )
        except OSError as e:
            raise ProviderUnavailableError(url, details=str(e)) from e

    def available_steps(self, model_id: str, model_run_id: str) -> list[int]:
        with self._open_dataset(model_id, model_run_id) as ds:
            return list(range(ds.sizes["time"]))

    def describe_variables(self, model_id: str, model_run_id: str) -> dict[str, str]:
        with self._open_dataset(model_id, model_run_id) as ds:
            return {
                str(name): str(var.attrs.get("long_name", ""))
                for name, var in ds.data_vars.items()
            }

    def fetch(
        self, request: ForecastRequest, print_progress: bool | None = None
    ) -> ForecastGrid:
        url = self._get_url(request.model_id, request.model_run_id)
        with self._open_dataset(request.model_id, request.model_run_id) as ds:
            if request.variable not in ds.data_vars:
                raise VariableNotAvailableError(request.variable, request.model_run_id)

            data = ds[request.variable]
            n_time, n_lat, n_lon = (
                data.sizes["time"],
                data.sizes["lat"],
                data.sizes["lon"],
            )

            t0, t1 = request.time_range
            if t0 < 0 or t1 >= n_time:
                raise InvalidRequestError(
                    f"Time range {request.time_range} is outside the model run",
                    details=f"{request.model_run_id} has {n_time} forecast steps.",
                )

            lon_idx = wrap_indices(request.lon_window, n_lon)
            lat_idx = clamp_indices(request.lat_window, n_lat)
            if len(lat_idx) == 0:
                raise InvalidRequestError(
                    f"Latitude window {request.lat_window} is outside the lattice"
                )
            if request.lon_window[0] < 0 or request.lon_window[1] >= n_lon:
                logger.warning(
                    f"Longitude window {request.lon_window} wraps around the "
                    f"{n_lon}-point lattice"
                )
            if len(lat_idx) != request.lat_window[1] - request.lat_window[0] + 1:
                logger.warning(
                    f"Latitude window {request.lat_window} clamped to "
                    f"({int(lat_idx[0])}, {int(lat_idx[-1])})"
                )

            subset = data.isel(time=slice(t0, t1 + 1), lat=lat_idx, lon=lon_idx)
            label = (
                f"Fetching {request.variable} from {request.model_run_id} "
                f"(time={request.time_range}, lat={request.lat_window}, "
                f"lon={request.lon_window})"
            )
            try:
                with download_progress(self._settings, print_progress, label):
                    subset = subset.load()
            except (OSError, RuntimeError) as e:
                raise ProviderUnavailableError(url, details=str(e)) from e
            description = str(ds.attrs.get("title", ""))

        return ForecastGrid(request, subset, description=description)
