from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from nomads_forecast.errors.request_errors import InvalidRequestError
from nomads_forecast.forecast._grid import nearest_grid_point, window_around
from nomads_forecast.forecast._time import (
    DEFAULT_SAMPLING_INTERVAL_HOURS,
    latest_available_step,
    step_for_horizon,
)
from nomads_forecast.types.geo import Lattice, LatLon

DEFAULT_WINDOW_HALF_WIDTHS = (12, 14)


class ForecastRequest(BaseModel):
    """Everything a provider needs to fetch one subset of a model run.

    Index ranges are inclusive and zero-based. ``lon_window`` and
    ``lat_window`` may extend past the lattice edges.
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_id: str
    model_run_id: str
    variable: str
    time_range: tuple[int, int]
    lon_window: tuple[int, int]
    lat_window: tuple[int, int]

    @property
    def step(self) -> int:
        return self.time_range[0]


def _require(value: str | None, field: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidRequestError(f"Missing {field}", details=f"{field} must be set.")
    return str(value).strip()


def build_forecast_request(
    model_id: str,
    model_run_id: str,
    variable: str,
    horizon_hours: float | None,
    poi: LatLon,
    lattice: Lattice,
    window_half_widths: tuple[int, int] = DEFAULT_WINDOW_HALF_WIDTHS,
    sampling_interval_hours: float = DEFAULT_SAMPLING_INTERVAL_HOURS,
    available_steps: Sequence[int] | None = None,
) -> ForecastRequest:
    """Compose a ForecastRequest from a point of interest and a horizon.

    Identifiers are validated first, then the point is resolved on the
    lattice and the horizon is turned into a time step. Passing
    ``horizon_hours=None`` selects the last of ``available_steps``.

    Raises:
        InvalidRequestError: If an identifier or the variable is blank, or no
            horizon and no available steps are given.
        OutOfDomainError: If the point's latitude is outside [-90, 90].
        InvalidHorizonError: If the horizon is negative or not finite.
    """
    model_id = _require(model_id, "model_id")
    model_run_id = _require(model_run_id, "model_run_id")
    variable = _require(variable, "variable")

    center = nearest_grid_point(poi.lat, poi.lon, lattice)
    half_width_lon, half_width_lat = window_half_widths
    window = window_around(center, half_width_lon, half_width_lat)

    if horizon_hours is None:
        if available_steps is None:
            raise InvalidRequestError(
                "No forecast horizon given",
                details="Pass horizon_hours or the provider's available steps.",
            )
        step = latest_available_step(available_steps)
    else:
        step = step_for_horizon(horizon_hours, sampling_interval_hours)

    return ForecastRequest(
        model_id=model_id,
        model_run_id=model_run_id,
        variable=variable,
        time_range=(step, step),
        lon_window=window.lon_range,
        lat_window=window.lat_range,
    )


def check_request_inputs(
    variable: str,
    horizon_hours: float | None,
    poi: LatLon,
    lattice: Lattice,
    window_half_widths: tuple[int, int] = DEFAULT_WINDOW_HALF_WIDTHS,
    sampling_interval_hours: float = DEFAULT_SAMPLING_INTERVAL_HOURS,
) -> None:
    """Run the checks of build_forecast_request that need no model run.

    Callers that must look up the run or its steps first use this to fail
    before contacting the server. Raises the same errors as
    build_forecast_request.
    """
    _require(variable, "variable")
    center = nearest_grid_point(poi.lat, poi.lon, lattice)
    window_around(center, *window_half_widths)
    if horizon_hours is not None:
        step_for_horizon(horizon_hours, sampling_interval_hours)
