from nomads_forecast.forecast._forecast_grid import ForecastGrid
from nomads_forecast.forecast._grid import (
    nearest_grid_point,
    normalize_longitude,
    window_around,
)
from nomads_forecast.forecast._time import (
    horizon_for_step,
    latest_available_step,
    step_for_horizon,
)
from nomads_forecast.forecast._types.model_run import ModelRun
from nomads_forecast.forecast._types.request import (
    ForecastRequest,
    build_forecast_request,
    check_request_inputs,
)
from nomads_forecast.forecast.forecast import Forecast
from nomads_forecast.forecast.models import Models
from nomads_forecast.forecast.provider import DODSProvider, ForecastDataProvider
from nomads_forecast.forecast.variables import Variable, Variables

__all__ = [
    "DODSProvider",
    "Forecast",
    "ForecastDataProvider",
    "ForecastGrid",
    "ForecastRequest",
    "ModelRun",
    "Models",
    "Variable",
    "Variables",
    "build_forecast_request",
    "check_request_inputs",
    "horizon_for_step",
    "latest_available_step",
    "nearest_grid_point",
    "normalize_longitude",
    "step_for_horizon",
    "window_around",
]
