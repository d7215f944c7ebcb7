from typing import TYPE_CHECKING

from pydantic import validate_call

from nomads_forecast.forecast._forecast_grid import ForecastGrid
from nomads_forecast.forecast._model_meta import ModelMetaInfo, get_model_meta_info
from nomads_forecast.forecast._time import latest_available_step
from nomads_forecast.forecast._types.model_run import ModelRun
from nomads_forecast.forecast._types.request import (
    ForecastRequest,
    build_forecast_request,
    check_request_inputs,
)
from nomads_forecast.forecast.models import Models
from nomads_forecast.forecast.variables import Variables, variable_name
from nomads_forecast.logging import get_logger
from nomads_forecast.types.geo import Lattice, LatLon

if TYPE_CHECKING:
    from nomads_forecast.client import NomadsClient

logger = get_logger(__name__)


class Forecast:
    """Forecast access for one DODS model family.

    Examples:
        >>> from nomads_forecast import NomadsClient, LatLon
        >>> from nomads_forecast.forecast import Models
        >>> client = NomadsClient()
        >>> forecast = client.forecasts.get_model(Models.GFS_0P50)
        >>> grid = forecast.get_forecast(
        ...     LatLon(lat=-19.78753, lon=-51.98899), horizon_hours=348
        ... )
    """

    def __init__(self, client: "NomadsClient", model: Models):
        self._client = client
        self._model = model
        self._api = client.api

    @property
    def name(self) -> str:
        return self._model.value

    @property
    def meta(self) -> ModelMetaInfo:
        return get_model_meta_info(self._model)

    @property
    def lattice(self) -> Lattice:
        return self.meta.lattice

    def get_available_dates(self) -> list[str]:
        return self._api.get_model_dates(self.name)

    def get_model_runs(self, date: str | None = None) -> list[ModelRun]:
        """Runs of ``date``, or of the most recent date directory if omitted."""
        if date is None:
            date = latest_available_step(self.get_available_dates())
        return self._api.get_model_runs(self.name, date)

    def get_latest_model_run(self) -> ModelRun:
        model_run = latest_available_step(self.get_model_runs())
        logger.info(f"Latest model run: {model_run.caption}")
        return model_run

    def get_variables(self, model_run: ModelRun | None = None) -> dict[str, str]:
        """Variable names of a run mapped to their descriptions."""
        if model_run is None:
            model_run = self.get_latest_model_run()
        return self._client.provider.describe_variables(self.name, model_run.run_id)

    def get_available_steps(self, model_run: ModelRun | None = None) -> list[int]:
        if model_run is None:
            model_run = self.get_latest_model_run()
        return self._client.provider.available_steps(self.name, model_run.run_id)

    def build_request(
        self,
        point: LatLon,
        variable: Variables | str | None = None,
        horizon_hours: float | None = None,
        model_run: ModelRun | None = None,
        window_half_widths: tuple[int, int] | None = None,
    ) -> ForecastRequest:
        """Resolve a point and a horizon into a ForecastRequest for a run.

        Args:
            point: Point of interest the index window is centered on.
            variable: DODS variable name. Defaults to the configured variable.
            horizon_hours: Hours ahead. None selects the last available step.
            model_run: Run to query. Defaults to the latest published run.
            window_half_widths: (longitude, latitude) half-widths in cells.

        Returns:
            The request, without any data having been fetched.

        Raises:
            OutOfDomainError, InvalidHorizonError, InvalidRequestError: Before
                the run listing or the run's steps are requested.
        """
        settings = self._client.settings
        if variable is None:
            variable = settings.variable
        if window_half_widths is None:
            window_half_widths = settings.window_half_widths
        check_request_inputs(
            variable=variable_name(variable),
            horizon_hours=horizon_hours,
            poi=point,
            lattice=self.lattice,
            window_half_widths=window_half_widths,
            sampling_interval_hours=self.meta.sampling_interval_hours,
        )

        if model_run is None:
            model_run = self.get_latest_model_run()

        available_steps = None
        if horizon_hours is None:
            available_steps = self.get_available_steps(model_run)

        return build_forecast_request(
            model_id=self.name,
            model_run_id=model_run.run_id,
            variable=variable_name(variable),
            horizon_hours=horizon_hours,
            poi=point,
            lattice=self.lattice,
            window_half_widths=window_half_widths,
            sampling_interval_hours=self.meta.sampling_interval_hours,
            available_steps=available_steps,
        )

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def get_forecast(
        self,
        point: LatLon,
        variable: Variables | str | None = None,
        horizon_hours: float | None = None,
        model_run: ModelRun | None = None,
        window_half_widths: tuple[int, int] | None = None,
    ) -> ForecastGrid:
        """Build the request for ``point`` and fetch it from the provider."""
        request = self.build_request(
            point,
            variable=variable,
            horizon_hours=horizon_hours,
            model_run=model_run,
            window_half_widths=window_half_widths,
        )
        return self._client.provider.fetch(request)

    def __repr__(self) -> str:
        return f"<Forecast model='{self.name}'>"

    def __str__(self) -> str:
        return self.name
