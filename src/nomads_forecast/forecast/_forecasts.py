from typing import TYPE_CHECKING

from nomads_forecast.forecast._model_meta import to_model
from nomads_forecast.forecast.forecast import Forecast
from nomads_forecast.forecast.models import Models

if TYPE_CHECKING:
    from nomads_forecast.client import NomadsClient


class _LazyForecastWrapper:
    def __init__(self, **kwargs):
        self._kwargs = kwargs
        self._instance = None

    def get_forecast(self) -> Forecast:
        if self._instance is None:
            self._instance = Forecast(**self._kwargs)
        return self._instance


class Forecasts:
    def __init__(self, client: "NomadsClient") -> None:
        self._client = client
        self._lazy_forecasts = {
            model: _LazyForecastWrapper(client=client, model=model)
            for model in Models
        }

    def __getitem__(self, model: Models | str) -> Forecast:
        return self.get_model(model)

    def get_model(self, model: Models | str) -> Forecast:
        return self._lazy_forecasts[to_model(model)].get_forecast()

    def get_available_models(self) -> list[str]:
        """Model families currently published on the DODS server."""
        return self._client.api.get_available_models()
