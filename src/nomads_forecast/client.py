from typing import TYPE_CHECKING

from nomads_forecast.settings.nomads_settings import NomadsSettings

if TYPE_CHECKING:
    from nomads_forecast.forecast._api import DODSDirectoryAPI
    from nomads_forecast.forecast._forecasts import Forecasts
    from nomads_forecast.forecast.provider import ForecastDataProvider


class NomadsClient:
    """Entry point holding the settings and the provider handle.

    Use it as a context manager, or call ``close``, to release the HTTP
    session used for the directory listings.

    Args:
        settings: Configuration; read from the environment when omitted.
        provider: Data provider used for fetches. Defaults to a DODSProvider
            built from ``settings``.
    """

    def __init__(
        self,
        settings: NomadsSettings | None = None,
        provider: "ForecastDataProvider | None" = None,
    ):
        self.settings = settings or NomadsSettings()
        self._provider = provider
        self._api = None
        self._forecasts = None

    @property
    def api(self) -> "DODSDirectoryAPI":
        """Directory listing API shared by every model of this client."""
        if self._api is None:
            from nomads_forecast.forecast._api import DODSDirectoryAPI

            self._api = DODSDirectoryAPI(self.settings)
        return self._api

    @property
    def provider(self) -> "ForecastDataProvider":
        if self._provider is None:
            from nomads_forecast.forecast.provider import DODSProvider

            self._provider = DODSProvider(self.settings)
        return self._provider

    @property
    def forecasts(self) -> "Forecasts":
        if self._forecasts is None:
            from nomads_forecast.forecast._forecasts import Forecasts

            self._forecasts = Forecasts(self)
        return self._forecasts

    def close(self) -> None:
        if self._api is not None:
            self._api.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
