from nomads_forecast.settings.nomads_settings import NomadsSettings
from nomads_forecast.settings.render_settings import RenderSettings

__all__ = ["NomadsSettings", "RenderSettings"]
