from nomads_forecast.render.interactive_map import InteractiveMapRenderer
from nomads_forecast.render.places import DEFAULT_PLACES
from nomads_forecast.render.renderer import Renderer
from nomads_forecast.render.static_map import StaticMapRenderer

__all__ = [
    "DEFAULT_PLACES",
    "InteractiveMapRenderer",
    "Renderer",
    "StaticMapRenderer",
]
