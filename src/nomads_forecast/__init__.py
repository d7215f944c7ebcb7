from nomads_forecast.client import NomadsClient
from nomads_forecast.types.geo import BoundingBox, LatLon

__all__ = ["BoundingBox", "LatLon", "NomadsClient"]
