from nomads_forecast.types.geo import (
    BoundingBox,
    GridPoint,
    IndexWindow,
    Lattice,
    LatLon,
)

__all__ = ["BoundingBox", "GridPoint", "IndexWindow", "Lattice", "LatLon"]
