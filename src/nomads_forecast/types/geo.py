import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.dataclasses import dataclass

_SPAN_TOLERANCE = 1e-9


@dataclass
class LatLon:
    """Geographic coordinate representing a point on Earth's surface.

    The coordinate is not range-checked here; the grid indexer rejects
    latitudes outside the lattice domain when the point is resolved.

    Attributes:
        lat: Latitude in decimal degrees.
        lon: Longitude in decimal degrees, either -180..180 or 0..360.
        label: Optional display name, used for map labels.
    """

    lat: float
    lon: float
    label: str | None = None


@dataclass(frozen=True)
class BoundingBox:
    west: float
    east: float
    south: float
    north: float

    @classmethod
    def from_extent(cls, extent: tuple[float, float, float, float]) -> "BoundingBox":
        west, east, south, north = extent
        return cls(west=west, east=east, south=south, north=north)

    def to_extent(self) -> tuple[float, float, float, float]:
        return self.west, self.east, self.south, self.north


def _divides(span: float, resolution: float) -> bool:
    cells = span / resolution
    return abs(cells - round(cells)) < _SPAN_TOLERANCE


class Lattice(BaseModel):
    """Fixed global grid of candidate sample points of a forecast model.

    Coordinates run in ascending order from ``lon_min``/``lat_min`` in steps of
    ``resolution``; both spans must be an exact multiple of the resolution.
    """

    model_config = ConfigDict(frozen=True)

    lon_min: float = 0.0
    lon_max: float = 359.5
    lat_min: float = -90.0
    lat_max: float = 90.0
    resolution: float = Field(default=0.5, gt=0)

    @model_validator(mode="after")
    def _check_spans(self) -> "Lattice":
        if self.lon_max < self.lon_min or self.lat_max < self.lat_min:
            raise ValueError("Lattice bounds must be ordered (min <= max)")
        if not _divides(self.lon_max - self.lon_min, self.resolution):
            raise ValueError(
                f"Resolution {self.resolution} does not divide the longitude span "
                f"{self.lon_min}..{self.lon_max}"
            )
        if not _divides(self.lat_max - self.lat_min, self.resolution):
            raise ValueError(
                f"Resolution {self.resolution} does not divide the latitude span "
                f"{self.lat_min}..{self.lat_max}"
            )
        return self

    @classmethod
    def for_resolution(cls, resolution: float) -> "Lattice":
        """Global lattice covering 0..360 (exclusive) and -90..90."""
        return cls(lon_max=360.0 - resolution, resolution=resolution)

    @property
    def n_lon(self) -> int:
        return int(round((self.lon_max - self.lon_min) / self.resolution)) + 1

    @property
    def n_lat(self) -> int:
        return int(round((self.lat_max - self.lat_min) / self.resolution)) + 1

    @property
    def longitudes(self) -> np.ndarray:
        return self.lon_min + np.arange(self.n_lon) * self.resolution

    @property
    def latitudes(self) -> np.ndarray:
        return self.lat_min + np.arange(self.n_lat) * self.resolution

    def longitude_at(self, index: int) -> float:
        return self.lon_min + index * self.resolution

    def latitude_at(self, index: int) -> float:
        return self.lat_min + index * self.resolution


class GridPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    lon_index: int
    lat_index: int


class IndexWindow(BaseModel):
    """Inclusive index ranges around a grid point. Bounds are not clamped."""

    model_config = ConfigDict(frozen=True)

    lon_range: tuple[int, int]
    lat_range: tuple[int, int]

    @model_validator(mode="after")
    def _check_order(self) -> "IndexWindow":
        if self.lon_range[0] > self.lon_range[1]:
            raise ValueError(f"Invalid longitude range {self.lon_range}")
        if self.lat_range[0] > self.lat_range[1]:
            raise ValueError(f"Invalid latitude range {self.lat_range}")
        return self
