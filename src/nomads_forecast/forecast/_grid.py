"""Nearest grid point search and index windows on a regular lat/lon lattice."""

import math

import numpy as np

from nomads_forecast.errors.request_errors import InvalidRequestError, OutOfDomainError
from nomads_forecast.types.geo import GridPoint, IndexWindow, Lattice


def normalize_longitude(lon: float) -> float:
    """Map a longitude onto the lattice convention [0, 360)."""
    normalized = float(lon) % 360.0
    # -1e-15 % 360 rounds up to 360.0
    if normalized >= 360.0:
        normalized = 0.0
    return normalized


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def nearest_grid_point(lat: float, lon: float, lattice: Lattice) -> GridPoint:
    """Find the lattice cell closest to (lat, lon).

    Each axis is searched independently by absolute difference; on ties the
    first (lowest) index wins. Longitude differences are taken around the
    circle, so values just below 360 may resolve to index 0.

    Args:
        lat: Latitude in decimal degrees, within [-90, 90].
        lon: Longitude in decimal degrees, any value; wrapped modulo 360.
        lattice: The lattice to search.

    Returns:
        The zero-based GridPoint of the nearest lattice cell.

    Raises:
        OutOfDomainError: If the latitude is outside [-90, 90] or either
            coordinate is not finite.
    """
    if not _is_finite(lat) or not _is_finite(lon) or not -90.0 <= lat <= 90.0:
        raise OutOfDomainError(lat, lon)

    lon_diff = np.abs(normalize_longitude(lon) - lattice.longitudes)
    lon_diff = np.minimum(lon_diff, 360.0 - lon_diff)
    lat_diff = np.abs(lat - lattice.latitudes)

    return GridPoint(
        lon_index=int(np.argmin(lon_diff)), lat_index=int(np.argmin(lat_diff))
    )


def window_around(
    point: GridPoint, half_width_lon: int, half_width_lat: int
) -> IndexWindow:
    """Symmetric inclusive index window centered on ``point``.

    The window is not clamped to the lattice; indices may be negative or
    beyond the last cell.
    """
    if half_width_lon < 0 or half_width_lat < 0:
        raise InvalidRequestError(
            "Window half-widths must be non-negative",
            details=f"Got half_width_lon={half_width_lon}, "
            f"half_width_lat={half_width_lat}",
        )
    return IndexWindow(
        lon_range=(point.lon_index - half_width_lon, point.lon_index + half_width_lon),
        lat_range=(point.lat_index - half_width_lat, point.lat_index + half_width_lat),
    )
