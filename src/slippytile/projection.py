"""Web Mercator (EPSG:3857) projection helpers.

This module holds the geographic ``Location`` and projected ``Coordinates``
value types and the transforms between them. The actual projection math is
delegated to pyproj.
"""
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from pyproj import Transformer

WEBMERCATOR_RADIUS = 6378137.0

# Half the side length of the Web Mercator square, in meters.
MAX_COORDINATE = math.pi * WEBMERCATOR_RADIUS

# Latitude at which the projection reaches MAX_COORDINATE.
MAX_VALID_LAT = math.degrees(math.atan(math.sinh(math.pi)))

# Web Mercator transformers (lon/lat <-> x/y meters)
_transformer_to_webmerc = Transformer.from_crs(
    "EPSG:4326", "EPSG:3857", always_xy=True
)
_transformer_from_webmerc = Transformer.from_crs(
    "EPSG:3857", "EPSG:4326", always_xy=True
)


@dataclass(frozen=True)
class Location:
    """A geographic position in degrees."""

    lon: float
    lat: float

    def valid(self) -> bool:
        """Check that both values are finite and inside the lon/lat ranges."""
        if not (math.isfinite(self.lon) and math.isfinite(self.lat)):
            return False
        return -180.0 <= self.lon <= 180.0 and -90.0 <= self.lat <= 90.0


@dataclass(frozen=True)
class Coordinates:
    """A position in the Web Mercator plane, in meters."""

    x: float
    y: float

    def valid(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


def _clamp_lat(lat):
    return min(max(lat, -MAX_VALID_LAT), MAX_VALID_LAT)


def lonlat_to_mercator(location: Location) -> Coordinates:
    """Project a location to Web Mercator coordinates.

    Latitudes beyond ``MAX_VALID_LAT`` are clamped first, so locations near
    the poles land on the edge of the Mercator square instead of at
    infinity.

    Parameters
    ----------
    location : Location
        Position to project. Must be valid.

    Returns
    -------
    Coordinates
        Projected position in meters.
    """
    x, y = _transformer_to_webmerc.transform(location.lon, _clamp_lat(location.lat))
    return Coordinates(float(x), float(y))


def mercator_to_lonlat(coordinates: Coordinates) -> Location:
    """Inverse of :func:`lonlat_to_mercator`."""
    lon, lat = _transformer_from_webmerc.transform(coordinates.x, coordinates.y)
    return Location(float(lon), float(lat))


def lonlat_to_webmercator(lons: np.ndarray, lats: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Transform longitude/latitude arrays to Web Mercator coordinates.

    Parameters
    ----------
    lons : numpy.ndarray
        Longitude values in degrees.
    lats : numpy.ndarray
        Latitude values in degrees. Clamped to ``MAX_VALID_LAT``.

    Returns
    -------
    tuple of numpy.ndarray
        (x, y) coordinates in Web Mercator meters, as float64 so that
        values on tile edges are not shifted by rounding.
    """
    lons = np.asarray(lons, dtype=np.float64)
    lats = np.clip(np.asarray(lats, dtype=np.float64), -MAX_VALID_LAT, MAX_VALID_LAT)
    x, y = _transformer_to_webmerc.transform(lons, lats)
    return np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)
