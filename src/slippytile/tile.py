"""The Tile value type.

A ``Tile`` addresses one cell ``(x, y)`` of the ``2**z`` by ``2**z`` grid at
zoom level ``z`` of the usual Web Mercator slippy-map pyramid.

There are two ways to build one. The plain constructor is the fast path: it
stores its arguments as given and never checks them, so call
:meth:`Tile.valid` afterwards if in doubt. The ``from_location`` and
``from_coordinates`` class methods only check their preconditions with
``assert``, which disappears under ``python -O``. Use :meth:`Tile.checked`
or ``strict=True`` when the input comes from somewhere you do not trust;
those raise :class:`InvalidTileError` instead.
"""
import logging
from dataclasses import dataclass
from typing import Tuple

from .projection import (MAX_COORDINATE, Coordinates, Location,
                         lonlat_to_mercator, mercator_to_lonlat)
from .tile_math import (MAX_ZOOM, mercx_to_tilex, mercy_to_tiley,
                        num_tiles_in_zoom, tile_extent_in_zoom)

logger = logging.getLogger(__name__)


class InvalidTileError(ValueError):
    """Raised by the validated constructors for out-of-range input."""
    pass


def check_zoom(zoom):
    """Raise InvalidTileError unless ``zoom`` is between 0 and MAX_ZOOM."""
    if not 0 <= zoom <= MAX_ZOOM:
        raise InvalidTileError(f"zoom level {zoom} outside 0..{MAX_ZOOM}")


@dataclass(frozen=True, order=True)
class Tile:
    """A tile in the usual Mercator projection.

    Tiles are equal if all their attributes are equal. The ordering is
    lexicographic on ``(z, x, y)``. It exists so tiles can be sorted and
    used in ordered containers and says nothing about spatial adjacency or
    nesting.

    Parameters
    ----------
    z : int
        Zoom level, 0 to 30.
    x : int
        Tile column, counted from the left, ``0 <= x < 2**z``.
    y : int
        Tile row, counted from the top, ``0 <= y < 2**z``.
    """

    z: int
    x: int
    y: int

    @classmethod
    def checked(cls, z: int, x: int, y: int) -> "Tile":
        """Create a tile, raising InvalidTileError if it would be invalid."""
        check_zoom(z)
        n = num_tiles_in_zoom(z)
        if not (0 <= x < n and 0 <= y < n):
            logger.debug(f"Rejected tile {z}/{x}/{y}")
            raise InvalidTileError(
                f"tile {z}/{x}/{y} outside the {n}x{n} grid of zoom level {z}")
        return cls(z, x, y)

    @classmethod
    def from_coordinates(cls, zoom: int, coordinates: Coordinates, strict: bool = False) -> "Tile":
        """Create the tile at ``zoom`` containing Web Mercator coordinates.

        Coordinates outside the projection bounds are clamped onto the
        nearest edge tile.

        Parameters
        ----------
        zoom : int
            Zoom level, 0 to 30.
        coordinates : Coordinates
            Position in Web Mercator meters.
        strict : bool, optional
            Raise InvalidTileError for a bad zoom level or non-finite
            coordinates instead of asserting, by default False.
        """
        if strict:
            check_zoom(zoom)
            if not coordinates.valid():
                raise InvalidTileError(f"coordinates {coordinates} are not finite")
        else:
            assert 0 <= zoom <= MAX_ZOOM, f"zoom level {zoom} outside 0..{MAX_ZOOM}"
        return cls(zoom,
                   mercx_to_tilex(zoom, coordinates.x),
                   mercy_to_tiley(zoom, coordinates.y))

    @classmethod
    def from_location(cls, zoom: int, location: Location, strict: bool = False) -> "Tile":
        """Create the tile at ``zoom`` containing a geographic location.

        Parameters
        ----------
        zoom : int
            Zoom level, 0 to 30.
        location : Location
            Position in degrees. Must be valid.
        strict : bool, optional
            Raise InvalidTileError for a bad zoom level or an invalid
            location instead of asserting, by default False.
        """
        if strict:
            check_zoom(zoom)
            if not location.valid():
                raise InvalidTileError(f"location {location} is not valid")
        else:
            assert 0 <= zoom <= MAX_ZOOM, f"zoom level {zoom} outside 0..{MAX_ZOOM}"
            assert location.valid(), f"location {location} is not valid"
        coordinates = lonlat_to_mercator(location)
        return cls(zoom,
                   mercx_to_tilex(zoom, coordinates.x),
                   mercy_to_tiley(zoom, coordinates.y))

    @classmethod
    def from_lonlat(cls, zoom: int, lon: float, lat: float, strict: bool = False) -> "Tile":
        """Shorthand for ``Tile.from_location(zoom, Location(lon, lat))``."""
        return cls.from_location(zoom, Location(lon, lat), strict=strict)

    def valid(self) -> bool:
        """Check whether this tile is valid.

        For a tile to be valid the zoom level must be between 0 and 30 and
        the coordinates must each be between 0 and 2**zoom - 1.
        """
        if not 0 <= self.z <= MAX_ZOOM:
            return False
        n = num_tiles_in_zoom(self.z)
        return 0 <= self.x < n and 0 <= self.y < n

    def bounds(self) -> Tuple[Coordinates, Coordinates]:
        """Return the (lower left, upper right) corners in Web Mercator meters."""
        extent = tile_extent_in_zoom(self.z)
        left = -MAX_COORDINATE + self.x * extent
        top = MAX_COORDINATE - self.y * extent
        return Coordinates(left, top - extent), Coordinates(left + extent, top)

    def lonlat_bounds(self) -> Tuple[float, float, float, float]:
        """Return (west, south, east, north) of the tile in degrees."""
        lower_left, upper_right = self.bounds()
        sw = mercator_to_lonlat(lower_left)
        ne = mercator_to_lonlat(upper_right)
        return sw.lon, sw.lat, ne.lon, ne.lat

    def __str__(self):
        return f"{self.z}/{self.x}/{self.y}"
