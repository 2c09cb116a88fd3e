"""Slippy-map tile addressing for Web Mercator coordinates."""

from .projection import (MAX_COORDINATE, MAX_VALID_LAT, Coordinates, Location,
                         lonlat_to_mercator, lonlat_to_webmercator,
                         mercator_to_lonlat)
from .tile_math import (MAX_ZOOM, mercx_to_tilex, mercy_to_tiley,
                        num_tiles_in_zoom, tile_extent_in_zoom, tile_indices)
from .tile import InvalidTileError, Tile
from .grouping import group_by_tile, unique_tiles

__version__ = "0.1.0"
