"""Tile grid arithmetic for the Web Mercator slippy-map pyramid.

All functions here are pure and hold no state, so they are safe to call
from any number of threads at once.
"""
import math
from typing import Tuple

import numpy as np

from .projection import MAX_COORDINATE

MAX_ZOOM = 30


def _clamp(value, lower, upper):
    return lower if value < lower else (upper if upper < value else value)


def _to_index(zoom: int, value: float) -> int:
    """Floor a fractional tile position and clamp it into the grid."""
    if math.isnan(value):
        raise ValueError("cannot compute a tile index from NaN")
    upper = num_tiles_in_zoom(zoom) - 1
    if math.isinf(value):
        return 0 if value < 0 else upper
    return _clamp(math.floor(value), 0, upper)


def num_tiles_in_zoom(zoom: int) -> int:
    """Return the number of tiles in each direction for a zoom level."""
    return 1 << zoom


def tile_extent_in_zoom(zoom: int) -> float:
    """Return the width or height of one tile in Web Mercator meters."""
    return MAX_COORDINATE * 2 / num_tiles_in_zoom(zoom)


def mercx_to_tilex(zoom: int, x: float) -> int:
    """Get the tile column for a Web Mercator x coordinate.

    Tiles are numbered from left to right starting at 0. Coordinates outside
    the projection bounds are clamped to the first or last column.
    """
    return _to_index(zoom, (x + MAX_COORDINATE) / tile_extent_in_zoom(zoom))


def mercy_to_tiley(zoom: int, y: float) -> int:
    """Get the tile row for a Web Mercator y coordinate.

    Tiles are numbered from top to bottom starting at 0, the reverse of the
    projection's y axis. Coordinates outside the projection bounds are
    clamped to the first or last row.
    """
    return _to_index(zoom, (MAX_COORDINATE - y) / tile_extent_in_zoom(zoom))


def tile_indices(zoom: int, xs: np.ndarray, ys: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Vectorised :func:`mercx_to_tilex` and :func:`mercy_to_tiley`.

    Parameters
    ----------
    zoom : int
        Zoom level.
    xs, ys : numpy.ndarray
        Web Mercator coordinates in meters. Must not contain NaN.

    Returns
    -------
    tuple of numpy.ndarray
        (tile_x, tile_y) as int64 arrays.
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    if np.isnan(xs).any() or np.isnan(ys).any():
        raise ValueError("cannot compute a tile index from NaN")
    upper = num_tiles_in_zoom(zoom) - 1
    extent = tile_extent_in_zoom(zoom)
    tx = np.clip(np.floor((xs + MAX_COORDINATE) / extent), 0, upper)
    ty = np.clip(np.floor((MAX_COORDINATE - ys) / extent), 0, upper)
    return tx.astype(np.int64), ty.astype(np.int64)
