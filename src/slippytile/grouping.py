"""Bucket many geographic points into tiles.

Useful for deduplicating features by tile or for working out which tiles a
dataset touches before rendering.
"""
import logging
from typing import Dict, List

import numpy as np

from .projection import lonlat_to_webmercator
from .tile import InvalidTileError, Tile, check_zoom
from .tile_math import tile_indices

logger = logging.getLogger(__name__)


def _point_tiles(zoom, lons, lats):
    check_zoom(zoom)
    lons = np.asarray(lons, dtype=np.float64).ravel()
    lats = np.asarray(lats, dtype=np.float64).ravel()
    if lons.shape != lats.shape:
        raise ValueError(f"got {lons.size} longitudes but {lats.size} latitudes")
    if lons.size == 0:
        empty = np.empty(0, dtype=np.int64)
        return empty, empty
    bad = ~(np.isfinite(lons) & np.isfinite(lats)
            & (np.abs(lons) <= 180) & (np.abs(lats) <= 90))
    if bad.any():
        raise InvalidTileError(f"{int(bad.sum())} of {lons.size} points are not valid locations")
    xs, ys = lonlat_to_webmercator(lons, lats)
    return tile_indices(zoom, xs, ys)


def unique_tiles(zoom: int, lons: np.ndarray, lats: np.ndarray) -> List[Tile]:
    """Return the sorted distinct tiles at ``zoom`` containing the points.

    Parameters
    ----------
    zoom : int
        Zoom level, 0 to 30.
    lons, lats : array_like
        Longitudes and latitudes in degrees, same length.

    Returns
    -------
    list of Tile
        Each tile appears once, in tile order.
    """
    tx, ty = _point_tiles(zoom, lons, lats)
    if tx.size == 0:
        return []
    pairs = np.unique(np.stack([tx, ty], axis=1), axis=0)
    tiles = sorted(Tile(zoom, int(x), int(y)) for x, y in pairs)
    logger.debug(f"{tx.size} points fall in {len(tiles)} tiles at zoom {zoom}")
    return tiles


def group_by_tile(zoom: int, lons: np.ndarray, lats: np.ndarray) -> Dict[Tile, np.ndarray]:
    """Group point indices by the tile they fall in.

    Parameters
    ----------
    zoom : int
        Zoom level, 0 to 30.
    lons, lats : array_like
        Longitudes and latitudes in degrees, same length.

    Returns
    -------
    dict
        Maps each Tile to an int array of indices into ``lons``/``lats``.
        Keys are inserted in tile order.
    """
    tx, ty = _point_tiles(zoom, lons, lats)
    groups = {}
    for idx, (x, y) in enumerate(zip(tx.tolist(), ty.tolist())):
        groups.setdefault(Tile(zoom, x, y), []).append(idx)
    logger.debug(f"Grouped {tx.size} points into {len(groups)} tiles at zoom {zoom}")
    return {tile: np.asarray(groups[tile], dtype=np.int64) for tile in sorted(groups)}
