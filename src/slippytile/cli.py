"""Command-line interface for slippytile.

Look up slippy-map tile addresses from the shell using the Typer framework.
"""
import logging
from typing import Optional

import typer

from . import config
from .projection import Coordinates
from .tile import InvalidTileError, Tile, check_zoom
from .tile_math import num_tiles_in_zoom, tile_extent_in_zoom

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


def _zoom(zoom):
    return config.default_zoom() if zoom is None else zoom


def _fail(err):
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
        env: str = typer.Option("DEFAULT", help="Dynaconf environment to use."),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages."),
):
    """Web Mercator slippy-map tile addressing."""
    if env != "DEFAULT":
        config.change_env(env)
    level = "DEBUG" if verbose else config.log_level()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.debug(f"Using environment {env}")


@app.command()
def locate(
        lon: float = typer.Option(..., help="Longitude in degrees."),
        lat: float = typer.Option(..., help="Latitude in degrees."),
        zoom: Optional[int] = typer.Option(None, "--zoom", "-z", help="Zoom level."),
):
    """Print the tile containing a longitude/latitude."""
    try:
        tile = Tile.from_lonlat(_zoom(zoom), lon, lat, strict=True)
    except InvalidTileError as err:
        _fail(err)
    typer.echo(str(tile))


@app.command()
def mercator(
        x: float = typer.Option(..., help="Web Mercator x in meters."),
        y: float = typer.Option(..., help="Web Mercator y in meters."),
        zoom: Optional[int] = typer.Option(None, "--zoom", "-z", help="Zoom level."),
):
    """Print the tile containing a Web Mercator coordinate."""
    try:
        tile = Tile.from_coordinates(_zoom(zoom), Coordinates(x, y), strict=True)
    except InvalidTileError as err:
        _fail(err)
    typer.echo(str(tile))


@app.command()
def info(zoom: Optional[int] = typer.Option(None, "--zoom", "-z", help="Zoom level.")):
    """Print grid size and tile extent for a zoom level."""
    zoom = _zoom(zoom)
    try:
        check_zoom(zoom)
    except InvalidTileError as err:
        _fail(err)
    typer.echo(f"zoom:   {zoom}")
    typer.echo(f"tiles:  {num_tiles_in_zoom(zoom)} x {num_tiles_in_zoom(zoom)}")
    typer.echo(f"extent: {tile_extent_in_zoom(zoom):.3f} m")


@app.command()
def check(z: int, x: int, y: int):
    """Check that z/x/y is a valid tile address."""
    try:
        tile = Tile.checked(z, x, y)
    except InvalidTileError as err:
        _fail(err)
    typer.echo(f"{tile} is valid")


@app.command()
def bounds(z: int, x: int, y: int):
    """Print west, south, east, north of a tile in degrees."""
    try:
        tile = Tile.checked(z, x, y)
    except InvalidTileError as err:
        _fail(err)
    typer.echo(" ".join(f"{v:.6f}" for v in tile.lonlat_bounds()))
