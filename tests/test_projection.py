"""Tests for the slippytile.projection module."""

import math

import numpy as np
import pytest

from slippytile.projection import (MAX_COORDINATE, MAX_VALID_LAT, Coordinates,
                                   Location, lonlat_to_mercator,
                                   lonlat_to_webmercator, mercator_to_lonlat)


class TestConstants:
    """Tests for the projection constants."""

    def test_max_coordinate(self):
        assert MAX_COORDINATE == pytest.approx(20037508.342789244)

    def test_max_valid_lat(self):
        assert MAX_VALID_LAT == pytest.approx(85.0511287798, abs=1e-9)


class TestLocation:
    """Tests for the Location value type."""

    @pytest.mark.parametrize("lon, lat", [
        (0.0, 0.0), (180.0, 90.0), (-180.0, -90.0), (13.37, 52.52),
    ])
    def test_valid(self, lon, lat):
        assert Location(lon, lat).valid()

    @pytest.mark.parametrize("lon, lat", [
        (180.1, 0.0), (-181.0, 0.0), (0.0, 90.5), (0.0, -91.0),
        (math.nan, 0.0), (0.0, math.inf),
    ])
    def test_invalid(self, lon, lat):
        assert not Location(lon, lat).valid()

    def test_is_immutable(self):
        location = Location(1.0, 2.0)
        with pytest.raises(AttributeError):
            location.lon = 3.0


class TestCoordinates:
    """Tests for the Coordinates value type."""

    def test_finite_is_valid(self):
        assert Coordinates(0.0, 0.0).valid()
        assert Coordinates(3 * MAX_COORDINATE, -3 * MAX_COORDINATE).valid()

    def test_non_finite_is_invalid(self):
        assert not Coordinates(math.nan, 0.0).valid()
        assert not Coordinates(0.0, -math.inf).valid()


class TestLonlatToMercator:
    """Tests for the lonlat_to_mercator function."""

    def test_origin(self):
        coords = lonlat_to_mercator(Location(0.0, 0.0))
        assert coords.x == pytest.approx(0.0, abs=1e-6)
        assert coords.y == pytest.approx(0.0, abs=1e-6)

    def test_antimeridian(self):
        assert lonlat_to_mercator(Location(180.0, 0.0)).x == pytest.approx(MAX_COORDINATE)
        assert lonlat_to_mercator(Location(-180.0, 0.0)).x == pytest.approx(-MAX_COORDINATE)

    def test_poles_are_clamped(self):
        """Poles land on the square's edge instead of at infinity."""
        north = lonlat_to_mercator(Location(0.0, 90.0))
        south = lonlat_to_mercator(Location(0.0, -90.0))
        assert north.y == pytest.approx(MAX_COORDINATE, abs=1e-3)
        assert south.y == pytest.approx(-MAX_COORDINATE, abs=1e-3)

    def test_inverse(self):
        location = mercator_to_lonlat(lonlat_to_mercator(Location(13.3777, 52.5163)))
        assert location.lon == pytest.approx(13.3777)
        assert location.lat == pytest.approx(52.5163)


class TestLonlatToWebmercator:
    """Tests for the array variant lonlat_to_webmercator."""

    def test_matches_scalar_version(self):
        lons = np.array([-120.0, 0.0, 45.5, 179.0])
        lats = np.array([-60.0, 10.0, 33.3, 80.0])
        xs, ys = lonlat_to_webmercator(lons, lats)
        for lon, lat, x, y in zip(lons, lats, xs, ys):
            coords = lonlat_to_mercator(Location(lon, lat))
            assert x == pytest.approx(coords.x)
            assert y == pytest.approx(coords.y)

    def test_returns_float64(self):
        xs, ys = lonlat_to_webmercator([1.0, 2.0], [3.0, 4.0])
        assert xs.dtype == np.float64
        assert ys.dtype == np.float64

    def test_clamps_latitude(self):
        _, ys = lonlat_to_webmercator([0.0, 0.0], [90.0, -90.0])
        assert np.all(np.isfinite(ys))
        np.testing.assert_allclose(ys, [MAX_COORDINATE, -MAX_COORDINATE], atol=1e-3)
