"""Shared pytest fixtures for slippytile tests."""

import numpy as np
import pytest

from slippytile import MAX_COORDINATE


@pytest.fixture
def rng():
    """Provide a seeded random generator so failures are reproducible."""
    return np.random.default_rng(20240611)


@pytest.fixture
def mercator_points(rng):
    """Provide projected points spread slightly past the Mercator square."""
    xs = rng.uniform(-1.2 * MAX_COORDINATE, 1.2 * MAX_COORDINATE, 500)
    ys = rng.uniform(-1.2 * MAX_COORDINATE, 1.2 * MAX_COORDINATE, 500)
    return xs, ys
