"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def normal_pair(rng):
    """Two strongly correlated normal samples, n = 200."""
    x = rng.standard_normal(200)
    y = 0.8 * x + 0.6 * rng.standard_normal(200)
    return x, y


@pytest.fixture
def skewed_sample(rng):
    """Exponential sample, clearly non-normal, n = 200."""
    return rng.exponential(scale=1.0, size=200)
