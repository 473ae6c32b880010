"""Shared fixtures for the edmsurrogates test suite."""

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def noise_series():
    """White noise series, 200 points."""
    return np.random.default_rng(0).standard_normal(200)


@pytest.fixture
def cycle_series():
    """Oscillation with period 20 and growing amplitude, so cycles differ."""
    t = np.arange(200)
    return np.sin(2 * np.pi * t / 20) * (1 + 0.01 * t)


@pytest.fixture
def dataset():
    """Three-dimensional dataset with 100 points."""
    return np.random.default_rng(1).standard_normal((100, 3))


@pytest.fixture
def series_with_index(noise_series):
    index = pd.date_range('2000-01-01', periods=len(noise_series), freq='D')
    return pd.Series(noise_series, index=index, name='flow')
