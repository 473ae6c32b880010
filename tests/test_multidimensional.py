"""Tests for ShuffleDimensions surrogates."""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from edmsurrogates import ConfigurationError, ShuffleDimensions, surrogenerator


def test_each_point_keeps_its_components(dataset):
    gen = surrogenerator(dataset, ShuffleDimensions(), rng=0)
    for _ in range(10):
        s = gen()
        assert s.shape == dataset.shape
        assert_array_equal(np.sort(s, axis=1), np.sort(dataset, axis=1))


def test_components_reordered(dataset):
    s = surrogenerator(dataset, ShuffleDimensions(), rng=0)()
    assert not np.array_equal(s, dataset)


def test_list_of_tuples():
    points = [(1, 2), (3, 4), (5, 6)]
    s = surrogenerator(points, ShuffleDimensions(), rng=0)()
    for row, point in zip(s.tolist(), points):
        assert sorted(row) == list(point)


def test_1d_rejected(noise_series):
    with pytest.raises(ConfigurationError, match="multidimensional"):
        surrogenerator(noise_series, ShuffleDimensions())


def test_single_column_passes_through():
    x = np.arange(10.0).reshape(10, 1)
    gen = surrogenerator(x, ShuffleDimensions(), rng=0)
    for _ in range(3):
        assert_array_equal(gen(), x)
