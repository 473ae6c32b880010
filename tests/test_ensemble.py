"""Tests for the ensemble helpers."""

import numpy as np
import pandas as pd
import pytest
from numpy.testing import assert_array_equal

from edmsurrogates import (
    BlockShuffle,
    CircShift,
    RandomShuffle,
    ShuffleDimensions,
    dataframe_surrogates,
    surrogate,
    surrogate_ensemble,
)


class TestSurrogate:

    def test_single_draw(self):
        assert surrogate([1, 2, 3, 4, 5], CircShift(2)).tolist() == [4, 5, 1, 2, 3]

    def test_series_in_series_out(self, series_with_index):
        out = surrogate(series_with_index, RandomShuffle(), rng=0)
        assert isinstance(out, pd.Series)
        assert out.index.equals(series_with_index.index)


class TestSurrogateEnsemble:

    def test_shape(self, noise_series):
        ens = surrogate_ensemble(noise_series, BlockShuffle(4), n_surr=25, seed=0)
        assert ens.shape == (25, len(noise_series))

    def test_dataset_shape(self, dataset):
        ens = surrogate_ensemble(dataset, ShuffleDimensions(), n_surr=3, seed=0)
        assert ens.shape == (3,) + dataset.shape

    def test_reproducible(self, noise_series):
        a = surrogate_ensemble(noise_series, RandomShuffle(), n_surr=5, seed=42)
        b = surrogate_ensemble(noise_series, RandomShuffle(), n_surr=5, seed=42)
        assert_array_equal(a, b)

    def test_members_differ(self, noise_series):
        ens = surrogate_ensemble(noise_series, RandomShuffle(), n_surr=5, seed=1)
        assert not np.array_equal(ens[0], ens[1])

    def test_series_input(self, series_with_index):
        ens = surrogate_ensemble(series_with_index, RandomShuffle(), n_surr=2, seed=0)
        assert isinstance(ens, np.ndarray)
        assert ens.shape == (2, len(series_with_index))

    def test_verbose_runs(self, noise_series):
        ens = surrogate_ensemble(noise_series, RandomShuffle(), n_surr=2, seed=0, verbose=True)
        assert ens.shape[0] == 2

    @pytest.mark.parametrize("n_surr", [0, -1])
    def test_invalid_count(self, noise_series, n_surr):
        with pytest.raises(ValueError):
            surrogate_ensemble(noise_series, RandomShuffle(), n_surr=n_surr)


class TestDataframeSurrogates:

    @pytest.fixture
    def df(self):
        rng = np.random.default_rng(0)
        return pd.DataFrame({
            'time': np.arange(50),
            'x': rng.standard_normal(50),
            'y': rng.standard_normal(50),
        })

    def test_columns_shuffled_independently(self, df):
        out = dataframe_surrogates(df, RandomShuffle(), seed=0, exclude_cols=['time'])
        assert list(out.columns) == ['time', 'x', 'y']
        assert_array_equal(out['time'], df['time'])
        assert_array_equal(np.sort(out['x']), np.sort(df['x']))
        assert_array_equal(np.sort(out['y']), np.sort(df['y']))
        # each column gets its own permutation
        perm_x = [int(np.flatnonzero(df['x'].to_numpy() == v)[0]) for v in out['x']]
        perm_y = [int(np.flatnonzero(df['y'].to_numpy() == v)[0]) for v in out['y']]
        assert perm_x != perm_y

    def test_input_untouched(self, df):
        original = df.copy()
        dataframe_surrogates(df, BlockShuffle(3), seed=0)
        pd.testing.assert_frame_equal(df, original)

    def test_reproducible(self, df):
        a = dataframe_surrogates(df, RandomShuffle(), seed=3)
        b = dataframe_surrogates(df, RandomShuffle(), seed=3)
        pd.testing.assert_frame_equal(a, b)
