"""Tests for the RNG context."""

import numpy as np
import pytest

from edmsurrogates import RNGContext, as_rng


class TestRNGContext:

    def test_same_seed_same_stream(self):
        a, b = RNGContext(7), RNGContext(7)
        assert np.array_equal(a.uniform_permutation(20), b.uniform_permutation(20))

    def test_uniform_permutation_is_permutation(self):
        perm = RNGContext(0).uniform_permutation(10)
        assert sorted(perm) == list(range(10))

    def test_sample_without_replacement_distinct(self):
        sample = RNGContext(0).sample_without_replacement(50, 10)
        assert len(set(sample.tolist())) == 10
        assert all(0 <= s < 50 for s in sample)

    def test_draw_one_from_sequence(self):
        rng = RNGContext(0)
        candidates = (3, 7, 11)
        assert all(rng.draw_one(candidates) in candidates for _ in range(50))

    def test_draw_one_from_int(self):
        rng = RNGContext(0)
        assert all(0 <= rng.draw_one(4) < 4 for _ in range(50))

    def test_integer_is_inclusive(self):
        rng = RNGContext(0)
        draws = {rng.integer(1, 3) for _ in range(200)}
        assert draws == {1, 2, 3}

    def test_row_permutations(self):
        perms = RNGContext(0).row_permutations(30, 4)
        assert perms.shape == (30, 4)
        assert np.all(np.sort(perms, axis=1) == np.arange(4))

    def test_spawn_gives_independent_streams(self):
        children = RNGContext(0).spawn(2)
        a = children[0].uniform(size=10)
        b = children[1].uniform(size=10)
        assert not np.allclose(a, b)

    def test_spawn_is_reproducible(self):
        a = RNGContext(3).spawn(2)[1].uniform(size=5)
        b = RNGContext(3).spawn(2)[1].uniform(size=5)
        assert np.allclose(a, b)


class TestAsRng:

    def test_passthrough(self):
        ctx = RNGContext(0)
        assert as_rng(ctx) is ctx

    def test_wraps_numpy_generator(self):
        gen = np.random.default_rng(5)
        ctx = as_rng(gen)
        assert ctx.generator is gen

    def test_int_seed(self):
        assert np.allclose(as_rng(9).uniform(size=3), RNGContext(9).uniform(size=3))

    def test_none_gives_context(self):
        assert isinstance(as_rng(None), RNGContext)

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            as_rng("seed")
