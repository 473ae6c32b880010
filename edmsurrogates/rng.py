"""
Random number context for surrogate generation.

Every surrogate generator owns one ``RNGContext`` and draws all of its
randomness from it. Nothing in this package touches numpy's global random
state, so an ensemble is reproducible from its seed alone.
"""

import numpy as np
from typing import List, Optional, Sequence, Union


class RNGContext:
    """
    Seedable random source injected into surrogate generators.

    Thin wrapper around ``numpy.random.Generator`` exposing the handful of
    operations the surrogate algorithms need.

    Parameters
    ----------
    seed : int, np.random.SeedSequence or None
        Seed for the underlying ``np.random.default_rng``

    Examples
    --------
    >>> rng = RNGContext(42)
    >>> rng.uniform_permutation(5)
    array([...])
    """

    def __init__(self, seed=None):
        self.generator = np.random.default_rng(seed)

    @classmethod
    def from_generator(cls, generator: np.random.Generator) -> 'RNGContext':
        """Wrap an existing numpy Generator without reseeding it."""
        ctx = cls.__new__(cls)
        ctx.generator = generator
        return ctx

    def uniform_permutation(self, n: int) -> np.ndarray:
        """Uniform random permutation of ``range(n)``."""
        return self.generator.permutation(n)

    def sample_without_replacement(self, population: Union[int, Sequence],
                                   k: int) -> np.ndarray:
        """Draw ``k`` distinct elements of ``population`` (or of ``range(population)``)."""
        return self.generator.choice(population, size=k, replace=False)

    def draw_one(self, population: Union[int, Sequence]):
        """Draw a single element uniformly from ``population``."""
        if isinstance(population, (int, np.integer)):
            return int(self.generator.integers(0, population))
        return population[int(self.generator.integers(0, len(population)))]

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in the closed interval ``[low, high]``."""
        return int(self.generator.integers(low, high, endpoint=True))

    def uniform(self, low: float = 0.0, high: float = 1.0, size=None):
        """Uniform floats on ``[low, high)``."""
        return self.generator.uniform(low, high, size=size)

    def row_permutations(self, n_rows: int, n_cols: int) -> np.ndarray:
        """
        Independent permutations of ``range(n_cols)``, one per row.

        Returns
        -------
        np.ndarray, shape (n_rows, n_cols)
            Each row is a uniform random permutation
        """
        return np.argsort(self.generator.random((n_rows, n_cols)), axis=1)

    def spawn(self, n: int) -> List['RNGContext']:
        """
        Create ``n`` statistically independent child contexts.

        Used to give parallel generators their own streams.
        """
        return [RNGContext.from_generator(g) for g in self.generator.spawn(n)]

    def __repr__(self):
        return f"RNGContext({self.generator.bit_generator.__class__.__name__})"


def as_rng(rng: Optional[Union[int, np.random.Generator, RNGContext]] = None) -> RNGContext:
    """
    Coerce ``rng`` to an ``RNGContext``.

    Parameters
    ----------
    rng : None, int, np.random.Generator or RNGContext
        - None: fresh, unseeded context
        - int: seed for a new context
        - np.random.Generator: wrapped as-is (its stream is shared)
        - RNGContext: returned unchanged

    Returns
    -------
    RNGContext
    """
    if isinstance(rng, RNGContext):
        return rng
    if isinstance(rng, np.random.Generator):
        return RNGContext.from_generator(rng)
    if rng is None or isinstance(rng, (int, np.integer, np.random.SeedSequence)):
        return RNGContext(rng)
    raise TypeError(f"Cannot build an RNGContext from {type(rng).__name__}")
