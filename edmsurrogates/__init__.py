"""
edmsurrogates: surrogate time series for nonlinearity and EDM null-model testing.

This package provides:
- A generator abstraction that precomputes once and draws many surrogates
- Random shuffle, circular shift, block shuffle and cycle shuffle surrogates
- Dimension-shuffled surrogates of multidimensional datasets
- Amplitude adjusted Fourier transform (AAFT) surrogates
- Ensemble helpers for arrays, Series and DataFrames
"""

__version__ = "0.1.0"

from . import methods

from .exceptions import ConfigurationError
from .rng import RNGContext, as_rng

from .methods import (
    Surrogate,
    SurrogateGenerator,
    surrogenerator,
    RandomShuffle,
    BlockShuffle,
    CycleShuffle,
    CircShift,
    ShuffleDimensions,
    AAFT,
    uniform_block_lengths,
)

from .ensemble import (
    surrogate,
    surrogate_ensemble,
    dataframe_surrogates,
)

__all__ = [
    'methods',
    'ConfigurationError',
    'RNGContext',
    'as_rng',
    # Core
    'Surrogate',
    'SurrogateGenerator',
    'surrogenerator',
    # Methods
    'RandomShuffle',
    'BlockShuffle',
    'CycleShuffle',
    'CircShift',
    'ShuffleDimensions',
    'AAFT',
    'uniform_block_lengths',
    # Ensembles
    'surrogate',
    'surrogate_ensemble',
    'dataframe_surrogates',
]
