"""
Surrogate methods and the generator abstraction.

Importing this package registers every method with ``surrogenerator``.
"""

from .base import (
    Surrogate,
    SurrogateGenerator,
    surrogenerator,
)
from .randomshuffle import RandomShuffle
from .shuffles import (
    BlockShuffle,
    CycleShuffle,
    CircShift,
    uniform_block_lengths,
)
from .multidimensional import ShuffleDimensions
from .aaft import AAFT

__all__ = [
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
    # Helpers
    'uniform_block_lengths',
]
