"""
Random shuffle surrogates.
"""

import numpy as np
from dataclasses import dataclass

from ..signal import require_1d
from .base import Surrogate, SurrogateGenerator, register


@dataclass(frozen=True)
class RandomShuffle(Surrogate):
    """
    Random constrained surrogate, generated by shuffling values around.

    Destroys any linear correlation in the signal but preserves its amplitude
    distribution exactly.
    """


@register(RandomShuffle)
class RandomShuffleGenerator(SurrogateGenerator):

    def _validate(self) -> None:
        require_1d(self.x, "RandomShuffle")

    def _draw(self) -> np.ndarray:
        return self.x[self.rng.uniform_permutation(len(self.x))]
