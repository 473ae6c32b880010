"""
Multidimensional surrogates.
"""

import numpy as np
from dataclasses import dataclass

from ..exceptions import ConfigurationError
from .base import Surrogate, SurrogateGenerator, register


@dataclass(frozen=True)
class ShuffleDimensions(Surrogate):
    """
    Shuffle the components of every point of a multidimensional dataset.

    Each point (row) gets its own random permutation of its coordinates; the
    order of the points is untouched. Destroys the state space structure of
    the dataset, so these surrogates separate deterministic datasets from
    high dimensional noise. A one-column dataset passes through unchanged.
    """


@register(ShuffleDimensions)
class ShuffleDimensionsGenerator(SurrogateGenerator):

    def _validate(self) -> None:
        if self.x.ndim != 2:
            raise ConfigurationError(
                "ShuffleDimensions requires a multidimensional dataset of shape "
                f"(n_points, dim), got shape {self.x.shape}")

    def _draw(self) -> np.ndarray:
        n_points, dim = self.x.shape
        perms = self.rng.row_permutations(n_points, dim)
        return np.take_along_axis(self.x, perms, axis=1)
