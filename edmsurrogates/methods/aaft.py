"""
Amplitude adjusted Fourier transform surrogates.
"""

import numpy as np
from dataclasses import dataclass

from ..phase import build_phase_randomized
from ..signal import require_1d
from .base import Surrogate, SurrogateGenerator, register


@dataclass(frozen=True)
class AAFT(Surrogate):
    """
    Amplitude adjusted Fourier transform surrogate (Theiler et al., 1992).

    A phase-randomized copy of the series is rank-remapped onto the original
    values. The result keeps the amplitude distribution exactly and the
    periodogram approximately.
    """


@register(AAFT)
class AAFTGenerator(SurrogateGenerator):

    def _validate(self) -> None:
        require_1d(self.x, "AAFT")

    def _precompute(self) -> None:
        self.phase_generator = build_phase_randomized(self.x, symmetric=True, rng=self.rng)
        self.x_sorted = np.sort(self.x)

    def _draw(self) -> np.ndarray:
        s = self.phase_generator()
        out = np.empty_like(self.x)
        out[np.argsort(s, kind='stable')] = self.x_sorted
        return out
