"""
Fourier phase randomization.

Produces real series with the same power spectrum as the input and random
Fourier phases. Used as the inner generator of AAFT surrogates.
"""

import logging
import numpy as np
from typing import Optional

from .rng import RNGContext, as_rng

logger = logging.getLogger(__name__)


class PhaseRandomizedGenerator:
    """
    Repeated phase-randomized draws from one series.

    The FFT magnitudes are computed once; every call only draws new phases.

    Parameters
    ----------
    x : np.ndarray, shape (N,)
        Input time series
    symmetric : bool, default True
        Draw phases on ``[-pi, pi)`` (two-sided) instead of ``[0, 2*pi)``
    rng : RNGContext
        Random source, shared with the caller
    """

    def __init__(self, x: np.ndarray, symmetric: bool, rng: RNGContext):
        self.x = x
        self.symmetric = symmetric
        self.rng = rng
        self.n = len(x)
        spectrum = np.fft.rfft(np.asarray(x, dtype=float))
        self.amplitudes = np.abs(spectrum)
        # DC term, and the Nyquist term for even lengths, must stay real
        self.fixed = np.zeros(len(self.amplitudes), dtype=bool)
        self.fixed[0] = True
        if self.n % 2 == 0:
            self.fixed[-1] = True
        self.fixed_phase = np.angle(spectrum)[self.fixed]

    def __call__(self) -> np.ndarray:
        if self.symmetric:
            phases = self.rng.uniform(-np.pi, np.pi, size=len(self.amplitudes))
        else:
            phases = self.rng.uniform(0, 2 * np.pi, size=len(self.amplitudes))
        phases[self.fixed] = self.fixed_phase
        return np.fft.irfft(self.amplitudes * np.exp(1j * phases), n=self.n)


def build_phase_randomized(x: np.ndarray,
                           symmetric: bool = True,
                           rng: Optional[RNGContext] = None) -> PhaseRandomizedGenerator:
    """
    Build a phase-randomized surrogate generator for ``x``.

    Parameters
    ----------
    x : np.ndarray, shape (N,)
        Input time series
    symmetric : bool, default True
        Two-sided phase convention
    rng : RNGContext, int or None
        Random source

    Returns
    -------
    PhaseRandomizedGenerator
        Callable returning a new series per call
    """
    logger.debug("Phase randomization: %d samples, symmetric=%s", len(x), symmetric)
    return PhaseRandomizedGenerator(np.asarray(x), symmetric, as_rng(rng))
