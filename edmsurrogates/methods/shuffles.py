"""
Block-based and shift-based surrogates.

- BlockShuffle: cut a randomly rotated copy of the series into n blocks of
  near-equal width and reorder them
- CycleShuffle: reorder the cycles between successive peaks of a smoothed copy
- CircShift: circularly shift the whole series
"""

import logging
import numpy as np
from collections.abc import Iterable
from dataclasses import dataclass
from numbers import Real
from typing import List, Sequence, Tuple, Union

from ..exceptions import ConfigurationError
from ..signal import find_interior_peaks, gaussian_kernel, require_1d, smooth_same_length
from .base import Surrogate, SurrogateGenerator, register

logger = logging.getLogger(__name__)


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def uniform_block_lengths(L: int, n: int) -> np.ndarray:
    """
    Split a length ``L`` into ``n`` block lengths as evenly as possible.

    The first ``L % n`` blocks are one sample longer than the rest.

    Parameters
    ----------
    L : int
        Total length
    n : int
        Number of blocks

    Returns
    -------
    np.ndarray of int, shape (n,)
        Block lengths summing to ``L``

    Examples
    --------
    >>> uniform_block_lengths(10, 3)
    array([4, 3, 3])
    """
    lengths = np.full(n, L // n, dtype=int)
    lengths[:L % n] += 1
    return lengths


# ---- BlockShuffle ----

@dataclass(frozen=True)
class BlockShuffle(Surrogate):
    """
    Block shuffle surrogate.

    The series is rotated by a random amount (so block edges do not always
    fall at the same absolute positions), divided into ``n`` blocks of
    near-equal width, and the blocks are concatenated in a random
    non-identity order.

    Roughly preserves short-range temporal properties (correlations at lags
    below the block length) while breaking long-range dynamical structure.

    Parameters
    ----------
    n : int, default 2
        Number of blocks, at least 2 and below the series length
    """
    n: int = 2

    def __post_init__(self):
        if not _is_integer(self.n):
            raise ConfigurationError(f"BlockShuffle block count must be an integer, got {self.n!r}")
        object.__setattr__(self, 'n', int(self.n))
        if self.n < 2:
            raise ConfigurationError(f"BlockShuffle needs at least 2 blocks, got n={self.n}")


@register(BlockShuffle)
class BlockShuffleGenerator(SurrogateGenerator):

    def _validate(self) -> None:
        require_1d(self.x, "BlockShuffle")
        if self.method.n >= len(self.x):
            raise ConfigurationError(
                f"The number of blocks ({self.method.n}) must be smaller than "
                f"the number of points ({len(self.x)})")

    def _precompute(self) -> None:
        self.L = len(self.x)
        self.block_lengths = uniform_block_lengths(self.L, self.method.n)
        self.block_starts = np.concatenate(([0], np.cumsum(self.block_lengths)[:-1]))
        self.positions = np.arange(self.L)
        self.rotated = np.empty(self.L, dtype=int)
        logger.debug("BlockShuffle block lengths: %s", self.block_lengths)

    def _draw_order(self) -> np.ndarray:
        # Blocks must actually move: reject the identity ordering
        n = self.method.n
        identity = np.arange(n)
        order = self.rng.uniform_permutation(n)
        while np.array_equal(order, identity):
            order = self.rng.uniform_permutation(n)
        return order

    def _draw_index(self) -> np.ndarray:
        shift = self.rng.integer(1, self.L)
        self.rotated[:shift] = self.positions[self.L - shift:]
        self.rotated[shift:] = self.positions[:self.L - shift]

        order = self._draw_order()
        return np.concatenate([
            self.rotated[self.block_starts[i]:self.block_starts[i] + self.block_lengths[i]]
            for i in order
        ])

    def _draw(self) -> np.ndarray:
        # A rotation can undo the block reordering; redraw until samples move
        idx = self._draw_index()
        while np.array_equal(idx, self.positions):
            idx = self._draw_index()
        return self.x[idx]


# ---- CycleShuffle ----

@dataclass(frozen=True)
class CycleShuffle(Surrogate):
    """
    Cycle shuffled surrogate (Theiler, 1995).

    1. The series is smoothed by convolution with a gaussian window of length
       ``n`` and relative width ``sigma``.
    2. Interior local maxima of the smoothed series are the peaks; the cycles
       between successive peaks are the blocks.
    3. Blocks are shuffled. Samples before the first and after the last peak
       never move, and the first and last index can never be peaks.

    Tests the null hypothesis of a periodic oscillator with no dynamical
    correlation between cycles.

    Parameters
    ----------
    n : int, default 7
        Gaussian window length
    sigma : float, default 0.5
        Gaussian width relative to the window length
    """
    n: int = 7
    sigma: float = 0.5

    def __post_init__(self):
        if not _is_integer(self.n):
            raise ConfigurationError(f"CycleShuffle window must be an integer, got {self.n!r}")
        object.__setattr__(self, 'n', int(self.n))
        if not isinstance(self.sigma, Real) or isinstance(self.sigma, bool):
            raise ConfigurationError(f"CycleShuffle sigma must be a real number, got {self.sigma!r}")
        if self.n < 1:
            raise ConfigurationError(f"CycleShuffle window must be >= 1, got n={self.n}")
        if not self.sigma > 0:
            raise ConfigurationError(f"CycleShuffle sigma must be positive, got {self.sigma}")


@register(CycleShuffle)
class CycleShuffleGenerator(SurrogateGenerator):

    def _validate(self) -> None:
        require_1d(self.x, "CycleShuffle")

    def _precompute(self) -> None:
        kernel = gaussian_kernel(self.method.n, self.method.sigma)
        self.smooth = smooth_same_length(self.x, kernel)
        self.peaks = find_interior_peaks(self.smooth)
        self.blocks: List[np.ndarray] = [
            np.arange(start, stop) for start, stop in zip(self.peaks[:-1], self.peaks[1:])
        ]
        self.buffer = self.x.copy()

        if len(self.blocks) < 2:
            logger.warning("CycleShuffle found %d peak(s); surrogates will equal "
                           "the original series", len(self.peaks))
        else:
            logger.debug("CycleShuffle found %d peaks, %d cycles",
                         len(self.peaks), len(self.blocks))

    def _draw(self) -> np.ndarray:
        if len(self.blocks) < 2:
            return self.buffer.copy()

        order = self.rng.uniform_permutation(len(self.blocks))
        idx = np.concatenate([self.blocks[i] for i in order])
        first = self.peaks[0]
        self.buffer[first:first + len(idx)] = self.x[idx]
        return self.buffer.copy()


# ---- CircShift ----

@dataclass(frozen=True)
class CircShift(Surrogate):
    """
    Circularly shifted surrogate.

    Parameters
    ----------
    n : int or sequence of int
        - int: always shift by exactly ``n`` samples
        - sequence: each surrogate is shifted by a value drawn uniformly from ``n``

    Notes
    -----
    With a fixed integer every draw is identical.
    """
    n: Union[int, Tuple[int, ...]]

    def __post_init__(self):
        if _is_integer(self.n):
            object.__setattr__(self, 'n', int(self.n))
            return
        if not isinstance(self.n, Iterable) or isinstance(self.n, str):
            raise ConfigurationError(f"CircShift needs an integer or a sequence of integers, got {self.n!r}")
        candidates = tuple(self.n)
        if not all(_is_integer(s) for s in candidates):
            raise ConfigurationError(f"CircShift candidate shifts must be integers, got {candidates!r}")
        candidates = tuple(int(s) for s in candidates)
        if len(candidates) == 0:
            raise ConfigurationError("CircShift needs at least one candidate shift")
        object.__setattr__(self, 'n', candidates)


def random_shift(n: Union[int, Sequence[int]], rng) -> int:
    """Shift for one draw: ``n`` itself, or one element of ``n``."""
    if isinstance(n, int):
        return n
    return rng.draw_one(n)


@register(CircShift)
class CircShiftGenerator(SurrogateGenerator):

    def _draw(self) -> np.ndarray:
        return np.roll(self.x, random_shift(self.method.n, self.rng), axis=0)
