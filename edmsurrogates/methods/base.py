"""
Core surrogate abstraction.

A surrogate *method* is an immutable descriptor saying how to randomize.
``surrogenerator`` pairs a method with a signal, runs all randomness-free
precomputation once, and returns a ``SurrogateGenerator``; calling the
generator draws one surrogate.

Examples
--------
>>> gen = surrogenerator(x, BlockShuffle(4), rng=42)
>>> ensemble = [gen() for _ in range(100)]
"""

import logging
import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Dict, Optional, Type, Union

from ..rng import RNGContext, as_rng
from ..signal import SignalLike, as_signal, restore_like

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Surrogate:
    """Base class for surrogate method descriptors."""


class SurrogateGenerator:
    """
    Stateful surrogate generator for one signal and one method.

    Subclasses implement ``_precompute`` (called once by the constructor) and
    ``_draw`` (called per surrogate). ``_draw`` must return a new array and
    must not modify ``self.x`` or any precomputed state.

    Attributes
    ----------
    x : np.ndarray
        Read-only copy of the input signal
    method : Surrogate
        Method descriptor
    rng : RNGContext
        Random source, consumed on every draw
    """

    def __init__(self, x: np.ndarray, method: Surrogate, rng: RNGContext,
                 template=None):
        self.x = x
        self.method = method
        self.rng = rng
        self._template = template
        self._validate()
        self._precompute()

    def _validate(self) -> None:
        """Check the method against the signal; raise ConfigurationError."""

    def _precompute(self) -> None:
        """Randomness-independent setup, run once."""

    def _draw(self) -> np.ndarray:
        raise NotImplementedError

    def __call__(self):
        return restore_like(self._template, self._draw())

    def __repr__(self):
        return f"SurrogateGenerator({self.method!r}, n={len(self.x)})"


_GENERATORS: Dict[Type[Surrogate], Type[SurrogateGenerator]] = {}


def register(method_cls: Type[Surrogate]):
    """Class decorator binding a generator class to its method descriptor."""
    def decorator(generator_cls: Type[SurrogateGenerator]) -> Type[SurrogateGenerator]:
        _GENERATORS[method_cls] = generator_cls
        return generator_cls
    return decorator


def surrogenerator(x: SignalLike,
                   method: Surrogate,
                   rng: Optional[Union[int, np.random.Generator, RNGContext]] = None) -> SurrogateGenerator:
    """
    Build a surrogate generator.

    Parameters
    ----------
    x : array-like, pd.Series or pd.DataFrame
        Input signal (1D series or 2D dataset with points as rows)
    method : Surrogate
        Method descriptor, e.g. ``BlockShuffle(4)``
    rng : RNGContext, np.random.Generator, int or None
        Random source owned by the generator

    Returns
    -------
    SurrogateGenerator
        Callable returning one surrogate per call, same shape as ``x``

    Raises
    ------
    ConfigurationError
        If the signal is empty or the method does not fit the signal
    TypeError
        If ``method`` is not a known surrogate method
    """
    generator_cls = _GENERATORS.get(type(method))
    if generator_cls is None:
        raise TypeError(f"Unknown surrogate method: {method!r}. "
                        f"Available: {[m.__name__ for m in _GENERATORS]}")

    values = as_signal(x)
    template = x if isinstance(x, (pd.Series, pd.DataFrame)) else None
    logger.debug("Building %s for signal of shape %s", method, values.shape)
    return generator_cls(values, method, as_rng(rng), template=template)
