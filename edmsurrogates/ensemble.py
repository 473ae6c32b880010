"""
Convenience functions for drawing surrogates.

Thin layers over ``surrogenerator`` for the common cases: a single surrogate,
an ensemble of surrogates from one series, and one surrogate per DataFrame
column.
"""

import logging
import numpy as np
import pandas as pd
from tqdm import tqdm
from typing import List, Optional

from .methods import Surrogate, surrogenerator
from .rng import as_rng
from .signal import SignalLike

logger = logging.getLogger(__name__)


def surrogate(x: SignalLike, method: Surrogate, rng=None):
    """
    Draw a single surrogate of ``x``.

    Builds a throwaway generator; use ``surrogenerator`` directly when more
    than one surrogate of the same series is needed.

    Parameters
    ----------
    x : array-like, pd.Series or pd.DataFrame
        Input signal
    method : Surrogate
        Method descriptor
    rng : RNGContext, np.random.Generator, int or None
        Random source

    Returns
    -------
    np.ndarray, pd.Series or pd.DataFrame
        Surrogate of the same type and shape as ``x``
    """
    return surrogenerator(x, method, rng)()


def surrogate_ensemble(x: SignalLike,
                       method: Surrogate,
                       n_surr: int,
                       seed: Optional[int] = None,
                       verbose: bool = False) -> np.ndarray:
    """
    Generate an ensemble of surrogates from one generator.

    Parameters
    ----------
    x : array-like, pd.Series or pd.DataFrame
        Input signal
    method : Surrogate
        Method descriptor
    n_surr : int
        Number of surrogates to generate
    seed : int or None
        Random seed for reproducibility
    verbose : bool, default False
        Show progress bar

    Returns
    -------
    np.ndarray, shape (n_surr, *x.shape)
        Surrogates stacked along the first axis
    """
    if n_surr < 1:
        raise ValueError(f"n_surr must be a positive integer, got {n_surr}")

    gen = surrogenerator(x, method, seed)
    surrogates = np.empty((n_surr,) + gen.x.shape, dtype=gen.x.dtype)

    iterator = tqdm(range(n_surr), desc=type(method).__name__, disable=not verbose)

    for k in iterator:
        surrogates[k] = np.asarray(gen())

    return surrogates


def dataframe_surrogates(df: pd.DataFrame,
                         method: Surrogate,
                         seed: Optional[int] = None,
                         exclude_cols: Optional[List[str]] = None) -> pd.DataFrame:
    """
    Draw one surrogate per column of a DataFrame.

    Each column gets its own generator with an independent random stream, so
    columns are randomized independently.

    Parameters
    ----------
    df : pd.DataFrame
        Input dataframe, one time series per column
    method : Surrogate
        Method descriptor (must accept 1D series)
    seed : int or None
        Random seed for reproducibility
    exclude_cols : list or None
        Columns copied through unchanged (e.g. a time column)

    Returns
    -------
    pd.DataFrame
        Dataframe of surrogates with the original index and columns
    """
    exclude_cols = exclude_cols or []
    columns = [c for c in df.columns if c not in exclude_cols]
    streams = as_rng(seed).spawn(len(columns))

    result = df.copy()
    for col, rng in zip(columns, streams):
        result[col] = surrogenerator(df[col], method, rng)()

    logger.debug("Generated %s surrogates for %d columns", method, len(columns))
    return result
