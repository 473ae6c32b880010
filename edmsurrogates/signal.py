"""
Signal utilities shared by the surrogate methods.

Covers coercion of user input to arrays (and back to pandas), the gaussian
smoothing kernel and convolution used by cycle shuffling, and local peak
detection.
"""

import numpy as np
import pandas as pd
from scipy.signal import convolve
from scipy.signal.windows import gaussian
from typing import Union

from .exceptions import ConfigurationError

SignalLike = Union[np.ndarray, pd.Series, pd.DataFrame, list, tuple]


def as_signal(x: SignalLike) -> np.ndarray:
    """
    Convert input to a read-only numpy array.

    Parameters
    ----------
    x : array-like, pd.Series or pd.DataFrame
        1D time series or 2D dataset (rows are points)

    Returns
    -------
    np.ndarray
        Private, non-writeable copy of the data

    Raises
    ------
    ConfigurationError
        If the signal is empty, ragged, or has more than two dimensions
    """
    if isinstance(x, (pd.Series, pd.DataFrame)):
        values = x.to_numpy(copy=True)
    else:
        try:
            values = np.array(x, copy=True)
        except ValueError as exc:
            raise ConfigurationError(f"Signal must be a rectangular array: {exc}") from exc

    if values.size == 0:
        raise ConfigurationError("Cannot build surrogates of an empty signal")
    if values.ndim not in (1, 2):
        raise ConfigurationError(f"Signal must be 1D or 2D, got {values.ndim}D")

    values.setflags(write=False)
    return values


def restore_like(template, values: np.ndarray):
    """
    Wrap ``values`` in the pandas type of ``template``.

    Index, name and columns are carried over; plain arrays pass through.
    """
    if isinstance(template, pd.Series):
        return pd.Series(values, index=template.index, name=template.name)
    if isinstance(template, pd.DataFrame):
        return pd.DataFrame(values, index=template.index, columns=template.columns)
    return values


def require_1d(x: np.ndarray, method_name: str) -> None:
    """Raise ConfigurationError unless ``x`` is one-dimensional."""
    if x.ndim != 1:
        raise ConfigurationError(
            f"{method_name} requires a 1D time series, got shape {x.shape}")


def gaussian_kernel(n: int, sigma: float) -> np.ndarray:
    """
    Gaussian window of length ``n``.

    ``sigma`` is expressed relative to the window span, so the standard
    deviation in samples is ``sigma * (n - 1)``.

    Parameters
    ----------
    n : int
        Window length
    sigma : float
        Relative width of the gaussian

    Returns
    -------
    np.ndarray, shape (n,)
    """
    if n <= 1:
        return np.ones(max(n, 0))
    return gaussian(n, std=sigma * (n - 1), sym=True)


def smooth_same_length(x: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """
    Full linear convolution trimmed back to ``len(x)``.

    The excess is removed symmetrically; when it is odd the extra sample is
    dropped from the end.
    """
    smooth = convolve(np.asarray(x, dtype=float), kernel, mode='full', method='direct')
    r = len(smooth) - len(x)
    start = r // 2
    stop = len(smooth) - r // 2 - (r % 2)
    return smooth[start:stop]


def find_interior_peaks(x: np.ndarray) -> np.ndarray:
    """
    Indices of strict local maxima, excluding the first and last sample.

    Parameters
    ----------
    x : np.ndarray, shape (N,)

    Returns
    -------
    np.ndarray of int
        Sorted indices ``i`` with ``x[i-1] < x[i] > x[i+1]``
    """
    if len(x) < 3:
        return np.array([], dtype=int)
    mid = x[1:-1]
    is_peak = (x[:-2] < mid) & (mid > x[2:])
    return np.flatnonzero(is_peak) + 1
