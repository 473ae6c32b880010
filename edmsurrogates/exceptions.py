"""
Exceptions raised by the surrogate generators.
"""


class ConfigurationError(ValueError):
    """
    Invalid surrogate method configuration.

    Raised when a method descriptor is invalid on its own (e.g. a block count
    below 2) or when it does not fit the signal it is built against (e.g. more
    blocks than samples, an empty signal, or a one-dimensional signal given to
    a multidimensional method). Always raised at build time, never by a draw.
    """
