"""Exception types raised by stacksnap.

Capturing a stacktrace never raises; these are only raised while
loading configuration.
"""


class StacksnapError(Exception):
    """Base exception for all stacksnap errors."""


class ConfigError(StacksnapError, ValueError):
    """Configuration could not be loaded or is invalid."""
