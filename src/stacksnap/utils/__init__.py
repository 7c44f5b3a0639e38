"""Utility functions and helpers.

- errors: Exception hierarchy
- logging: Structured logging configuration
- metrics: Thread-safe counters
"""

from stacksnap.utils.errors import ConfigError, StacksnapError
from stacksnap.utils.logging import (
    LogEventNames,
    LogFormat,
    LogLevel,
    configure_logging,
    get_logger,
)
from stacksnap.utils.metrics import Counter, MetricsRegistry, get_metrics

__all__ = [
    # Errors
    "ConfigError",
    "StacksnapError",
    # Logging
    "LogEventNames",
    "LogFormat",
    "LogLevel",
    "configure_logging",
    "get_logger",
    # Metrics
    "Counter",
    "MetricsRegistry",
    "get_metrics",
]
