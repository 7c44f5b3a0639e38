"""Data models for captured stacktraces."""

from .stacktrace import Stacktrace, StacktraceFrame

__all__ = [
    "Stacktrace",
    "StacktraceFrame",
]
