"""Call-stack snapshots for error reports."""

from stacksnap.config import CaptureSettings, load_config
from stacksnap.core import StackWalker, capture, configure
from stacksnap.models import Stacktrace, StacktraceFrame

__all__ = [
    "CaptureSettings",
    "StackWalker",
    "Stacktrace",
    "StacktraceFrame",
    "capture",
    "configure",
    "load_config",
]
