"""Configuration loading and validation."""

from .loader import load_config
from .schema import CaptureSettings, LoggingConfig

__all__ = [
    "load_config",
    "CaptureSettings",
    "LoggingConfig",
]
