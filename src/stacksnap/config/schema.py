"""Pydantic models for configuration schema."""

import os
import sysconfig
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_stdlib_root() -> str:
    return sysconfig.get_paths()["stdlib"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    configure: bool = False
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "console"
    file: Path | None = Field(None, description="Also write log output to this file")


class CaptureSettings(BaseSettings):
    """Root configuration for stacktrace capture.

    Built once at startup. ``library_path`` is read from ``PYTHONPATH``;
    every other field uses the ``STACKSNAP_`` environment prefix.
    """

    stdlib_root: str = Field(default_factory=_default_stdlib_root)
    library_path: str | None = Field(None, validation_alias="PYTHONPATH")
    extra_trim_paths: list[str] = []
    context_depth: int = Field(3, ge=-1, description="-1 for the line only, 0 for none")
    in_app_prefixes: list[str] = []
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="STACKSNAP_",
        env_nested_delimiter="__",
        populate_by_name=True,
    )

    @field_validator("in_app_prefixes")
    @classmethod
    def validate_in_app_prefixes(cls, v: list[str]) -> list[str]:
        """Reject empty prefixes, which would mark every frame as in-app."""
        if any(not prefix for prefix in v):
            raise ValueError("In-app prefixes must not be empty")
        return v

    def trim_prefixes(self) -> list[str]:
        """Ordered root prefixes stripped from frame paths.

        Returns:
            The stdlib root, then each ``PYTHONPATH`` entry, then any
            extra configured paths
        """
        prefixes = [self.stdlib_root]
        if self.library_path:
            prefixes.extend(
                os.path.abspath(entry) for entry in self.library_path.split(os.pathsep) if entry
            )
        prefixes.extend(self.extra_trim_paths)
        return prefixes
