"""Shortening of absolute source paths for display."""

from __future__ import annotations

import os
from collections.abc import Iterable

from stacksnap.config.schema import CaptureSettings


class PathNormalizer:
    """Strips known root directories from absolute paths.

    Prefixes are tried in order and the first one that shortens the path
    wins. Each prefix is matched as a whole directory, so ``/usr/lib``
    never trims ``/usr/libx/mod.py``.

    Example:
        normalizer = PathNormalizer(["/usr/lib/python3.11"])
        normalizer.normalize("/usr/lib/python3.11/json/decoder.py")  # "json/decoder.py"
    """

    def __init__(self, prefixes: Iterable[str]) -> None:
        self._prefixes = tuple(
            prefix if prefix.endswith(os.sep) else prefix + os.sep for prefix in prefixes if prefix
        )

    @classmethod
    def from_settings(cls, settings: CaptureSettings) -> PathNormalizer:
        return cls(settings.trim_prefixes())

    @property
    def prefixes(self) -> tuple[str, ...]:
        return self._prefixes

    def normalize(self, path: str) -> str:
        """Strip the first matching root prefix from ``path``.

        Returns:
            The shortened path, or ``path`` unchanged if no prefix matches
        """
        for prefix in self._prefixes:
            trimmed = path.removeprefix(prefix)
            if len(trimmed) < len(path):
                return trimmed
        return path
