"""Process-wide cache of source file lines.

Each file is read at most once per process and kept for the process
lifetime. A single lock guards both the lookup and the read on a miss,
so concurrent first requests for the same file trigger one read.
"""

from __future__ import annotations

from threading import Lock

import structlog

from stacksnap.adapters.python_runtime import DiskFileSource
from stacksnap.interfaces.introspection import FileSource
from stacksnap.utils.logging import LogEventNames
from stacksnap.utils.metrics import get_metrics

log = structlog.get_logger()


class FileLineCache:
    """Maps absolute file paths to their content split into byte lines.

    Example:
        cache = FileLineCache()
        lines = cache.lines_of("/app/src/main.py")
    """

    def __init__(self, source: FileSource | None = None) -> None:
        """Initialize the cache.

        Args:
            source: Where file content is read from (defaults to local disk)
        """
        self._source = source if source is not None else DiskFileSource()
        self._lines: dict[str, tuple[bytes, ...]] = {}
        self._lock = Lock()

    def lines_of(self, path: str) -> tuple[bytes, ...]:
        """Get the lines of a file, reading it on first request.

        Lines are split on ``\\n`` only; ``\\r`` is kept.

        Args:
            path: Absolute path of the source file

        Returns:
            The file's lines, or an empty tuple if it cannot be read
        """
        metrics = get_metrics()
        error: OSError | None = None
        with self._lock:
            lines = self._lines.get(path)
            if lines is not None:
                metrics.file_cache_hits.inc()
                return lines

            try:
                data = self._source.read_bytes(path)
            except OSError as e:
                # Not cached: a later request retries the read
                metrics.file_cache_read_errors.inc()
                error = e
            else:
                lines = tuple(data.split(b"\n"))
                self._lines[path] = lines
                metrics.file_cache_misses.inc()

        # Log only after the lock is released
        if lines is None:
            log.debug(LogEventNames.SOURCE_UNREADABLE, path=path, error=str(error))
            return ()
        log.debug(LogEventNames.SOURCE_CACHED, path=path, line_count=len(lines))
        return lines

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._lines

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)

    def clear(self) -> None:
        """Drop all cached files (for testing)."""
        with self._lock:
            self._lines.clear()
        log.debug(LogEventNames.SOURCE_CACHE_CLEARED)


_file_cache = FileLineCache()


def get_file_cache() -> FileLineCache:
    """Get the process-wide file line cache."""
    return _file_cache
