"""Metrics collection for observability.

Counters track file cache effectiveness and capture volume. They are
safe to update from any thread and can be read back for export or tests.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from threading import Lock

import structlog

log = structlog.get_logger()


@dataclass
class MetricValue:
    """A single counter value with metadata."""

    name: str
    value: float
    labels: dict[str, str] = field(default_factory=dict)
    help_text: str = ""


class Counter:
    """A monotonically increasing counter.

    Example:
        counter = Counter("file_cache_hits", "Source file cache hits")
        counter.inc()
        counter.inc(labels={"path": "/app/main.py"})
    """

    def __init__(self, name: str, help_text: str = "") -> None:
        self.name = name
        self.help_text = help_text
        self._values: dict[tuple[tuple[str, str], ...], float] = defaultdict(float)
        self._lock = Lock()

    def inc(self, value: float = 1, labels: dict[str, str] | None = None) -> None:
        """Increment the counter.

        Args:
            value: Amount to increment (default 1)
            labels: Optional labels for this observation
        """
        if value < 0:
            raise ValueError("Counter can only increase")

        label_key = tuple(sorted(labels.items())) if labels else ()
        with self._lock:
            self._values[label_key] += value

    def get(self, labels: dict[str, str] | None = None) -> float:
        label_key = tuple(sorted(labels.items())) if labels else ()
        with self._lock:
            return self._values.get(label_key, 0)

    def get_all(self) -> list[MetricValue]:
        with self._lock:
            return [
                MetricValue(
                    name=self.name,
                    value=value,
                    labels=dict(label_key),
                    help_text=self.help_text,
                )
                for label_key, value in self._values.items()
            ]

    def reset(self) -> None:
        with self._lock:
            self._values.clear()


class MetricsRegistry:
    """Registry of the counters stacksnap maintains."""

    def __init__(self) -> None:
        self.file_cache_hits = Counter(
            "file_cache_hits",
            "Source files served from the line cache",
        )
        self.file_cache_misses = Counter(
            "file_cache_misses",
            "Source files read from disk and cached",
        )
        self.file_cache_read_errors = Counter(
            "file_cache_read_errors",
            "Source files that could not be read",
        )
        self.stacktraces_captured = Counter(
            "stacktraces_captured",
            "Stacktraces captured",
        )

    @property
    def counters(self) -> list[Counter]:
        return [
            self.file_cache_hits,
            self.file_cache_misses,
            self.file_cache_read_errors,
            self.stacktraces_captured,
        ]

    def collect(self) -> list[MetricValue]:
        """Collect current values of every counter."""
        values: list[MetricValue] = []
        for counter in self.counters:
            values.extend(counter.get_all())
        return values

    def to_dict(self) -> dict[str, float]:
        """Export unlabelled counter values keyed by name."""
        return {counter.name: counter.get() for counter in self.counters}

    def reset(self) -> None:
        """Reset all counters (for testing)."""
        for counter in self.counters:
            counter.reset()
        log.debug("metrics_reset")


_metrics: MetricsRegistry | None = None
_metrics_lock = Lock()


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    with _metrics_lock:
        if _metrics is None:
            _metrics = MetricsRegistry()
        return _metrics
