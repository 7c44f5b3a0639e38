"""Tests for the metrics module."""

import pytest

from stacksnap.utils.metrics import Counter, MetricsRegistry, get_metrics


class TestCounter:
    """Tests for Counter."""

    def test_inc(self) -> None:
        """Test incrementing by default and explicit amounts."""
        counter = Counter("reads")
        counter.inc()
        counter.inc(4)

        assert counter.get() == 5

    def test_labels(self) -> None:
        """Test labelled values are tracked separately."""
        counter = Counter("reads")
        counter.inc(labels={"kind": "hit"})
        counter.inc(labels={"kind": "miss"})
        counter.inc(labels={"kind": "hit"})

        assert counter.get(labels={"kind": "hit"}) == 2
        assert counter.get(labels={"kind": "miss"}) == 1
        assert counter.get() == 0
        assert len(counter.get_all()) == 2

    def test_negative_increment_rejected(self) -> None:
        """Test counters cannot decrease."""
        with pytest.raises(ValueError, match="only increase"):
            Counter("reads").inc(-1)

    def test_reset(self) -> None:
        """Test reset clears all values."""
        counter = Counter("reads")
        counter.inc(3)
        counter.reset()

        assert counter.get() == 0


class TestMetricsRegistry:
    """Tests for MetricsRegistry."""

    def test_to_dict(self) -> None:
        """Test exporting counter values by name."""
        registry = MetricsRegistry()
        registry.file_cache_hits.inc(2)

        assert registry.to_dict() == {
            "file_cache_hits": 2,
            "file_cache_misses": 0,
            "file_cache_read_errors": 0,
            "stacktraces_captured": 0,
        }

    def test_collect(self) -> None:
        """Test collecting values with metadata."""
        registry = MetricsRegistry()
        registry.stacktraces_captured.inc()

        values = registry.collect()

        assert [value.name for value in values] == ["stacktraces_captured"]
        assert values[0].help_text == "Stacktraces captured"

    def test_global_registry(self) -> None:
        """Test get_metrics returns a single registry."""
        assert get_metrics() is get_metrics()
