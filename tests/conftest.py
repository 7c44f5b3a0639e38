"""Shared test fixtures for stacksnap."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from stacksnap.core.file_cache import FileLineCache
from stacksnap.utils.metrics import get_metrics
from tests.fakes import CountingFileSource


@pytest.fixture(autouse=True)
def reset_state() -> Iterator[None]:
    """Reset global metrics and logging configuration around each test."""
    get_metrics().reset()
    yield
    get_metrics().reset()
    structlog.reset_defaults()


@pytest.fixture
def five_line_file(tmp_path: Path) -> Path:
    """A source file containing the lines a through e."""
    path = tmp_path / "five.py"
    path.write_bytes(b"a\nb\nc\nd\ne")
    return path


@pytest.fixture
def counting_source() -> CountingFileSource:
    return CountingFileSource()


@pytest.fixture
def counting_cache(counting_source: CountingFileSource) -> FileLineCache:
    """A fresh file cache reading through the counting source."""
    return FileLineCache(source=counting_source)


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Restore root logger handlers and level replaced by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
