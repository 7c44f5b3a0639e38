"""Extraction of source lines surrounding a stack frame's line."""

from __future__ import annotations

from typing import NamedTuple

from stacksnap.core.file_cache import FileLineCache, get_file_cache

# Context depth that requests the frame's own line without surroundings
LINE_ONLY = -1


class SourceContext(NamedTuple):
    """Source lines around a frame's line."""

    pre_context: tuple[str, ...]
    context_line: str
    post_context: tuple[str, ...]


def _decode(line: bytes) -> str:
    return line.decode("utf-8", errors="replace")


class ContextExtractor:
    """Returns a window of source lines around a given line.

    Example:
        extractor = ContextExtractor()
        ctx = extractor.context("/app/src/main.py", line=42, depth=3)
        if ctx:
            print(ctx.context_line)
    """

    def __init__(self, cache: FileLineCache | None = None) -> None:
        self._cache = cache if cache is not None else get_file_cache()

    def context(self, filename: str, line: int, depth: int) -> SourceContext | None:
        """Get the lines around ``line`` in ``filename``.

        Args:
            filename: Absolute path of the source file
            line: 1-indexed target line
            depth: Lines to include on each side; -1 for the target line only

        Returns:
            The context window clipped at file boundaries, or None if the
            file is unreadable, the line is out of range, or no context was
            requested
        """
        if depth == 0 or depth < LINE_ONLY:
            return None

        lines = self._cache.lines_of(filename)
        index = line - 1
        if index < 0 or index >= len(lines):
            return None

        current = _decode(lines[index])
        if depth == LINE_ONLY:
            return SourceContext((), current, ())

        start = max(index - depth, 0)
        end = min(index + depth + 1, len(lines))
        return SourceContext(
            pre_context=tuple(_decode(text) for text in lines[start:index]),
            context_line=current,
            post_context=tuple(_decode(text) for text in lines[index + 1 : end]),
        )
