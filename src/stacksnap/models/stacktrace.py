"""Data models for captured call stacks."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class StacktraceFrame:
    """A single frame of a captured call stack."""

    filename: str  # Display path with root prefixes trimmed
    absolute_path: str  # Original, untrimmed path
    function: str
    module: str
    line: int  # 1-indexed
    column: int = 0  # 1-indexed, 0 if unknown
    context_line: str | None = None
    pre_context: tuple[str, ...] = ()
    post_context: tuple[str, ...] = ()
    in_app: bool = False

    @property
    def has_context(self) -> bool:
        """Whether any source lines were attached to this frame."""
        return self.context_line is not None or bool(self.pre_context or self.post_context)


@dataclass(frozen=True)
class Stacktrace:
    """A captured call stack, innermost frame first."""

    interface_name: ClassVar[str] = "sentry.interfaces.Stacktrace"

    frames: tuple[StacktraceFrame, ...] = ()

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[StacktraceFrame]:
        return iter(self.frames)

    @property
    def in_app_frames(self) -> tuple[StacktraceFrame, ...]:
        """Frames classified as application code."""
        return tuple(frame for frame in self.frames if frame.in_app)
