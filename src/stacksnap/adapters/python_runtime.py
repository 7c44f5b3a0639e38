"""CPython implementations of the introspection interfaces.

The "program counter" handed around by this adapter is the live frame
object itself: its code object identifies the function and its last
instruction offset identifies the position within it.
"""

from __future__ import annotations

import itertools
import sys
from pathlib import Path
from types import FrameType
from typing import Any

from stacksnap.interfaces.introspection import RawFrame


def frame_column(frame: FrameType) -> int:
    """Return the 1-indexed column of the frame's current instruction, or 0."""
    if frame.f_lasti < 0:
        return 0

    # Code units are two bytes wide
    positions = frame.f_code.co_positions()
    position = next(itertools.islice(positions, frame.f_lasti // 2, None), None)
    if position is None or position[2] is None:
        return 0
    return position[2] + 1


class PythonStackIntrospector:
    """Walks the current thread's stack with ``sys._getframe``."""

    def frame_at(self, depth: int) -> RawFrame | None:
        try:
            # One extra level skips this method's own frame
            frame = sys._getframe(depth + 1)
        except ValueError:
            return None

        return RawFrame(
            program_counter=frame,
            filename=frame.f_code.co_filename,
            lineno=frame.f_lineno or 0,
            colno=frame_column(frame),
        )

    def resolve(self, program_counter: Any) -> str:
        if not isinstance(program_counter, FrameType):
            return ""

        module = program_counter.f_globals.get("__name__")
        if not isinstance(module, str):
            return ""
        return f"{module}:{program_counter.f_code.co_qualname}"


class DiskFileSource:
    """Reads source files from the local filesystem."""

    def read_bytes(self, path: str) -> bytes:
        return Path(path).read_bytes()
