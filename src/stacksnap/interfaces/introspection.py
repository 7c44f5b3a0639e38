"""Abstract interfaces for runtime stack introspection and source access."""

from typing import Any, NamedTuple, Protocol


class RawFrame(NamedTuple):
    """Unresolved data for one live stack frame."""

    program_counter: Any
    filename: str
    lineno: int
    colno: int = 0


class StackIntrospector(Protocol):
    """Low-level access to the running thread's call stack.

    Any runtime that can walk its own stack and map a frame back to a
    named function can satisfy this protocol.
    """

    def frame_at(self, depth: int) -> RawFrame | None:
        """
        Return the frame ``depth`` levels above the caller of this method.

        Args:
            depth: Distance from the calling frame (0 is the caller itself)

        Returns:
            The raw frame, or None once the bottom of the stack is reached
        """
        ...

    def resolve(self, program_counter: Any) -> str:
        """
        Map a program counter to its raw ``module:function`` name.

        Args:
            program_counter: Value taken from a RawFrame

        Returns:
            The raw name, or an empty string if it cannot be resolved
        """
        ...


class FileSource(Protocol):
    """Reads source file content for context extraction."""

    def read_bytes(self, path: str) -> bytes:
        """
        Read the full content of a file.

        Raises:
            OSError: If the file cannot be read
        """
        ...
