"""Abstract interfaces for runtime integrations."""

from .introspection import FileSource, RawFrame, StackIntrospector

__all__ = ["FileSource", "RawFrame", "StackIntrospector"]
