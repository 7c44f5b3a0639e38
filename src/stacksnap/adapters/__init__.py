"""Runtime adapters for stack introspection and source access."""

from .python_runtime import DiskFileSource, PythonStackIntrospector

__all__ = ["DiskFileSource", "PythonStackIntrospector"]
