"""Resolution of frame names and in-app classification."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from stacksnap.interfaces.introspection import StackIntrospector

# Names of the program's entry module, always considered application code
MAIN_MODULES = frozenset({"main", "__main__"})

NAME_SEPARATOR = ":"


def split_function_name(raw_name: str) -> tuple[str, str]:
    """Split a raw ``module:function`` name into its two parts.

    The split happens at the last separator, so only the trailing segment
    becomes the function. A name without a separator is all function.

    Example:
        split_function_name("app.views:Handler.get")  # ("app.views", "Handler.get")
    """
    module, _, function = raw_name.rpartition(NAME_SEPARATOR)
    return module, function.replace("·", ".")


def is_in_app(module: str, in_app_prefixes: Iterable[str]) -> bool:
    """Check whether a module belongs to the application's own code."""
    if module in MAIN_MODULES:
        return True
    return any(module.startswith(prefix) for prefix in in_app_prefixes)


class FrameResolver:
    """Resolves program counters to ``(module, function)`` pairs."""

    def __init__(self, introspector: StackIntrospector) -> None:
        self._introspector = introspector

    def resolve(self, program_counter: Any) -> tuple[str, str]:
        """Resolve the module and function owning a program counter.

        Returns:
            ``(module, function)``; both empty if the name is unknown
        """
        raw_name = self._introspector.resolve(program_counter)
        if not raw_name:
            return "", ""
        return split_function_name(raw_name)
