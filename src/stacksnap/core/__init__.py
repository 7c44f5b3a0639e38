"""Core stack capture components.

- FileLineCache: Process-wide cache of source file lines
- ContextExtractor: Source lines surrounding a frame's line
- PathNormalizer: Shortens absolute paths for display
- FrameResolver: Module and function names for program counters
- StackWalker: Walks the stack and assembles Stacktraces
"""

from stacksnap.core.context import ContextExtractor, SourceContext
from stacksnap.core.file_cache import FileLineCache, get_file_cache
from stacksnap.core.paths import PathNormalizer
from stacksnap.core.resolver import FrameResolver, is_in_app, split_function_name
from stacksnap.core.walker import StackWalker, capture, configure, get_default_walker

__all__ = [
    "ContextExtractor",
    "FileLineCache",
    "FrameResolver",
    "PathNormalizer",
    "SourceContext",
    "StackWalker",
    "capture",
    "configure",
    "get_default_walker",
    "get_file_cache",
    "is_in_app",
    "split_function_name",
]
