"""Capture of the current call stack as a Stacktrace.

``capture`` is the entry point used by event builders. It walks the
calling thread's stack outward from its caller, resolving each frame's
name, classifying it as in-app or library code, shortening its path and
optionally attaching surrounding source lines. It never raises: anything
that cannot be resolved or read is left out of the frame.
"""

from __future__ import annotations

import itertools
from collections.abc import Sequence
from threading import Lock

import structlog

from stacksnap.adapters.python_runtime import PythonStackIntrospector
from stacksnap.config.schema import CaptureSettings
from stacksnap.core.context import ContextExtractor
from stacksnap.core.file_cache import FileLineCache, get_file_cache
from stacksnap.core.paths import PathNormalizer
from stacksnap.core.resolver import FrameResolver, is_in_app
from stacksnap.interfaces.introspection import RawFrame, StackIntrospector
from stacksnap.models.stacktrace import Stacktrace, StacktraceFrame
from stacksnap.utils.logging import LogEventNames, configure_logging
from stacksnap.utils.metrics import get_metrics

log = structlog.get_logger()


class StackWalker:
    """Builds Stacktraces from a stack introspector.

    Responsibilities:
    - Walk frames from the requested depth to the bottom of the stack
    - Resolve module and function names for each frame
    - Classify frames as in-app
    - Normalize paths and attach source context

    Example:
        walker = StackWalker.from_settings(CaptureSettings())
        stacktrace = walker.capture(skip=0, context_depth=3, in_app_prefixes=["myapp"])
    """

    def __init__(
        self,
        introspector: StackIntrospector | None = None,
        normalizer: PathNormalizer | None = None,
        cache: FileLineCache | None = None,
        context_depth: int = 3,
        in_app_prefixes: Sequence[str] = (),
    ) -> None:
        """Initialize the StackWalker.

        Args:
            introspector: Source of raw frames (defaults to the running interpreter)
            normalizer: Path normalizer (defaults to one built from CaptureSettings)
            cache: Source file cache (defaults to the process-wide cache)
            context_depth: Context depth used when capture() is not given one
            in_app_prefixes: In-app prefixes used when capture() is not given any
        """
        self._introspector = introspector or PythonStackIntrospector()
        self._resolver = FrameResolver(self._introspector)
        self._normalizer = normalizer or PathNormalizer.from_settings(CaptureSettings())
        self._extractor = ContextExtractor(cache if cache is not None else get_file_cache())
        self._context_depth = context_depth
        self._in_app_prefixes = tuple(in_app_prefixes)

    @classmethod
    def from_settings(
        cls,
        settings: CaptureSettings,
        introspector: StackIntrospector | None = None,
        cache: FileLineCache | None = None,
    ) -> StackWalker:
        return cls(
            introspector=introspector,
            normalizer=PathNormalizer.from_settings(settings),
            cache=cache,
            context_depth=settings.context_depth,
            in_app_prefixes=settings.in_app_prefixes,
        )

    def capture(
        self,
        skip: int = 0,
        context_depth: int | None = None,
        in_app_prefixes: Sequence[str] | None = None,
    ) -> Stacktrace:
        """Capture the stack of the calling thread.

        Args:
            skip: Frames to omit above the caller of this method
            context_depth: Source lines on each side of every frame's line;
                -1 for the line only, 0 for no context
            in_app_prefixes: Module prefixes that mark application code

        Returns:
            Frames ordered innermost first; empty if no frames are available
        """
        if context_depth is None:
            context_depth = self._context_depth
        if in_app_prefixes is None:
            in_app_prefixes = self._in_app_prefixes

        frames: list[StacktraceFrame] = []
        # Depth 0 is this method's own frame
        for depth in itertools.count(1 + max(skip, 0)):
            raw = self._introspector.frame_at(depth)
            if raw is None:
                break
            frames.append(self._build_frame(raw, context_depth, in_app_prefixes))

        get_metrics().stacktraces_captured.inc()
        return Stacktrace(frames=tuple(frames))

    def _build_frame(
        self,
        raw: RawFrame,
        context_depth: int,
        in_app_prefixes: Sequence[str],
    ) -> StacktraceFrame:
        module, function = self._resolver.resolve(raw.program_counter)

        source = None
        if context_depth != 0:
            source = self._extractor.context(raw.filename, raw.lineno, context_depth)

        return StacktraceFrame(
            filename=self._normalizer.normalize(raw.filename),
            absolute_path=raw.filename,
            function=function,
            module=module,
            line=raw.lineno,
            column=raw.colno,
            context_line=source.context_line if source else None,
            pre_context=source.pre_context if source else (),
            post_context=source.post_context if source else (),
            in_app=is_in_app(module, in_app_prefixes),
        )


_default_walker: StackWalker | None = None
_default_walker_lock = Lock()


def configure(settings: CaptureSettings | None = None) -> StackWalker:
    """Build the process-wide walker used by ``capture``.

    Call once at startup. Without it, the walker is built from
    ``CaptureSettings()`` on first capture.

    Args:
        settings: Capture configuration (defaults to environment and defaults)

    Returns:
        The new default walker
    """
    global _default_walker
    settings = settings or CaptureSettings()
    if settings.logging.configure:
        configure_logging(
            level=settings.logging.level,
            log_format=settings.logging.format,
            file_path=settings.logging.file,
        )

    walker = StackWalker.from_settings(settings)
    with _default_walker_lock:
        _default_walker = walker
    log.debug(
        LogEventNames.WALKER_CONFIGURED,
        trim_prefixes=list(settings.trim_prefixes()),
        context_depth=settings.context_depth,
    )
    return walker


def get_default_walker() -> StackWalker:
    """Get the process-wide walker, building it on first use."""
    global _default_walker
    with _default_walker_lock:
        if _default_walker is None:
            _default_walker = StackWalker.from_settings(CaptureSettings())
        return _default_walker


def capture(
    skip: int = 0,
    context_depth: int | None = None,
    in_app_prefixes: Sequence[str] | None = None,
) -> Stacktrace:
    """Capture the calling thread's stack.

    The caller of this function is the first frame unless ``skip`` omits it.

    Args:
        skip: Frames to omit above the caller
        context_depth: Source lines on each side of every frame's line;
            -1 for the line only, 0 for no context. Defaults to the
            configured depth.
        in_app_prefixes: Module prefixes that mark application code.
            Defaults to the configured prefixes.

    Returns:
        Frames ordered innermost first
    """
    # One more level skips this function's own frame
    return get_default_walker().capture(max(skip, 0) + 1, context_depth, in_app_prefixes)
