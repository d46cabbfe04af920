"""Structured logging for klaw-option.

The combinators are pure, so the library only emits a few debug events when it
quietly turns a call into Nothing:

    appl.nullary_function          an argument was applied to a nullary function
    flatten_enum.unsupported_shape the input was not a list, tuple or mapping
    safe.exception_suppressed      @safe turned an exception into Nothing

Nothing is emitted until ``configure_logging`` has run. An unconfigured
structlog prints straight to stdout, which a library must not do to its callers.

Output goes through structlog's ProcessorFormatter, so the host application's
own stdlib loggers render in the same format.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'is_logging_configured',
    'remove_log_hook',
    'reset_logging',
]

type LogHook = Callable[[dict[str, Any]], None]

_configured = False
_log_hooks: list[LogHook] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor that hands each hook its own copy of the event."""
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:
            pass  # Don't let hook failures break logging
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to both klaw-option events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route klaw-option events through stdlib logging on stderr.

    Replaces the root logger's handlers with a single stderr handler.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
            The library's own events are all DEBUG.
        json_output: Render events as JSON lines (True) or for a terminal (False).
    """
    global _configured  # noqa: PLW0603

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))

    _configured = True


def reset_logging() -> None:
    """Silence the library again and restore structlog's defaults."""
    global _configured  # noqa: PLW0603

    structlog.reset_defaults()
    _configured = False


def is_logging_configured() -> bool:
    """Return True once ``configure_logging`` has run."""
    return _configured


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger, usually named after the calling module."""
    return structlog.get_logger(name)


def add_log_hook(hook: LogHook) -> None:
    """Register a callable that receives a copy of every log event.

    Hooks run before rendering, so tests and host applications can observe
    the library's events without parsing output:

        ```python
        events = []
        add_log_hook(events.append)
        ```
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister a hook. Unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
