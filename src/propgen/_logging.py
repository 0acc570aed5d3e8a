"""Structured logging for propgen.

The combinators only emit debug events (degenerate inputs, frequency
rounding fallbacks). Output is configured by the host, either directly with
`configure_logging()` or through `propgen.init(log_level=...)`.

structlog's ProcessorFormatter renders both structlog events and stdlib
records, so a test harness logging through `logging` shares one format.
When a seed is active it is bound into every event, which is what a failing
property run needs to be replayed.
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
    'bind_seed',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'is_configured',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: S110
            pass  # a failing hook must not break logging
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to structlog events and foreign stdlib records alike."""
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
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
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

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = 'propgen') -> Any:
    """Get a structlog logger, named after the package unless told otherwise."""
    return structlog.get_logger(name)


def is_configured() -> bool:
    """Whether the host has configured structlog.

    Unconfigured structlog prints to stdout, so library events are only
    emitted once a host has opted in.
    """
    return structlog.is_configured()


def bind_seed(
seed: int | None) -> None:
    """Attach the active sampler seed to every subsequent event; None detaches it."""
    if seed is None:
        structlog.contextvars.unbind_contextvars('seed')
    else:
        structlog.contextvars.bind_contextvars(seed=seed)


# --- Logging Hooks ---


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of each event dict.

    Hooks are the supported way for a harness to collect propgen events,
    e.g. to count degenerate generators in a run.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
