"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

# Event keys that may carry what the user typed or pasted.
FIELD_TEXT_KEYS = frozenset({"value", "raw", "formatted", "clipboard", "text"})


def mask_field_text(logger, method_name, event_dict):
    """Replace field content with its length so records never hold user input."""
    for key in FIELD_TEXT_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = f"<{len(value)} chars>"
    return event_dict


def resolve_log_level(log_level: str | int) -> int:
    """Map a level name such as ``"debug"`` to its ``logging`` number."""
    if isinstance(log_level, int):
        return log_level
    levels = logging.getLevelNamesMapping()
    try:
        return levels[log_level.strip().upper()]
    except KeyError:
        raise ValueError(
            f"Unknown log level {log_level!r}, expected one of {', '.join(sorted(levels))}"
        ) from None


def setup_logging(log_level: str | int = "INFO", json_output: bool = True):
    """Configure structlog for hosts embedding numeric fields.

    JSON lines go to stdout by default; ``json_output=False`` switches to the
    plain console renderer for local debugging.  Hosts call this once at
    startup; the library itself only obtains loggers.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            mask_field_text,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given component *name*."""
    return structlog.get_logger(name)
