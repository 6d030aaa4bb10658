"""structlog setup for applyable and the applications using it.

Library code logs through stdlib loggers wrapped by structlog, so a host
that never configures logging hears nothing below WARNING. Hosts that want
the events call `configure_logging` (or `LoggingConfig().configure()`),
which routes structlog and plain stdlib records through one
`ProcessorFormatter` on the root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = ['configure_logging', 'get_logger']


def _pre_chain() -> list[Any]:
    """Processors run for both structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Send structlog and stdlib logs to stderr through a single formatter.

    Replaces any handlers on the root logger.

    Args:
        level: Logging level name; unknown names fall back to INFO.
        json_output: JSON lines when True, console rendering otherwise.
    """
    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
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
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger `name`.

    Level filtering and output are decided by stdlib logging, so nothing is
    printed until the host configures it.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
