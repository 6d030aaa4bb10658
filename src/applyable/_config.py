"""Logging configuration for applications using applyable."""

from __future__ import annotations

from dataclasses import dataclass

from applyable._logging import configure_logging

__all__ = ['LoggingConfig']


@dataclass(frozen=True)
class LoggingConfig:
    """Settings handed to `configure_logging`.

    Attributes:
        level: Logging level (e.g., "DEBUG", "INFO").
        json_output: Emit JSON lines when True, console output otherwise.
    """

    level: str = 'INFO'
    json_output: bool = True

    def configure(self) -> None:
        """Install these settings on structlog and the root stdlib logger."""
        configure_logging(self.level, json_output=self.json_output)
