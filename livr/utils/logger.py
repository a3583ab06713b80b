"""
Leveled logger used across the engine.

Wraps the standard ``logging`` module so that callers pass a message plus
an optional structured ``data`` mapping, and so that the level can be
chosen per validator instance ("silent" disables output entirely).
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

from livr.types import LogLevel


_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "silent": logging.CRITICAL + 10,
}

DEFAULT_LOG_LEVEL: LogLevel = "warn"


def resolve_log_level(level: Optional[LogLevel] = None) -> LogLevel:
    """Pick the explicit level, then LIVR_LOG_LEVEL, then the default."""
    if level in _LEVELS:
        return level  # type: ignore[return-value]
    env_level = os.environ.get("LIVR_LOG_LEVEL", "").lower()
    if env_level in _LEVELS:
        return env_level  # type: ignore[return-value]
    return DEFAULT_LOG_LEVEL


class Logger:
    """Leveled logger with structured context."""

    def __init__(self, level: LogLevel = DEFAULT_LOG_LEVEL, name: str = "livr"):
        self._level = level
        self._logger = logging.getLogger(name)

    @property
    def level(self) -> LogLevel:
        return self._level

    def is_enabled(self, level: LogLevel) -> bool:
        return _LEVELS[level] >= _LEVELS[self._level]

    def debug(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        self._log("debug", message, data)

    def info(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        self._log("info", message, data)

    def warn(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        self._log("warn", message, data)

    def error(
        self,
        message: str,
        data: Optional[dict[str, Any]] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self._log("error", message, data, error)

    def _log(
        self,
        level: LogLevel,
        message: str,
        data: Optional[dict[str, Any]],
        error: Optional[BaseException] = None,
    ) -> None:
        if not self.is_enabled(level):
            return
        if data:
            self._logger.log(_LEVELS[level], "%s %s", message, data, exc_info=error)
        else:
            self._logger.log(_LEVELS[level], "%s", message, exc_info=error)


class SilentLogger(Logger):
    """Logger that discards everything."""

    def __init__(self) -> None:
        super().__init__("silent")

    def _log(self, level, message, data, error=None) -> None:
        return None


def create_logger(level: Optional[LogLevel] = None) -> Logger:
    resolved = resolve_log_level(level)
    if resolved == "silent":
        return SilentLogger()
    return Logger(resolved)
