"""
Utility helpers for the LIVR package.
"""

from livr.utils.logger import Logger, SilentLogger, create_logger, resolve_log_level

__all__ = [
    "Logger",
    "SilentLogger",
    "create_logger",
    "resolve_log_level",
]
