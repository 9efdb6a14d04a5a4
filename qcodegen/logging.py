"""Logging utilities for qcodegen.

Every module obtains its logger through :func:`get_logger`, so all output is
routed through the ``qcodegen`` namespace and can be tuned in one place.

The package never prints. At DEBUG level it reports:

- ``qcodegen.dialects.base``: start and end of each render (operation count,
  dialect, number of emitted lines)
- ``qcodegen.dialects.qasm2``: the computed ``qreg``/``creg`` header sizes
- ``qcodegen.io.utils``: each symbolic angle and the value it reduced to
- ``qcodegen.io.export``: files written by :func:`qcodegen.io.dump_program`
- ``qcodegen.diagnostics``: the per-operation trace while debug mode is on

Loggers default to WARNING, so none of this appears unless the level is
lowered with :func:`set_log_level` or :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from qcodegen.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Rendering %d operations as %s", 2, "quil")
    """
    if name is None:
        name = "qcodegen"

    logger_name = name if name == "qcodegen" or name.startswith("qcodegen.") else f"qcodegen.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all qcodegen loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for qcodegen.

    Replaces the handler of every logger created so far and changes the
    defaults used for loggers created afterwards.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).
    """
    level = _coerce_level(level)

    if stream is None:
        stream = sys.stderr

    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


__all__ = ["get_logger", "set_log_level", "configure_logging"]
