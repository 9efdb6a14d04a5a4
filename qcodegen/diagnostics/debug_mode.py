"""Debug mode for qcodegen: per-operation tracing of rendered output.

The initial state comes from the ``QCODEGEN_DEBUG`` environment variable
(``1``, ``true``, ``yes`` or ``on``). While debug mode is on,
:meth:`Program.render` reports each operation together with the line it
produced, at DEBUG level on the ``qcodegen.diagnostics`` logger.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Sequence

from qcodegen.logging import get_logger

if TYPE_CHECKING:
    from qcodegen.circuit.ops import Operation
    from qcodegen.dialects.base import DialectEmitter

logger = get_logger("qcodegen.diagnostics")

_DEBUG_ENV_VAR = "QCODEGEN_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _env_flag(_DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """Return whether debug mode is currently enabled."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     program.render("qasm")
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def trace_render(emitter: "DialectEmitter", ops: Sequence["Operation"]) -> None:
    """
    Log every operation and the line ``emitter`` renders for it.

    Does nothing unless debug mode is on. Errors raised by the emitter
    propagate unchanged, so the first failing operation is reported the same
    way a normal render would report it.
    """
    if not _debug_enabled:
        return
    for index, op in enumerate(ops):
        logger.debug("[%s] op %d %r -> %r", emitter.dialect.value, index, op, emitter.emit(op))
