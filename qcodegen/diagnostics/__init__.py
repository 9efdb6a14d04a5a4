"""Diagnostics and debugging utilities for qcodegen."""

from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    trace_render,
)

__all__ = [
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "trace_render",
]
