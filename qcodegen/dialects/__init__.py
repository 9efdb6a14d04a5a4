"""Dialect emitters: Quil, OpenQASM 2.0 and a Q#-like language."""

from __future__ import annotations

from typing import Dict, Union

from .base import Dialect, DialectEmitter
from .qasm2 import QASM2Emitter, qasm_gate_name, register_sizes
from .qsharp import QSharpEmitter, qsharp_gate_name
from .quil import QuilEmitter

_EMITTERS: Dict[Dialect, DialectEmitter] = {
    Dialect.QUIL: QuilEmitter(),
    Dialect.QASM: QASM2Emitter(),
    Dialect.QSHARP: QSharpEmitter(),
}


def get_emitter(dialect: Union[Dialect, str]) -> DialectEmitter:
    """Return the emitter for ``dialect`` (enum member or name such as ``"q#"``)."""
    return _EMITTERS[Dialect.from_name(dialect)]


__all__ = [
    "Dialect",
    "DialectEmitter",
    "QuilEmitter",
    "QASM2Emitter",
    "QSharpEmitter",
    "get_emitter",
    "qasm_gate_name",
    "qsharp_gate_name",
    "register_sizes",
]
