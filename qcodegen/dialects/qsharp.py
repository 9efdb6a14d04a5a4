"""Q#-like emitter.

Operations become call statements: ``X(1);``, ``CNOT(0, 1);``. Controlled
operations take their first qubit as a single-element control array,
``Controlled Z([0], 1);``. Q# has no ``pi`` literal in this form, so
symbolic angles are reduced to decimals with three places.
"""

from __future__ import annotations

from typing import Iterable

from qcodegen.circuit.ops import ExtendedGate, Gate, Measurement, PhaseGate
from qcodegen.io.utils import normalize_angle

from .base import Dialect, DialectEmitter

# Gates whose leading "C" is spelled out as the Controlled functor.
_CONTROLLED_ALIASES = frozenset({"CSWAP", "CZ"})


def qsharp_gate_name(name: str) -> str:
    """
    Map a whitelisted gate name to its Q# spelling.

    >>> qsharp_gate_name("CZ")
    'Controlled Z'
    >>> qsharp_gate_name("CNOT")
    'CNOT'
    """
    if name in _CONTROLLED_ALIASES:
        return name.replace("C", "Controlled ", 1)
    return name


class QSharpEmitter(DialectEmitter):
    """Render operations as Q#-like statements."""

    dialect = Dialect.QSHARP
    label = "Q#"
    unsupported_extended = frozenset({"ISWAP", "CXBASE"})
    unsupported_phase = frozenset({"PSWAP"})

    def emit_gate(self, op: Gate) -> str:
        return f"{op.name}({_join(op.qubits)});"

    def emit_extended_gate(self, op: ExtendedGate) -> str:
        name = qsharp_gate_name(op.name)
        if "Controlled" in name:
            # Qubit count is not validated; an empty list gives an empty control array.
            controls, targets = op.qubits[:1], op.qubits[1:]
            return f"{name}([{_join(controls)}], {_join(targets)});"
        return f"{name}({_join(op.qubits)});"

    def emit_phase_gate(self, op: PhaseGate) -> str:
        angle = normalize_angle(op.angle, decimals=3)
        return f"{op.name}({_join([angle, *op.qubits])});"

    def emit_measurement(self, op: Measurement) -> str:
        return f"let reg{op.register} = M({op.qubit});"


def _join(items: Iterable[object]) -> str:
    return ", ".join(str(item) for item in items)


__all__ = ["QSharpEmitter", "qsharp_gate_name"]
