"""Quil emitter."""

from __future__ import annotations

from qcodegen.circuit.ops import ExtendedGate, Gate, Measurement, PhaseGate

from .base import Dialect, DialectEmitter


class QuilEmitter(DialectEmitter):
    """
    Render operations as Quil instructions.

    Gate names are upper-cased and qubits are separated by spaces; angle
    expressions are passed through unevaluated since Quil understands
    ``pi`` natively.
    """

    dialect = Dialect.QUIL
    label = "Quil"
    unsupported_extended = frozenset({"CXBASE"})

    def emit_gate(self, op: Gate) -> str:
        return _instruction(op.name.upper(), op.qubits)

    def emit_extended_gate(self, op: ExtendedGate) -> str:
        return _instruction(op.name.upper(), op.qubits)

    def emit_phase_gate(self, op: PhaseGate) -> str:
        return _instruction(f"{op.name.upper()}({op.angle})", op.qubits)

    def emit_measurement(self, op: Measurement) -> str:
        return f"MEASURE {op.qubit} ro[{op.register}]"


def _instruction(head: str, qubits) -> str:
    return " ".join([head] + [str(q) for q in qubits])


__all__ = ["QuilEmitter"]
