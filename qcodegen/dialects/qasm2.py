"""OpenQASM 2.0 emitter.

Supported output:
    - ``OPENQASM 2.0;include "qelib1.inc";qreg q[N];creg c[M];`` header
    - simple gates by lower-cased name, e.g. ``x q[1];``
    - extended gates mapped to qelib1 names (``cx``, ``ccx``, ``cz``, ``ch``,
      ``crz``, ``cy``, ``swap``, ``cswap``, ``rx``, ``ry``, ``rz``) and the
      built-in ``CX``
    - parameterized gates with the angle expression passed through, e.g.
      ``rx(pi/2) q[0];``
    - ``measure q[i] -> c[j];``

Not expressible: ``ISWAP`` and ``PSWAP``.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from qcodegen.circuit.ops import ExtendedGate, Gate, Measurement, Operation, PhaseGate
from qcodegen.logging import get_logger

from .base import Dialect, DialectEmitter

logger = get_logger(__name__)

_NAME_EXCEPTIONS = {
    "ccnot": "ccx",
    "cnot": "cx",
    # The built-in two-qubit primitive is spelled in upper case in QASM 2.0.
    "cxbase": "CX",
}


def qasm_gate_name(name: str) -> str:
    """
    Map a whitelisted gate name to its OpenQASM 2.0 spelling.

    >>> qasm_gate_name("Controlled Rz")
    'crz'
    >>> qasm_gate_name("CXBASE")
    'CX'
    """
    lowered = name.lower().replace("controlled ", "c", 1)
    return _NAME_EXCEPTIONS.get(lowered, lowered)


def register_sizes(ops: Sequence[Operation]) -> tuple[int, int]:
    """
    Return the ``(qreg, creg)`` sizes declared in the header.

    Each size is the largest index referenced (qubits across all operations,
    registers across measurements), or 0 when nothing is referenced.
    """
    qubits = [q for op in ops for q in op.qubits_used()]
    registers = [op.register for op in ops if isinstance(op, Measurement)]
    return max(qubits, default=0), max(registers, default=0)


class QASM2Emitter(DialectEmitter):
    """Render operations as OpenQASM 2.0 statements."""

    dialect = Dialect.QASM
    label = "QASM"
    unsupported_extended = frozenset({"ISWAP"})
    unsupported_phase = frozenset({"PSWAP"})

    def header(self, ops: Sequence[Operation]) -> str:
        n_qubits, n_clbits = register_sizes(ops)
        logger.debug("QASM header sizes: qreg=%d creg=%d", n_qubits, n_clbits)
        return (
            'OPENQASM 2.0;include "qelib1.inc";'
            f"qreg q[{n_qubits}];creg c[{n_clbits}];"
        )

    def emit_gate(self, op: Gate) -> str:
        return f"{op.name.lower()} {_qubit_args(op.qubits)};"

    def emit_extended_gate(self, op: ExtendedGate) -> str:
        return f"{qasm_gate_name(op.name)} {_qubit_args(op.qubits)};"

    def emit_phase_gate(self, op: PhaseGate) -> str:
        return f"{qasm_gate_name(op.name)}({op.angle}) {_qubit_args(op.qubits)};"

    def emit_measurement(self, op: Measurement) -> str:
        return f"measure q[{op.qubit}] -> c[{op.register}];"


def _qubit_args(qubits: Iterable[int]) -> str:
    return ",".join(f"q[{q}]" for q in qubits)


__all__ = ["QASM2Emitter", "qasm_gate_name", "register_sizes"]
