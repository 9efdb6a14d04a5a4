"""Constructors for the standard gates.

Single-qubit gates return :class:`Gate`; multi-qubit and rotation gates
return :class:`ExtendedGate` or :class:`PhaseGate` with their whitelisted
names. Angles are passed as expressions, e.g. ``RX("pi/2", 0)``.
"""

from __future__ import annotations

from qcodegen.circuit.ops import ExtendedGate, Gate, PhaseGate


def I(q: int) -> Gate:
    """Identity gate."""
    return Gate("I", [q])


def X(q: int) -> Gate:
    """Pauli-X gate (bit-flip, NOT gate)."""
    return Gate("X", [q])


def Y(q: int) -> Gate:
    """Pauli-Y gate."""
    return Gate("Y", [q])


def Z(q: int) -> Gate:
    """Pauli-Z gate (phase-flip)."""
    return Gate("Z", [q])


def H(q: int) -> Gate:
    """Hadamard gate."""
    return Gate("H", [q])


def S(q: int) -> Gate:
    """S gate (quarter turn about Z)."""
    return Gate("S", [q])


def T(q: int) -> Gate:
    """T gate (eighth turn about Z)."""
    return Gate("T", [q])


def CNOT(control: int, target: int) -> ExtendedGate:
    """Controlled-NOT; the first qubit is the control."""
    return ExtendedGate("CNOT", [control, target])


def CCNOT(control1: int, control2: int, target: int) -> ExtendedGate:
    """Toffoli gate."""
    return ExtendedGate("CCNOT", [control1, control2, target])


def CZ(control: int, target: int) -> ExtendedGate:
    return ExtendedGate("CZ", [control, target])


def SWAP(q1: int, q2: int) -> ExtendedGate:
    return ExtendedGate("SWAP", [q1, q2])


def CSWAP(control: int, q1: int, q2: int) -> ExtendedGate:
    """Fredkin gate."""
    return ExtendedGate("CSWAP", [control, q1, q2])


def ISWAP(q1: int, q2: int) -> ExtendedGate:
    return ExtendedGate("ISWAP", [q1, q2])


def PSWAP(angle: str, q1: int, q2: int) -> PhaseGate:
    """Parametric swap."""
    return PhaseGate("PSWAP", [q1, q2], angle)


def RX(angle: str, q: int) -> PhaseGate:
    """Rotation about the X axis by ``angle``."""
    return PhaseGate("Rx", [q], angle)


def RY(angle: str, q: int) -> PhaseGate:
    """Rotation about the Y axis by ``angle``."""
    return PhaseGate("Ry", [q], angle)


def RZ(angle: str, q: int) -> PhaseGate:
    """Rotation about the Z axis by ``angle``."""
    return PhaseGate("Rz", [q], angle)


def CH(control: int, target: int) -> ExtendedGate:
    return ExtendedGate("Controlled H", [control, target])


def CRZ(angle: str, control: int, target: int) -> PhaseGate:
    return PhaseGate("Controlled Rz", [control, target], angle)


def CY(control: int, target: int) -> ExtendedGate:
    return ExtendedGate("Controlled Y", [control, target])


def CXBASE(control: int, target: int) -> ExtendedGate:
    """The bare two-qubit ``CX`` primitive of OpenQASM 2.0."""
    return ExtendedGate("CXBASE", [control, target])
