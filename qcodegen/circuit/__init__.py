"""Circuit model: operation variants and the Program container."""

from .core import Program
from .ops import EXTENDED_GATES, ExtendedGate, Gate, Measurement, Operation, PhaseGate

__all__ = [
    "EXTENDED_GATES",
    "Operation",
    "Gate",
    "ExtendedGate",
    "PhaseGate",
    "Measurement",
    "Program",
]
