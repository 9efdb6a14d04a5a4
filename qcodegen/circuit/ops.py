"""Operation variants that make up a program.

Four kinds of step exist and every dialect emitter handles each of them:

- :class:`Gate`: a simple gate with an open name set (``X``, ``H``, ...).
- :class:`ExtendedGate`: a multi-qubit or controlled gate whose name must be
  in :data:`EXTENDED_GATES`.
- :class:`PhaseGate`: an extended gate that also carries an angle
  expression.
- :class:`Measurement`: reads one qubit into one classical register.

Operations are frozen once built. Qubit indices are stored as given: their
count, range and uniqueness are left to the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple, Union

from qcodegen.errors import UnknownGateError

if TYPE_CHECKING:
    from qcodegen.dialects.base import Dialect

EXTENDED_GATES = frozenset(
    {
        "CNOT",
        "CCNOT",
        "CZ",
        "Controlled H",
        "Controlled Rz",
        "CXBASE",
        "Controlled Y",
        "SWAP",
        "CSWAP",
        "ISWAP",
        "PSWAP",
        "Rx",
        "Ry",
        "Rz",
    }
)


class Operation(ABC):
    """One step of a program: knows its qubits and can render itself."""

    @abstractmethod
    def qubits_used(self) -> List[int]:
        """Return the qubit indices this operation references, in order."""

    def render(self, dialect: Union["Dialect", str]) -> str:
        """Render this operation alone as one line of ``dialect`` source."""
        from qcodegen.dialects import get_emitter

        return get_emitter(dialect).emit(self)


@dataclass(frozen=True)
class Gate(Operation):
    """
    A simple gate application.

    Attributes
    ----------
    name:
        Gate name, e.g. "X", "H", "T". Not validated.
    qubits:
        Tuple of qubit indices, in the order supplied.
    """

    name: str
    qubits: Tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "qubits", tuple(self.qubits))

    def qubits_used(self) -> List[int]:
        return list(self.qubits)


@dataclass(frozen=True)
class ExtendedGate(Operation):
    """
    A gate whose name is drawn from :data:`EXTENDED_GATES`.

    Raises
    ------
    UnknownGateError
        If ``name`` is not exactly one of the whitelisted names.
    """

    name: str
    qubits: Tuple[int, ...]

    def __post_init__(self) -> None:
        if self.name not in EXTENDED_GATES:
            raise UnknownGateError(self.name)
        object.__setattr__(self, "qubits", tuple(self.qubits))

    def qubits_used(self) -> List[int]:
        return list(self.qubits)


@dataclass(frozen=True)
class PhaseGate(ExtendedGate):
    """
    An extended gate parameterized by an angle expression.

    The angle is kept as text (``"0.5"``, ``"pi/2"``, ``"3*pi/4"``); dialects
    decide whether to emit it verbatim or reduce it to a number.
    """

    angle: str

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "angle", str(self.angle))


@dataclass(frozen=True)
class Measurement(Operation):
    """Measure ``qubit`` into classical register ``register``."""

    qubit: int
    register: int

    def qubits_used(self) -> List[int]:
        return [self.qubit]


__all__ = [
    "EXTENDED_GATES",
    "Operation",
    "Gate",
    "ExtendedGate",
    "PhaseGate",
    "Measurement",
]
