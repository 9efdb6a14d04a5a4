"""Dialect enumeration and the shared emitter machinery."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Union

from qcodegen.circuit.ops import ExtendedGate, Gate, Measurement, Operation, PhaseGate
from qcodegen.errors import UnknownDialectError, UnsupportedOperationError
from qcodegen.logging import get_logger

logger = get_logger(__name__)


class Dialect(str, Enum):
    """Output languages a program can be rendered to."""

    QUIL = "quil"
    QASM = "qasm"
    QSHARP = "q#"

    @classmethod
    def from_name(cls, value: Union["Dialect", str]) -> "Dialect":
        """
        Resolve a dialect from an enum member or its name.

        Parameters
        ----------
        value:
            ``Dialect`` member or one of ``"quil"``, ``"qasm"``, ``"q#"``
            (case-insensitive).

        Raises
        ------
        UnknownDialectError
            If ``value`` names no supported dialect.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise UnknownDialectError(value)


class DialectEmitter:
    """
    Base class for a dialect's rendering rules.

    Subclasses implement one method per operation variant. :meth:`emit`
    dispatches to them after rejecting names the dialect cannot express;
    extended and phase gates have separate unsupported sets.
    """

    dialect: Dialect
    label: str = ""
    unsupported_extended: FrozenSet[str] = frozenset()
    unsupported_phase: FrozenSet[str] = frozenset()
    separator: str = "\n"

    def emit(self, op: Operation) -> str:
        """Render a single operation, or raise if the dialect cannot express it."""
        # PhaseGate is an ExtendedGate, so it must be matched first.
        if isinstance(op, PhaseGate):
            self._check_supported(op.name, self.unsupported_phase)
            return self.emit_phase_gate(op)
        if isinstance(op, ExtendedGate):
            self._check_supported(op.name, self.unsupported_extended)
            return self.emit_extended_gate(op)
        if isinstance(op, Gate):
            return self.emit_gate(op)
        if isinstance(op, Measurement):
            return self.emit_measurement(op)
        raise TypeError(f"Expected an Operation variant, got {type(op).__name__}")

    def header(self, ops: Sequence[Operation]) -> Optional[str]:
        """Return the program preamble, or None if the dialect has none."""
        return None

    def render(self, ops: Sequence[Operation]) -> str:
        """Render a whole operation sequence, header included."""
        logger.debug("Rendering %d operations as %s", len(ops), self.dialect.value)
        lines: List[str] = []
        for op in ops:
            line = self.emit(op)
            if line:
                lines.append(line)
        body = self.separator.join(lines)
        logger.debug("Rendered %d lines as %s", len(lines), self.dialect.value)

        header = self.header(ops)
        if header is None:
            return body
        if not body:
            return header
        return header + self.separator + body

    def _check_supported(self, name: str, unsupported: FrozenSet[str]) -> None:
        if name in unsupported:
            raise UnsupportedOperationError(name, self.label or self.dialect.value)

    def emit_gate(self, op: Gate) -> str:
        raise NotImplementedError

    def emit_extended_gate(self, op: ExtendedGate) -> str:
        raise NotImplementedError

    def emit_phase_gate(self, op: PhaseGate) -> str:
        raise NotImplementedError

    def emit_measurement(self, op: Measurement) -> str:
        raise NotImplementedError


__all__ = ["Dialect", "DialectEmitter"]
