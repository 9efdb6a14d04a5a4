"""Program container: an ordered list of operations that renders to text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Tuple, Union

from qcodegen.diagnostics.debug_mode import trace_render

from .ops import Measurement, Operation

if TYPE_CHECKING:
    from qcodegen.dialects.base import Dialect


class Program:
    """
    An ordered, append-only sequence of operations.

    Insertion order is circuit order and is kept verbatim in every dialect.
    Rendering never modifies the program, so the same program can be
    rendered to any number of dialects, any number of times.
    """

    def __init__(self) -> None:
        """Initialize an empty Program."""
        self._ops: List[Operation] = []

    @property
    def ops(self) -> Tuple[Operation, ...]:
        """Return a read-only tuple of all operations."""
        return tuple(self._ops)

    def append(self, operation: Operation) -> None:
        """
        Append one operation to the end of the program.

        Raises
        ------
        TypeError
            If ``operation`` is not an :class:`Operation`.
        """
        if not isinstance(operation, Operation):
            raise TypeError(
                f"Program.append expects an Operation, got {type(operation).__name__}"
            )
        self._ops.append(operation)

    def extend(self, operations: Iterable[Operation]) -> None:
        """Append several operations, keeping their order."""
        for op in operations:
            self.append(op)

    def measure(self, qubit: int, register: int) -> None:
        """Append a measurement of ``qubit`` into classical register ``register``."""
        self.append(Measurement(qubit, register))

    def copy(self) -> "Program":
        """Return a copy of this program. Operations are immutable and shared."""
        new = Program()
        new._ops.extend(self._ops)
        return new

    def __len__(self) -> int:
        return len(self._ops)

    def __iter__(self) -> Iterator[Operation]:
        return iter(tuple(self._ops))

    def qubits_used(self) -> List[int]:
        """Return every qubit index referenced, in operation order."""
        return [q for op in self._ops for q in op.qubits_used()]

    def registers_used(self) -> List[int]:
        """Return every classical register index written by a measurement."""
        return [op.register for op in self._ops if isinstance(op, Measurement)]

    def gate_counts(self) -> Dict[str, int]:
        """Return a dictionary mapping operation names to their counts."""
        counts: Dict[str, int] = {}
        for op in self._ops:
            name = "MEASURE" if isinstance(op, Measurement) else op.name
            counts[name] = counts.get(name, 0) + 1
        return counts

    def render(self, dialect: Union["Dialect", str]) -> str:
        """
        Render the program as source code in ``dialect``.

        Parameters
        ----------
        dialect:
            ``"quil"``, ``"qasm"``, ``"q#"`` or a :class:`Dialect` member.

        Returns
        -------
        str
            Lines joined by ``"\\n"``; for QASM, preceded by the header.

        Raises
        ------
        UnknownDialectError
            If ``dialect`` is not supported.
        UnsupportedOperationError
            If an operation has no rendering rule in ``dialect``.
        MathExpressionError
            If an angle cannot be reduced to a number where one is needed.
        """
        from qcodegen.dialects import get_emitter

        emitter = get_emitter(dialect)
        ops = tuple(self._ops)
        trace_render(emitter, ops)
        return emitter.render(ops)


__all__ = ["Program"]
