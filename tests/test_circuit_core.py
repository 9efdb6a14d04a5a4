"""Tests for the operation variants and the Program container."""

from __future__ import annotations

import dataclasses

import pytest

from qcodegen.circuit import (
    EXTENDED_GATES,
    ExtendedGate,
    Gate,
    Measurement,
    Operation,
    PhaseGate,
    Program,
)
from qcodegen.errors import CodegenError, UnknownGateError

WHITELIST = [
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
]


class TestOperations:
    """Construction and qubit reporting of each variant."""

    def test_whitelist_contents(self):
        assert EXTENDED_GATES == frozenset(WHITELIST)

    @pytest.mark.parametrize("name", WHITELIST)
    def test_whitelisted_names_construct(self, name):
        gate = ExtendedGate(name, [0, 1])
        assert gate.name == name
        phase = PhaseGate(name, [0], "pi")
        assert phase.name == name

    @pytest.mark.parametrize(
        "name", ["X", "cnot", "Cnot", "CNOT ", "Controlled X", "controlled H", "RX", ""]
    )
    def test_unknown_names_rejected(self, name):
        with pytest.raises(UnknownGateError) as excinfo:
            ExtendedGate(name, [0, 1])
        assert excinfo.value.name == name

        with pytest.raises(UnknownGateError):
            PhaseGate(name, [0], "pi/2")

    def test_unknown_gate_error_is_value_error(self):
        with pytest.raises(ValueError):
            ExtendedGate("FOO", [0])
        assert issubclass(UnknownGateError, CodegenError)

    def test_simple_gate_accepts_any_name(self):
        gate = Gate("whatever", [3])
        assert gate.name == "whatever"
        assert gate.qubits_used() == [3]

    def test_qubits_used_preserves_order_and_duplicates(self):
        assert Gate("X", [2, 0, 2]).qubits_used() == [2, 0, 2]
        assert ExtendedGate("CCNOT", [5, 1, 5]).qubits_used() == [5, 1, 5]
        assert PhaseGate("Rz", [4], "0.1").qubits_used() == [4]
        assert Measurement(7, 1).qubits_used() == [7]

    def test_qubits_used_returns_a_copy(self):
        gate = ExtendedGate("CNOT", [0, 1])
        used = gate.qubits_used()
        used.append(9)
        assert gate.qubits_used() == [0, 1]

    def test_operations_are_frozen(self):
        gate = PhaseGate("Rx", [0], "pi")
        with pytest.raises(dataclasses.FrozenInstanceError):
            gate.angle = "0"
        with pytest.raises(dataclasses.FrozenInstanceError):
            Measurement(0, 0).register = 1

    def test_phase_gate_is_extended_gate(self):
        gate = PhaseGate("PSWAP", [0, 1], "0.5")
        assert isinstance(gate, ExtendedGate)
        assert isinstance(gate, Operation)
        assert gate.angle == "0.5"

    def test_equality(self):
        assert Gate("X", [1]) == Gate("X", (1,))
        assert PhaseGate("Rx", [0], "pi") != PhaseGate("Rx", [0], "pi/2")
        assert ExtendedGate("CZ", [0, 1]) != Gate("CZ", [0, 1])

    def test_no_qubit_validation(self):
        # Negative and repeated indices are the caller's concern.
        gate = ExtendedGate("SWAP", [-1, -1])
        assert gate.qubits_used() == [-1, -1]

    def test_operation_renders_itself(self):
        assert Gate("H", [0]).render("quil") == "H 0"
        assert Measurement(0, 3).render("q#") == "let reg3 = M(0);"


class TestProgram:
    """Program container behaviour."""

    def test_empty_program(self):
        program = Program()
        assert len(program) == 0
        assert program.ops == ()

    def test_append_preserves_order(self):
        program = Program()
        ops = [Gate("H", [0]), ExtendedGate("CNOT", [0, 1]), Gate("X", [1])]
        for op in ops:
            program.append(op)
        assert list(program.ops) == ops
        assert list(program) == ops

    def test_measure_appends_measurement(self):
        program = Program()
        program.measure(1, 2)
        assert program.ops == (Measurement(1, 2),)

    def test_extend(self):
        program = Program()
        program.extend([Gate("H", [0]), Gate("H", [1])])
        assert len(program) == 2

    def test_append_rejects_non_operations(self):
        program = Program()
        with pytest.raises(TypeError):
            program.append("X 1")
        assert len(program) == 0

    def test_ops_is_read_only_snapshot(self):
        program = Program()
        program.append(Gate("H", [0]))
        snapshot = program.ops
        program.append(Gate("H", [1]))
        assert len(snapshot) == 1
        assert len(program.ops) == 2

    def test_copy_is_independent(self, bell_program):
        clone = bell_program.copy()
        clone.append(Gate("Z", [0]))
        assert len(clone) == len(bell_program) + 1

    def test_qubits_and_registers_used(self, bell_program):
        assert bell_program.qubits_used() == [0, 0, 1, 0, 1]
        assert bell_program.registers_used() == [0, 1]

    def test_gate_counts(self, bell_program):
        counts = bell_program.gate_counts()
        assert counts == {"H": 1, "CNOT": 1, "MEASURE": 2}
