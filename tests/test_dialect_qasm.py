"""Tests for the OpenQASM 2.0 emitter."""

from __future__ import annotations

import pytest

from qcodegen.circuit import ExtendedGate, Gate, Measurement, PhaseGate
from qcodegen.dialects import QASM2Emitter, get_emitter, qasm_gate_name, register_sizes
from qcodegen.errors import UnsupportedOperationError
from qcodegen.gates import CCNOT, CNOT, CRZ, CSWAP, CXBASE, CY, CZ, RY, RZ

HEADER = 'OPENQASM 2.0;include "qelib1.inc";'


@pytest.fixture
def qasm() -> QASM2Emitter:
    return get_emitter("qasm")


class TestNaming:
    """Tests for the gate name mapping."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("CNOT", "cx"),
            ("CCNOT", "ccx"),
            ("CZ", "cz"),
            ("Controlled H", "ch"),
            ("Controlled Rz", "crz"),
            ("Controlled Y", "cy"),
            ("CXBASE", "CX"),
            ("SWAP", "swap"),
            ("CSWAP", "cswap"),
            ("Rx", "rx"),
            ("Ry", "ry"),
            ("Rz", "rz"),
        ],
    )
    def test_qasm_gate_name(self, name, expected):
        assert qasm_gate_name(name) == expected


class TestStatements:
    """Tests for single-statement rendering."""

    def test_simple_gate(self, qasm):
        assert qasm.emit(Gate("X", [1])) == "x q[1];"

    def test_extended_gate_qubits_comma_joined(self, qasm):
        assert qasm.emit(CNOT(0, 1)) == "cx q[0],q[1];"
        assert qasm.emit(CCNOT(0, 1, 2)) == "ccx q[0],q[1],q[2];"
        assert qasm.emit(CSWAP(2, 0, 1)) == "cswap q[2],q[0],q[1];"
        assert qasm.emit(CZ(0, 1)) == "cz q[0],q[1];"
        assert qasm.emit(CY(1, 0)) == "cy q[1],q[0];"

    def test_cxbase_keeps_uppercase(self, qasm):
        assert qasm.emit(CXBASE(0, 1)) == "CX q[0],q[1];"

    def test_phase_gate_angle_verbatim(self, qasm):
        assert qasm.emit(RZ("pi/4", 2)) == "rz(pi/4) q[2];"
        assert qasm.emit(RY("0.5", 0)) == "ry(0.5) q[0];"
        assert qasm.emit(CRZ("pi/2", 0, 1)) == "crz(pi/2) q[0],q[1];"

    def test_measurement(self, qasm):
        assert qasm.emit(Measurement(1, 2)) == "measure q[1] -> c[2];"

    def test_iswap_unsupported(self, qasm):
        with pytest.raises(UnsupportedOperationError) as excinfo:
            qasm.emit(ExtendedGate("ISWAP", [0, 1]))
        assert excinfo.value.name == "ISWAP"
        assert "QASM" in str(excinfo.value)

    def test_pswap_phase_gate_unsupported(self, qasm):
        with pytest.raises(UnsupportedOperationError) as excinfo:
            qasm.emit(PhaseGate("PSWAP", [0, 1], "pi"))
        assert excinfo.value.name == "PSWAP"

    def test_unsupported_sets_are_per_variant(self, qasm):
        assert qasm.emit(ExtendedGate("PSWAP", [0, 1])) == "pswap q[0],q[1];"
        assert qasm.emit(PhaseGate("ISWAP", [0, 1], "pi")) == "iswap(pi) q[0],q[1];"


class TestHeader:
    """Tests for the program preamble."""

    def test_register_sizes_use_largest_index(self):
        ops = [CNOT(0, 3), Measurement(2, 5)]
        assert register_sizes(ops) == (3, 5)

    def test_register_sizes_empty(self):
        assert register_sizes([]) == (0, 0)

    def test_measurement_qubit_counts_towards_qreg(self):
        assert register_sizes([Gate("X", [0]), Measurement(4, 0)]) == (4, 0)

    def test_header_text(self, qasm):
        assert qasm.header([Gate("X", [1]), Measurement(1, 2)]) == (
            HEADER + "qreg q[1];creg c[2];"
        )

    def test_render_empty_program_is_header_only(self, qasm):
        assert qasm.render([]) == HEADER + "qreg q[0];creg c[0];"
