"""Pytest configuration and shared fixtures for qcodegen tests.

This module provides:
- Small reference programs used across the dialect tests
- Isolation of the global debug-mode flag
"""

import pytest

from qcodegen.circuit import Gate, Program
from qcodegen.diagnostics import is_debug_enabled, set_debug_enabled
from qcodegen.gates import CNOT, H


@pytest.fixture(scope="function")
def x_measure_program() -> Program:
    """X on qubit 1, then measure qubit 1 into register 2."""
    program = Program()
    program.append(Gate("X", [1]))
    program.measure(1, 2)
    return program


@pytest.fixture(scope="function")
def bell_program() -> Program:
    """Bell pair on qubits 0 and 1, both measured."""
    program = Program()
    program.append(H(0))
    program.append(CNOT(0, 1))
    program.measure(0, 0)
    program.measure(1, 1)
    return program


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture that restores the debug flag after every test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
