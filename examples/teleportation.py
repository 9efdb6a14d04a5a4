"""Teleportation example: one program rendered in every supported dialect.

The circuit prepares a state on qubit 0 with a rotation, entangles qubits 1
and 2, and measures the sender's qubits. Q# receives the rotation angle as a
decimal, Quil and QASM keep the ``pi`` expression.
"""

from __future__ import annotations

import qcodegen as qg
from qcodegen.gates import CNOT, H, RY


def build_program() -> qg.Program:
    """Return the teleportation circuit up to the classical corrections."""
    program = qg.Program()
    program.append(RY("pi/3", 0))
    program.append(H(1))
    program.append(CNOT(1, 2))
    program.append(CNOT(0, 1))
    program.append(H(0))
    program.measure(0, 0)
    program.measure(1, 1)
    return program


def main() -> None:
    """Print the program in each dialect."""
    program = build_program()

    for dialect in qg.Dialect:
        print(f"--- {dialect.value} ---")
        print(program.render(dialect))

    print(f"Rendered {len(program)} operations in {len(qg.Dialect)} dialects")


if __name__ == "__main__":
    main()
