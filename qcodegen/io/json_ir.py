"""JSON IR import and export for programs.

See schema.py for the format.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from qcodegen.circuit import ExtendedGate, Gate, Measurement, Operation, PhaseGate, Program

from .schema import SCHEMA_VERSION, validate_json_program


def _operation_to_json(op: Operation) -> Dict[str, Any]:
    if isinstance(op, Measurement):
        return {"kind": "measure", "qubit": op.qubit, "register": op.register}
    if isinstance(op, PhaseGate):
        return {"kind": "phase", "name": op.name, "qubits": list(op.qubits), "angle": op.angle}
    if isinstance(op, ExtendedGate):
        return {"kind": "extended", "name": op.name, "qubits": list(op.qubits)}
    if isinstance(op, Gate):
        return {"kind": "gate", "name": op.name, "qubits": list(op.qubits)}
    raise TypeError(f"Expected an Operation variant, got {type(op).__name__}")


def program_to_json(program: Program, metadata: Optional[dict] = None) -> dict:
    """
    Convert a Program to JSON IR format.

    Parameters
    ----------
    program : Program
        Program to convert.
    metadata : dict, optional
        Optional metadata dictionary. Must be JSON-serializable.

    Returns
    -------
    dict
        JSON IR object following the schema defined in schema.py.
    """
    result: Dict[str, Any] = {
        "version": SCHEMA_VERSION,
        "operations": [_operation_to_json(op) for op in program.ops],
    }
    if metadata:
        result["metadata"] = metadata
    return result


def json_to_program(obj: dict) -> Program:
    """
    Convert a JSON IR object to a Program.

    Raises
    ------
    ValueError
        If the object does not match the schema.
    UnknownGateError
        If an extended or phase entry names a gate outside the whitelist.
    """
    validate_json_program(obj)

    program = Program()
    for entry in obj["operations"]:
        kind = entry["kind"]
        if kind == "measure":
            program.measure(entry["qubit"], entry["register"])
        elif kind == "phase":
            program.append(PhaseGate(entry["name"], entry["qubits"], entry["angle"]))
        elif kind == "extended":
            program.append(ExtendedGate(entry["name"], entry["qubits"]))
        else:
            program.append(Gate(entry["name"], entry["qubits"]))
    return program


def dump_json_program(program: Program, path: str, metadata: Optional[dict] = None) -> None:
    """Write a Program to a JSON file."""
    obj = program_to_json(program, metadata)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)


def load_json_program(path: str) -> Program:
    """
    Load a Program from a JSON file.

    Raises
    ------
    ValueError
        If the file is not valid JSON or does not match the schema.
    FileNotFoundError
        If the file does not exist.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"JSON program file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in file {path}: {e}")

    return json_to_program(obj)


__all__ = [
    "program_to_json",
    "json_to_program",
    "dump_json_program",
    "load_json_program",
]
