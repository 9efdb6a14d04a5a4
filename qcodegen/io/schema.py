"""JSON IR schema definition and validation for programs.

Schema Structure:
    {
        "version": "qcodegen-json-1.0",
        "operations": [
            {"kind": "gate",     "name": <string>, "qubits": [<integer>, ...]},
            {"kind": "extended", "name": <string>, "qubits": [<integer>, ...]},
            {"kind": "phase",    "name": <string>, "qubits": [<integer>, ...],
             "angle": <string>},
            {"kind": "measure",  "qubit": <integer>, "register": <integer>},
            ...
        ],
        "metadata": {...}                      # optional
    }

Operation order in "operations" is circuit order. Qubit and register indices
must be non-negative integers; nothing else about them is checked, matching
the in-memory model.
"""

from __future__ import annotations

SCHEMA_VERSION = "qcodegen-json-1.0"
OPERATION_KINDS = ("gate", "extended", "phase", "measure")


def json_program_schema() -> dict:
    """
    Return the JSON IR schema as a Python dict.

    This is a structural description, not a full JSON Schema document.
    """
    return {
        "version": {
            "type": "string",
            "description": f"Schema version identifier, e.g., {SCHEMA_VERSION!r}",
            "required": True,
        },
        "operations": {
            "type": "list",
            "description": "Operations in circuit order",
            "required": True,
            "items": {
                "kind": {
                    "type": "string",
                    "description": "One of " + ", ".join(OPERATION_KINDS),
                    "required": True,
                },
                "name": {
                    "type": "string",
                    "description": "Gate name (gate, extended and phase kinds)",
                    "required": False,
                },
                "qubits": {
                    "type": "list",
                    "description": "Qubit indices (gate, extended and phase kinds)",
                    "required": False,
                    "items": {"type": "integer", "min": 0},
                },
                "angle": {
                    "type": "string",
                    "description": "Angle expression (phase kind)",
                    "required": False,
                },
                "qubit": {
                    "type": "integer",
                    "description": "Measured qubit (measure kind)",
                    "required": False,
                    "min": 0,
                },
                "register": {
                    "type": "integer",
                    "description": "Classical register written (measure kind)",
                    "required": False,
                    "min": 0,
                },
            },
        },
        "metadata": {
            "type": "dict",
            "description": "Optional metadata (producer, timestamp, notes, etc.)",
            "required": False,
        },
    }


def _check_index(value: object, where: str) -> None:
    # bool is an int subclass but never a valid index
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{where} must be an integer, got {type(value).__name__}.")
    if value < 0:
        raise ValueError(f"{where} must be >= 0, got {value}.")


def validate_json_program(obj: dict) -> None:
    """
    Validate a JSON program object against the schema.

    Raises
    ------
    ValueError
        If the object does not conform to the schema.
    """
    if not isinstance(obj, dict):
        raise ValueError("JSON program must be a dictionary object.")

    if "version" not in obj:
        raise ValueError("JSON program missing required field 'version'.")
    if not isinstance(obj["version"], str):
        raise ValueError("Field 'version' must be a string.")

    if "operations" not in obj:
        raise ValueError("JSON program missing required field 'operations'.")
    if not isinstance(obj["operations"], list):
        raise ValueError("Field 'operations' must be a list.")

    for i, op in enumerate(obj["operations"]):
        if not isinstance(op, dict):
            raise ValueError(f"Operation at index {i} must be a dictionary object.")

        kind = op.get("kind")
        if kind not in OPERATION_KINDS:
            raise ValueError(
                f"Operation at index {i}: field 'kind' must be one of "
                f"{list(OPERATION_KINDS)}, got {kind!r}."
            )

        if kind == "measure":
            for field in ("qubit", "register"):
                if field not in op:
                    raise ValueError(f"Operation at index {i} missing required field {field!r}.")
                _check_index(op[field], f"Operation at index {i}: field {field!r}")
            continue

        if not isinstance(op.get("name"), str):
            raise ValueError(f"Operation at index {i}: field 'name' must be a string.")
        if not isinstance(op.get("qubits"), list):
            raise ValueError(f"Operation at index {i}: field 'qubits' must be a list.")
        for j, q in enumerate(op["qubits"]):
            _check_index(q, f"Operation at index {i}: qubits[{j}]")

        if kind == "phase" and not isinstance(op.get("angle"), str):
            raise ValueError(f"Operation at index {i}: field 'angle' must be a string.")

    if "metadata" in obj and not isinstance(obj["metadata"], dict):
        raise ValueError("Field 'metadata' must be a dictionary.")


__all__ = ["SCHEMA_VERSION", "json_program_schema", "validate_json_program"]
