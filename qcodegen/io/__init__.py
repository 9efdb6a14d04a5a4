"""I/O modules: angle normalization, JSON IR and source export."""

from .export import dump_program, export_program
from .json_ir import dump_json_program, json_to_program, load_json_program, program_to_json
from .schema import json_program_schema, validate_json_program
from .utils import evaluate_angle, format_angle, is_plain_number, normalize_angle, tokenize_angle

__all__ = [
    "export_program",
    "dump_program",
    "program_to_json",
    "json_to_program",
    "dump_json_program",
    "load_json_program",
    "json_program_schema",
    "validate_json_program",
    "is_plain_number",
    "tokenize_angle",
    "evaluate_angle",
    "format_angle",
    "normalize_angle",
]
