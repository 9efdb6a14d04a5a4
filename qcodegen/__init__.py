"""qcodegen - render quantum programs as Quil, OpenQASM 2.0 or Q# source."""

__version__ = "0.1.0"

# Circuit model
from .circuit import (
    EXTENDED_GATES,
    ExtendedGate,
    Gate,
    Measurement,
    Operation,
    PhaseGate,
    Program,
)

# Diagnostics
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled

# Dialects
from .dialects import Dialect, get_emitter

# Errors
from .errors import (
    CodegenError,
    MathExpressionError,
    UnknownDialectError,
    UnknownGateError,
    UnsupportedOperationError,
)

# Gate constructors
from . import gates

# I/O
from .io import (
    dump_json_program,
    dump_program,
    export_program,
    json_to_program,
    load_json_program,
    program_to_json,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    "EXTENDED_GATES",
    "Operation",
    "Gate",
    "ExtendedGate",
    "PhaseGate",
    "Measurement",
    "Program",
    "Dialect",
    "get_emitter",
    "CodegenError",
    "UnknownGateError",
    "UnsupportedOperationError",
    "MathExpressionError",
    "UnknownDialectError",
    "gates",
    "export_program",
    "dump_program",
    "program_to_json",
    "json_to_program",
    "dump_json_program",
    "load_json_program",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
