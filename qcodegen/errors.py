"""Exceptions raised while building and rendering programs.

All of them derive from ``ValueError`` so code that already guards calls
with ``except ValueError`` keeps working.
"""

from __future__ import annotations


class CodegenError(ValueError):
    """Base class for qcodegen domain errors."""


class UnknownGateError(CodegenError):
    """An extended or phase gate was constructed with a name outside the whitelist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Gate type unknown: {name!r}")


class UnsupportedOperationError(CodegenError):
    """A gate has no rendering rule in the requested dialect."""

    def __init__(self, name: str, dialect: str) -> None:
        self.name = name
        self.dialect = dialect
        super().__init__(f"{name} operation not supported on {dialect}")


class MathExpressionError(CodegenError):
    """An angle expression cannot be reduced to a number for this dialect."""

    def __init__(self, expression: str, reason: str = "") -> None:
        self.expression = expression
        self.reason = reason
        message = f"Cannot render expression {expression!r} in this dialect"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownDialectError(CodegenError):
    """The requested output dialect is not one of the supported dialects."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Unknown dialect {value!r}. Supported dialects: 'quil', 'qasm', 'q#'."
        )


__all__ = [
    "CodegenError",
    "UnknownGateError",
    "UnsupportedOperationError",
    "MathExpressionError",
    "UnknownDialectError",
]
