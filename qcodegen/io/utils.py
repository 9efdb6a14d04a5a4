"""Angle expression helpers for dialects that need decimal literals.

Quil and OpenQASM accept angle expressions such as ``pi/2`` verbatim, but the
Q#-like dialect only takes numbers. This module decides whether an
expression is already a plain number and otherwise reduces it with a small
restricted-grammar parser:

    expr   := factor (("*" | "/") factor)*
    factor := DIGITS | "pi"

``pi`` is matched case-insensitively and whitespace between tokens is
ignored. Anything else is rejected with :class:`MathExpressionError`; no
general-purpose evaluator is involved.
"""

from __future__ import annotations

import math
import re
from typing import List, Tuple

from qcodegen.errors import MathExpressionError
from qcodegen.logging import get_logger

logger = get_logger(__name__)

_PLAIN_NUMBER = re.compile(
    r"^\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*$"
)
_TOKEN = re.compile(r"\s*(?:(?P<number>[0-9]+)|(?P<pi>pi)|(?P<op>[*/]))", re.IGNORECASE)

NUMBER = "NUMBER"
PI = "PI"
OP = "OP"


def is_plain_number(expr: str) -> bool:
    """Return True if ``expr`` is a decimal literal such as ``"1.5"`` or ``"-2e-3"``."""
    return bool(_PLAIN_NUMBER.match(expr))


def tokenize_angle(expr: str) -> List[Tuple[str, str]]:
    """
    Split an angle expression into ``(kind, text)`` tokens.

    Parameters
    ----------
    expr : str
        Symbolic angle expression, e.g. ``"3 * pi / 4"``.

    Returns
    -------
    list of (str, str)
        Tokens of kind ``NUMBER``, ``PI`` or ``OP``.

    Raises
    ------
    MathExpressionError
        If the expression contains a character outside digits, whitespace,
        ``*``, ``/`` and ``pi``.
    """
    tokens: List[Tuple[str, str]] = []
    pos = 0
    while pos < len(expr):
        match = _TOKEN.match(expr, pos)
        if match is None:
            if expr[pos:].strip():
                raise MathExpressionError(
                    expr, f"unexpected character {expr[pos:].lstrip()[0]!r}"
                )
            break
        if match.group("number") is not None:
            tokens.append((NUMBER, match.group("number")))
        elif match.group("pi") is not None:
            tokens.append((PI, match.group("pi")))
        else:
            tokens.append((OP, match.group("op")))
        pos = match.end()
    return tokens


def evaluate_angle(expr: str) -> float:
    """
    Reduce a symbolic angle expression to a float, substituting π for ``pi``.

    Parameters
    ----------
    expr : str
        Expression built from integers, ``pi``, ``*`` and ``/``.

    Returns
    -------
    float
        The angle value in radians.

    Raises
    ------
    MathExpressionError
        If the expression is empty, malformed (adjacent factors, dangling
        operator) or divides by zero.
    """
    tokens = tokenize_angle(expr)
    if not tokens:
        raise MathExpressionError(expr, "empty expression")

    def factor(index: int) -> float:
        if index >= len(tokens):
            raise MathExpressionError(expr, "expression ends with an operator")
        kind, text = tokens[index]
        if kind == NUMBER:
            return float(int(text))
        if kind == PI:
            return math.pi
        raise MathExpressionError(expr, f"expected a number or 'pi', got {text!r}")

    value = factor(0)
    index = 1
    while index < len(tokens):
        kind, text = tokens[index]
        if kind != OP:
            raise MathExpressionError(expr, f"missing operator before {text!r}")
        operand = factor(index + 1)
        if text == "*":
            value *= operand
        else:
            if operand == 0:
                raise MathExpressionError(expr, "division by zero")
            value /= operand
        index += 2

    logger.debug("Evaluated angle %r to %r", expr, value)
    return value


def format_angle(value: float, decimals: int = 3) -> str:
    """Format an angle with a fixed number of decimal places."""
    return f"{value:.{decimals}f}"


def normalize_angle(expr: str, decimals: int = 3) -> str:
    """
    Return ``expr`` unchanged if it is a plain number, else its evaluated value.

    >>> normalize_angle("0.5")
    '0.5'
    >>> normalize_angle("pi/2")
    '1.571'
    """
    if is_plain_number(expr):
        return expr
    return format_angle(evaluate_angle(expr), decimals)


__all__ = [
    "is_plain_number",
    "tokenize_angle",
    "evaluate_angle",
    "format_angle",
    "normalize_angle",
]
