"""Numeral parsing, formatting and evaluation for pocketcalc.

The engine computes on floats and only talks strings at the display boundary.
Everything that turns a display string into a number or back lives here.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

from pocketcalc.models import Operation

ERROR_TOKEN = "Error"

# Optional sign, at least one digit, at most one point
_NUMERAL_RE = re.compile(r"^-?\d+(\.\d*)?$")


def is_numeral(text: str) -> bool:
    """True if text is a display numeral: ``-12``, ``0.``, ``3.25``."""
    return bool(_NUMERAL_RE.match(text))


def parse_numeral(text: str) -> float:
    """Parse a display numeral into a float.

    Raises:
        ValueError: text is not a numeral (e.g. the error token).
        OverflowError: the numeral is too large for a float.
    """
    if not is_numeral(text):
        raise ValueError(f"Not a numeral: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise OverflowError(f"Numeral out of range: {text[:20]}...")
    return value


def format_number(value: float) -> str:
    """Render a float as a canonical display numeral.

    Uses the shortest digits that round-trip (``repr``), drops a ``.0``
    fraction, collapses negative zero, and never emits exponent notation
    so the result can keep being typed on.

    Raises:
        ValueError: value is NaN or infinite.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot render non-finite value: {value}")
    if value == 0:
        return "0"
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def compute(first: float, second: float, op: Operation) -> float:
    """Apply a binary operation to two floats.

    Raises:
        ZeroDivisionError: division by zero.
        OverflowError: the result is not finite.
    """
    if op == Operation.ADD:
        result = first + second
    elif op == Operation.SUBTRACT:
        result = first - second
    elif op == Operation.MULTIPLY:
        result = first * second
    elif op == Operation.DIVIDE:
        if second == 0:
            raise ZeroDivisionError("division by zero")
        result = first / second
    elif op == Operation.PERCENT_OF:
        result = (first * second) / 100
    else:
        raise ValueError(f"Unknown operation: {op!r}")

    if not math.isfinite(result):
        raise OverflowError(f"{first} {op.value} {second} is out of range")
    return result


def apply(first: str, second: str, op: Operation, error_token: str = ERROR_TOKEN) -> str:
    """String-level evaluation: parse both operands, compute, render.

    Total over all strings: arithmetic errors and operands that are not
    numerals (the error token fed back in, for one) come back as
    ``error_token`` instead of raising.
    """
    try:
        return format_number(compute(parse_numeral(first), parse_numeral(second), op))
    except (ArithmeticError, ValueError):
        return error_token
