"""Display-time formatting of the engine's display string.

The engine keeps full float precision; rounding and digit grouping only
happen here, when a host renders the value.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from pocketcalc.numerals import is_numeral


def _group_thousands(integer: str) -> str:
    """Insert commas every three digits, counting from the right."""
    head = len(integer) % 3 or 3
    groups = [integer[:head]] + [integer[i:i + 3] for i in range(head, len(integer), 3)]
    return ",".join(groups)


def format_for_display(display: str, max_fraction_digits: int = 10, grouping: bool = True) -> str:
    """Format a display numeral for rendering.

    - Non-numerals (the error token) pass through unchanged.
    - The integer part is grouped with commas when ``grouping`` is on.
    - A fraction longer than ``max_fraction_digits`` is rounded half-up with
      trailing zeros stripped. Shorter fractions, a trailing ``.`` included,
      are shown as typed.

    Works on the digit string itself, so a numeral of any length can be shown.
    """
    if not is_numeral(display):
        return display

    sign = "-" if display.startswith("-") else ""
    body = display.lstrip("-")
    integer, point, fraction = body.partition(".")

    if len(fraction) > max_fraction_digits:
        quantum = Decimal(1).scaleb(-max_fraction_digits)
        with localcontext() as ctx:
            # Enough precision for every integer digit plus the kept fraction
            ctx.prec = len(body) + max_fraction_digits + 1
            rounded = Decimal(body).quantize(quantum, rounding=ROUND_HALF_UP)
            integer, point, fraction = format(rounded, "f").partition(".")
        fraction = fraction.rstrip("0")
        if not fraction:
            point = ""
        if not fraction and integer.strip("0") == "":
            sign = ""

    if grouping:
        integer = _group_thousands(integer)
    return f"{sign}{integer}{point}{fraction}"
