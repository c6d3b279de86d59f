"""Keyboard adapter: key names → engine input events.

Single characters map the way a desktop keyboard does (digits, ``.``,
``+ - * /``, ``=``, ``%``). Named keys (``Enter``, ``Escape``, ``Backspace``,
``Delete``, ``F9``) and the button labels (``AC``, ``CE``) are matched
case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pocketcalc.models import (
    Backspace,
    ClearAll,
    ClearEntry,
    DecimalPoint,
    Digit,
    Equals,
    InputEvent,
    Operation,
    OperatorKey,
    Percent,
    ToggleSign,
)


class UnknownKeyError(KeyError):
    """Raised for a key with no binding."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown key: {self.key!r}"


@dataclass(frozen=True)
class KeyBinding:
    """One row of the key table."""

    keys: tuple[str, ...]
    event: InputEvent
    description: str


KEY_BINDINGS: list[KeyBinding] = [
    *(KeyBinding((str(d),), Digit(d), f"digit {d}") for d in range(10)),
    KeyBinding((".",), DecimalPoint(), "decimal point"),
    KeyBinding(("+",), OperatorKey(Operation.ADD), "add"),
    KeyBinding(("-", "−"), OperatorKey(Operation.SUBTRACT), "subtract"),
    KeyBinding(("*", "×", "x"), OperatorKey(Operation.MULTIPLY), "multiply"),
    KeyBinding(("/", "÷"), OperatorKey(Operation.DIVIDE), "divide"),
    KeyBinding(("=", "Enter"), Equals(), "evaluate"),
    KeyBinding(("Escape", "AC"), ClearAll(), "clear all"),
    KeyBinding(("Delete", "CE"), ClearEntry(), "clear entry"),
    KeyBinding(("Backspace",), Backspace(), "delete last character"),
    KeyBinding(("F9", "±", "+/-"), ToggleSign(), "toggle sign"),
    KeyBinding(("%",), Percent(), "percent of display"),
]


def _normalize(key: str) -> str:
    # Named keys are case-insensitive; single characters are taken as-is
    return key.lower() if len(key) > 1 else key


_LOOKUP: dict[str, InputEvent] = {
    _normalize(key): binding.event
    for binding in KEY_BINDINGS
    for key in binding.keys
}


def is_key(name: str) -> bool:
    return _normalize(name) in _LOOKUP


def event_for_key(name: str) -> InputEvent:
    """Look up the input event bound to a key.

    Raises:
        UnknownKeyError: no binding for ``name``.
    """
    try:
        return _LOOKUP[_normalize(name)]
    except KeyError:
        raise UnknownKeyError(name) from None


def tokenize(text: str) -> list[str]:
    """Split a key sequence into key names.

    Whitespace separates tokens. A token that is not a key name itself is
    split into characters, so ``"12+3="`` is ``1 2 + 3 =``.
    """
    keys: list[str] = []
    for token in text.split():
        if is_key(token):
            keys.append(token)
        else:
            keys.extend(token)
    return keys


def events_for(keys: Iterable[str]) -> list[InputEvent]:
    """Translate key names to input events, all or nothing."""
    return [event_for_key(key) for key in keys]
