"""Calculator engine: immediate-execution input state machine.

Every key press is one call to transition(), which maps the current
EngineState to the next one. Operators evaluate the pending operation as soon
as they are pressed, so ``2 + 3 × 4 =`` is ``(2 + 3) × 4 = 20``.

CalculatorEngine wraps transition() for a single session: it owns exactly one
state and swaps it on every press. Events must be fed one at a time by the
host; the engine does no locking.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

from pocketcalc.models import (
    Backspace,
    ClearAll,
    ClearEntry,
    DecimalPoint,
    Digit,
    EngineState,
    Equals,
    Error,
    Idle,
    InputEvent,
    Operation,
    OperatorKey,
    Pending,
    Percent,
    ToggleSign,
)
from pocketcalc.numerals import ERROR_TOKEN, compute, format_number, parse_numeral


def _error_state(error_token: str) -> EngineState:
    """State shown after an arithmetic error. Drops the pending operation."""
    return EngineState(display=error_token, phase=Error(), waiting_for_value=True)


def _input_digit(state: EngineState, digit: Digit) -> EngineState:
    if state.is_error:
        return EngineState(display=digit.char)
    if state.waiting_for_value:
        return replace(state, display=digit.char, waiting_for_value=False)

    if state.display == "0":
        display = digit.char
    elif state.display == "-0":
        display = "-" + digit.char
    else:
        display = state.display + digit.char
    return replace(state, display=display)


def _input_decimal(state: EngineState) -> EngineState:
    if state.is_error:
        return EngineState(display="0.")
    if state.waiting_for_value:
        return replace(state, display="0.", waiting_for_value=False)
    if "." in state.display:
        return state
    return replace(state, display=state.display + ".")


def _input_operation(state: EngineState, op: Operation, error_token: str) -> EngineState:
    if state.is_error:
        return state

    if isinstance(state.phase, Pending):
        # Chained press: resolve what is queued, then queue the new operator
        try:
            result = compute(state.phase.operand, parse_numeral(state.display), state.phase.operation)
        except ArithmeticError:
            return _error_state(error_token)
        text = format_number(result)
        return EngineState(
            display=text,
            phase=Pending(operand=result, operation=op, numeral=text),
            waiting_for_value=True,
            history=f"{text} {op.symbol}",
        )

    try:
        operand = parse_numeral(state.display)
    except ArithmeticError:
        return _error_state(error_token)
    return replace(
        state,
        phase=Pending(operand=operand, operation=op, numeral=state.display),
        waiting_for_value=True,
        history=f"{state.display} {op.symbol}",
    )


def _perform_calculation(state: EngineState, error_token: str) -> EngineState:
    if not isinstance(state.phase, Pending):
        return state
    try:
        result = compute(state.phase.operand, parse_numeral(state.display), state.phase.operation)
    except ArithmeticError:
        return _error_state(error_token)
    return EngineState(display=format_number(result), phase=Idle(), waiting_for_value=True)


def _clear_entry(state: EngineState) -> EngineState:
    if state.is_error:
        return EngineState()
    return replace(state, display="0")


def _backspace(state: EngineState) -> EngineState:
    if state.is_error:
        return state
    display = state.display[:-1] if len(state.display) > 1 else "0"
    if display == "-":
        display = "0"
    return replace(state, display=display)


def _toggle_sign(state: EngineState) -> EngineState:
    if state.is_error or state.display == "0":
        return state
    if state.display.startswith("-"):
        return replace(state, display=state.display[1:])
    return replace(state, display="-" + state.display)


def _percentage(state: EngineState, error_token: str) -> EngineState:
    if state.is_error:
        return state
    try:
        value = parse_numeral(state.display)
    except ArithmeticError:
        return _error_state(error_token)
    return replace(state, display=format_number(value / 100))


def transition(state: EngineState, event: InputEvent, error_token: str = ERROR_TOKEN) -> EngineState:
    """Return the state that follows ``state`` after ``event``.

    Total over every reachable state and every input event. Division by zero
    moves to the Error phase, showing ``error_token``.

    Raises:
        TypeError: event is not part of the input vocabulary.
    """
    if isinstance(event, Digit):
        return _input_digit(state, event)
    if isinstance(event, DecimalPoint):
        return _input_decimal(state)
    if isinstance(event, OperatorKey):
        return _input_operation(state, event.operation, error_token)
    if isinstance(event, Equals):
        return _perform_calculation(state, error_token)
    if isinstance(event, ClearAll):
        return EngineState()
    if isinstance(event, ClearEntry):
        return _clear_entry(state)
    if isinstance(event, Backspace):
        return _backspace(state)
    if isinstance(event, ToggleSign):
        return _toggle_sign(state)
    if isinstance(event, Percent):
        return _percentage(state, error_token)
    raise TypeError(f"Unsupported input event: {event!r}")


class CalculatorEngine:
    """One calculator session."""

    def __init__(self, error_token: str = ERROR_TOKEN, state: Optional[EngineState] = None):
        self.error_token = error_token
        self._state = state or EngineState()

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    @property
    def history(self) -> str:
        return self._state.history

    def press(self, event: InputEvent) -> EngineState:
        """Apply one input event and return the new state."""
        self._state = transition(self._state, event, self.error_token)
        return self._state

    def feed(self, events: Iterable[InputEvent]) -> EngineState:
        """Apply events in order and return the final state."""
        for event in events:
            self.press(event)
        return self._state

    def reset(self) -> None:
        self._state = EngineState()
