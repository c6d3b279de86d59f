"""Data models for the pocketcalc engine.

Operation enum, input events, the Idle/Pending/Error phase variants and the
EngineState snapshot: the typed structures that flow through
keymap → engine → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class Operation(str, Enum):
    """Binary operators the engine can queue."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    PERCENT_OF = "%"

    @property
    def symbol(self) -> str:
        """Symbol shown in the history line."""
        return _SYMBOLS.get(self, self.value)


_SYMBOLS = {
    Operation.MULTIPLY: "×",
    Operation.DIVIDE: "÷",
}


# ---------------------------------------------------------------------------
# Input events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Digit:
    """A digit key, 0-9."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 9:
            raise ValueError(f"Digit out of range: {self.value}")

    @property
    def char(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DecimalPoint:
    """The '.' key."""


@dataclass(frozen=True)
class OperatorKey:
    """A binary operator key."""

    operation: Operation


@dataclass(frozen=True)
class Equals:
    """Terminal evaluation."""


@dataclass(frozen=True)
class ClearAll:
    """AC: back to the initial state."""


@dataclass(frozen=True)
class ClearEntry:
    """CE: reset the operand being typed, keep the pending operator."""


@dataclass(frozen=True)
class Backspace:
    """Drop the last typed character."""


@dataclass(frozen=True)
class ToggleSign:
    """The ± key."""


@dataclass(frozen=True)
class Percent:
    """Standalone percent: divide the display by 100."""


InputEvent = Union[
    Digit, DecimalPoint, OperatorKey, Equals, ClearAll,
    ClearEntry, Backspace, ToggleSign, Percent,
]


# ---------------------------------------------------------------------------
# Engine phases
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Idle:
    """No operation in progress."""


@dataclass(frozen=True)
class Pending:
    """An operand has been committed and an operator awaits the next one.

    ``operand`` is the value used for arithmetic; ``numeral`` is the same
    operand as it was shown (``"12."`` stays ``"12."``).
    """

    operand: float
    operation: Operation
    numeral: str


@dataclass(frozen=True)
class Error:
    """An arithmetic error is on display.

    Only entry keys (digit, decimal) and the clear keys leave this phase.
    """


Phase = Union[Idle, Pending, Error]


@dataclass(frozen=True)
class EngineState:
    """Complete state of one calculator session.

    Immutable: every input produces a new EngineState.
    """

    display: str = "0"
    phase: Phase = field(default_factory=Idle)
    waiting_for_value: bool = False
    history: str = ""

    @property
    def is_error(self) -> bool:
        return isinstance(self.phase, Error)

    @property
    def operation(self) -> Optional[Operation]:
        """The pending operator, or None when idle."""
        if isinstance(self.phase, Pending):
            return self.phase.operation
        return None

    @property
    def previous_value(self) -> Optional[str]:
        """The committed operand as shown, or None when idle."""
        if isinstance(self.phase, Pending):
            return self.phase.numeral
        return None
