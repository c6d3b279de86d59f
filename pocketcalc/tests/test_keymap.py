"""Tests for the keyboard adapter."""

import pytest

from pocketcalc.keymap import KEY_BINDINGS, UnknownKeyError, event_for_key, events_for, is_key, tokenize
from pocketcalc.models import (
    Backspace,
    ClearAll,
    ClearEntry,
    DecimalPoint,
    Digit,
    Equals,
    Operation,
    OperatorKey,
    Percent,
    ToggleSign,
)


# --- tokenize ---

def test_tokenize_splits_compact_sequence():
    assert tokenize("12+3=") == ["1", "2", "+", "3", "="]


def test_tokenize_keeps_named_keys():
    assert tokenize("1 + 2 Enter") == ["1", "+", "2", "Enter"]
    assert tokenize("5 +/- AC") == ["5", "+/-", "AC"]


def test_tokenize_empty():
    assert tokenize("   ") == []


# --- event_for_key ---

@pytest.mark.parametrize("key, event", [
    ("7", Digit(7)),
    (".", DecimalPoint()),
    ("+", OperatorKey(Operation.ADD)),
    ("-", OperatorKey(Operation.SUBTRACT)),
    ("*", OperatorKey(Operation.MULTIPLY)),
    ("x", OperatorKey(Operation.MULTIPLY)),
    ("÷", OperatorKey(Operation.DIVIDE)),
    ("=", Equals()),
    ("Enter", Equals()),
    ("Escape", ClearAll()),
    ("Delete", ClearEntry()),
    ("Backspace", Backspace()),
    ("F9", ToggleSign()),
    ("%", Percent()),
])
def test_event_for_key(key, event):
    assert event_for_key(key) == event


def test_named_keys_are_case_insensitive():
    assert event_for_key("enter") == Equals()
    assert event_for_key("ESCAPE") == ClearAll()
    assert event_for_key("ce") == ClearEntry()


def test_unknown_key_raises():
    with pytest.raises(UnknownKeyError) as exc_info:
        event_for_key("q")
    assert exc_info.value.key == "q"
    assert "'q'" in str(exc_info.value)
    assert isinstance(exc_info.value, KeyError)


def test_events_for_is_all_or_nothing():
    with pytest.raises(UnknownKeyError):
        events_for(["1", "+", "?"])


def test_is_key():
    assert is_key("Backspace")
    assert not is_key("12")


def test_every_input_type_has_a_key():
    bound = {type(binding.event) for binding in KEY_BINDINGS}
    assert bound == {
        Digit, DecimalPoint, OperatorKey, Equals, ClearAll,
        ClearEntry, Backspace, ToggleSign, Percent,
    }


def test_digit_rejects_out_of_range():
    with pytest.raises(ValueError):
        Digit(10)
