"""Tests for the pocketcalc CLI, driven through typer's CliRunner."""

from typer.testing import CliRunner

from pocketcalc.__main__ import app

runner = CliRunner()


def invoke(*args, **kwargs):
    return runner.invoke(app, list(args), **kwargs)


# --- press ---

def test_press_raw_chained():
    result = invoke("press", "1", "+", "2", "x", "3", "=", "--raw")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "9"


def test_press_compact_sequence():
    result = invoke("press", "12+3=", "--raw")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "15"


def test_press_clear_entry_keeps_operator():
    result = invoke("press", "5", "+", "CE", "3", "=", "--raw")
    assert result.output.strip() == "8"


def test_press_division_by_zero():
    result = invoke("press", "5/0=", "--raw")
    assert result.exit_code == 0
    assert result.output.strip() == "Error"


def test_press_error_token_from_environment():
    result = invoke("press", "5/0=", "--raw", env={"POCKETCALC_ERROR_TOKEN": "Oops"})
    assert result.output.strip() == "Oops"


def test_press_renders_grouped_display_and_history():
    result = invoke("press", "1234+")
    assert result.exit_code == 0, result.output
    assert "1,234" in result.output
    assert "1234 +" in result.output


def test_press_unknown_key():
    result = invoke("press", "12q")
    assert result.exit_code == 1
    assert "Unknown key" in result.output


def test_press_invalid_settings():
    result = invoke("press", "1", env={"POCKETCALC_MAX_FRACTION_DIGITS": "lots"})
    assert result.exit_code == 1
    assert "POCKETCALC_MAX_FRACTION_DIGITS" in result.output


# --- trace / keys ---

def test_trace_shows_each_step():
    result = invoke("trace", "2+3*4=")
    assert result.exit_code == 0, result.output
    assert "Key trace" in result.output
    assert "5 ×" in result.output
    assert "20" in result.output


def test_keys_lists_bindings():
    result = invoke("keys")
    assert result.exit_code == 0
    assert "Backspace" in result.output
    assert "clear entry" in result.output


# --- repl ---

def test_repl_session():
    result = invoke("repl", input="12+3=\n*2=\nquit\n")
    assert result.exit_code == 0, result.output
    assert "15" in result.output
    assert "30" in result.output


def test_repl_survives_bad_line_and_eof():
    result = invoke("repl", input="7\nzz\n+1=\n")
    assert result.exit_code == 0, result.output
    assert "Unknown key" in result.output
    assert "8" in result.output


def test_press_renders_long_fraction_with_large_integer_part():
    result = invoke("press", "12345678901234567890.12345678901")
    assert result.exit_code == 0, result.output
    assert "Error" not in result.output


def test_press_renders_very_long_numeral():
    result = invoke("press", "1" * 4400)
    assert result.exit_code == 0, result.output
    assert "111,111" in result.output
