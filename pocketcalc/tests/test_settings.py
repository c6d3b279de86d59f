"""Tests for environment-backed settings."""

import pytest

from pocketcalc.numerals import ERROR_TOKEN
from pocketcalc.settings import Settings, SettingsError, load_settings


def test_defaults_with_empty_environment():
    settings = load_settings({})
    assert settings == Settings()
    assert settings.error_token == ERROR_TOKEN
    assert settings.max_fraction_digits == 10
    assert settings.grouping is True


def test_overrides():
    settings = load_settings({
        "POCKETCALC_ERROR_TOKEN": "خطأ",
        "POCKETCALC_MAX_FRACTION_DIGITS": "4",
        "POCKETCALC_GROUPING": "off",
    })
    assert settings.error_token == "خطأ"
    assert settings.max_fraction_digits == 4
    assert settings.grouping is False


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("POCKETCALC_MAX_FRACTION_DIGITS", "3")
    assert load_settings().max_fraction_digits == 3


@pytest.mark.parametrize("value", ["lots", "-1", "21", "2.5"])
def test_invalid_fraction_digits(value):
    with pytest.raises(SettingsError, match="POCKETCALC_MAX_FRACTION_DIGITS"):
        load_settings({"POCKETCALC_MAX_FRACTION_DIGITS": value})


def test_invalid_grouping():
    with pytest.raises(SettingsError, match="POCKETCALC_GROUPING"):
        load_settings({"POCKETCALC_GROUPING": "maybe"})


@pytest.mark.parametrize("token", ["", "  ", "12", "-0.5"])
def test_error_token_must_not_look_like_a_number(token):
    with pytest.raises(SettingsError, match="POCKETCALC_ERROR_TOKEN"):
        load_settings({"POCKETCALC_ERROR_TOKEN": token})


def test_settings_error_is_value_error():
    assert issubclass(SettingsError, ValueError)
