"""Environment-backed settings for pocketcalc hosts.

Self-contained. Reads os.environ (or a mapping passed in for tests) and
returns a frozen Settings object.

    POCKETCALC_ERROR_TOKEN           display text after a division by zero
    POCKETCALC_MAX_FRACTION_DIGITS   fraction digits shown before rounding (0-20)
    POCKETCALC_GROUPING              0/false/no/off disables thousands separators
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from pocketcalc.numerals import ERROR_TOKEN, is_numeral

ENV_PREFIX = "POCKETCALC_"

_FALSE_VALUES = ("0", "false", "no", "off")
_TRUE_VALUES = ("1", "true", "yes", "on")
_MAX_FRACTION_LIMIT = 20


class SettingsError(ValueError):
    """An environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one host process."""

    error_token: str = ERROR_TOKEN
    max_fraction_digits: int = 10
    grouping: bool = True


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise SettingsError(f"{name} must be one of {', '.join(_TRUE_VALUES + _FALSE_VALUES)}, got {raw!r}")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables, falling back to defaults.

    Args:
        environ: Mapping to read instead of os.environ.

    Raises:
        SettingsError: a variable is set to an invalid value.
    """
    env = os.environ if environ is None else environ
    defaults = Settings()

    error_token = env.get(f"{ENV_PREFIX}ERROR_TOKEN", defaults.error_token).strip()
    # The token must never be mistaken for a number on display
    if not error_token or is_numeral(error_token):
        raise SettingsError(f"{ENV_PREFIX}ERROR_TOKEN must be non-empty text, got {error_token!r}")

    raw_digits = env.get(f"{ENV_PREFIX}MAX_FRACTION_DIGITS")
    max_fraction_digits = defaults.max_fraction_digits
    if raw_digits is not None:
        try:
            max_fraction_digits = int(raw_digits)
        except ValueError:
            raise SettingsError(f"{ENV_PREFIX}MAX_FRACTION_DIGITS must be an integer, got {raw_digits!r}") from None
        if not 0 <= max_fraction_digits <= _MAX_FRACTION_LIMIT:
            raise SettingsError(
                f"{ENV_PREFIX}MAX_FRACTION_DIGITS must be between 0 and {_MAX_FRACTION_LIMIT}, "
                f"got {max_fraction_digits}"
            )

    raw_grouping = env.get(f"{ENV_PREFIX}GROUPING")
    grouping = defaults.grouping if raw_grouping is None else _parse_bool(f"{ENV_PREFIX}GROUPING", raw_grouping)

    return Settings(
        error_token=error_token,
        max_fraction_digits=max_fraction_digits,
        grouping=grouping,
    )
