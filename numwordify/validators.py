"""
Locale configuration validation: fail fast, before any conversion.

validate_config() runs every invariant check in a FIXED order and raises
ConfigError on the first violation. The order is part of the contract:

    ones → tens → hundreds → currencyFormat → zeroWord → negativeWord
         → numberFormat → teens → special keys → hundredWord

so the same broken file always produces the same error message.

Each check function:
  - Takes a LocaleConfig
  - Returns None when the invariant holds
  - Raises ConfigError naming the field (``details["field"]``) otherwise
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .exceptions import ConfigError

if TYPE_CHECKING:
    from .models import LocaleConfig


# ─── Constants ───────────────────────────────────────────────────────

DIGIT_TABLE_SIZE = 10
TEENS_TABLE_SIZE = 9
SPECIAL_REMAINDER_RANGE = range(0, 100)


# ─── Orchestrator ────────────────────────────────────────────────────


def validate_config(config: LocaleConfig) -> LocaleConfig:
    """Run ALL checks in order; return the config unchanged if it passes."""
    for check in _CHECKS:
        check(config)
    return config


def parse_config(data: Mapping[str, Any], source: str | None = None) -> LocaleConfig:
    """Build a LocaleConfig from a decoded locale definition.

    Pydantic shape errors (missing section, wrong type) are re-raised as
    ConfigError pointing at the first offending field, so callers only
    ever have to handle one exception type for a bad locale.

    Args:
        data: Mapping with ``currency``, ``numbers``, ``settings`` and
            optional ``specialNumbers`` keys.
        source: Where the data came from (file path), for error messages.
    """
    from .models import LocaleConfig

    try:
        return LocaleConfig.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        where = f" in {source}" if source else ""
        raise ConfigError(
            f"Invalid locale field '{field}'{where}: {first['msg']}",
            details={"field": field, "source": source, "error_count": e.error_count()},
        ) from e


# ─── Individual Checks ───────────────────────────────────────────────


def _check_table_size(name: str, table: tuple[str, ...], expected: int) -> None:
    if len(table) != expected:
        raise ConfigError(
            f"{name.capitalize()} array must contain exactly {expected} elements "
            f"(got {len(table)})",
            details={"field": f"numbers.{name}", "expected": expected, "actual": len(table)},
        )


def _check_required_text(label: str, field: str, value: str) -> None:
    if not value:
        raise ConfigError(
            f"{label} must be specified",
            details={"field": f"settings.{field}"},
        )


def check_ones(config: LocaleConfig) -> None:
    _check_table_size("ones", config.numbers.ones, DIGIT_TABLE_SIZE)


def check_tens(config: LocaleConfig) -> None:
    _check_table_size("tens", config.numbers.tens, DIGIT_TABLE_SIZE)


def check_hundreds(config: LocaleConfig) -> None:
    _check_table_size("hundreds", config.numbers.hundreds, DIGIT_TABLE_SIZE)


def check_currency_format(config: LocaleConfig) -> None:
    _check_required_text("Currency format", "currencyFormat", config.settings.currency_format)


def check_zero_word(config: LocaleConfig) -> None:
    _check_required_text("Zero word", "zeroWord", config.settings.zero_word)


def check_negative_word(config: LocaleConfig) -> None:
    _check_required_text("Negative word", "negativeWord", config.settings.negative_word)


def check_number_format(config: LocaleConfig) -> None:
    _check_required_text("Number format", "numberFormat", config.settings.number_format)


def check_teens(config: LocaleConfig) -> None:
    """Teens are optional, but a partial table would index past its end."""
    teens = config.teens
    if teens is not None and len(teens) != TEENS_TABLE_SIZE:
        raise ConfigError(
            f"Teens array must contain exactly {TEENS_TABLE_SIZE} elements "
            f"(got {len(teens)})",
            details={
                "field": "specialNumbers.teens",
                "expected": TEENS_TABLE_SIZE,
                "actual": len(teens),
            },
        )


def check_special_keys(config: LocaleConfig) -> None:
    """Special overrides replace a 0-99 remainder, nothing larger."""
    invalid = sorted(k for k in config.special if k not in SPECIAL_REMAINDER_RANGE)
    if invalid:
        raise ConfigError(
            f"Special number keys must be between 0 and 99 (got {invalid})",
            details={"field": "specialNumbers.special", "invalid_keys": invalid},
        )


def check_hundred_word(config: LocaleConfig) -> None:
    if config.settings.skip_one_for_hundred:
        _check_required_text("Hundred word", "hundredWord", config.settings.hundred_word)


_CHECKS: tuple[Callable[[LocaleConfig], None], ...] = (
    check_ones,
    check_tens,
    check_hundreds,
    check_currency_format,
    check_zero_word,
    check_negative_word,
    check_number_format,
    check_teens,
    check_special_keys,
    check_hundred_word,
)
