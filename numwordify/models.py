"""
Pydantic models for locale configuration, the data half of the system.

A LocaleConfig is the full set of word tables and formatting rules for one
language/currency pairing. Models are frozen: once a configuration has been
validated it is shared read-only between any number of conversions.

Field names follow the camelCase keys of the locale JSON files
(``skipOneForThousand``, ``specialNumbers`` ...) while Python code uses
snake_case attributes.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .validators import validate_config

_NO_SPECIALS: Mapping[int, str] = MappingProxyType({})


class _LocaleModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ─── Currency ───────────────────────────────────────────────────────


class CurrencyNames(_LocaleModel):
    """Major and minor currency unit names (e.g. dollars / cents)."""

    major: str
    minor: str


# ─── Word Tables ────────────────────────────────────────────────────


class NumberWords(_LocaleModel):
    """Fixed-size lookup tables indexed by digit.

    Index 0 of ``ones``, ``tens`` and ``hundreds`` is the empty placeholder
    for "no digit". ``scales[0]`` is the units place, ``scales[1]`` the
    thousand-equivalent, and so on. The table length bounds the largest
    renderable magnitude.
    """

    ones: tuple[str, ...]
    tens: tuple[str, ...]
    hundreds: tuple[str, ...]
    scales: tuple[str, ...] = ("",)


class SpecialNumbers(_LocaleModel):
    """Locale irregularities layered over the plain tens/ones decomposition."""

    teens: Optional[tuple[str, ...]] = None  # 11..19
    # exact 0..99 remainders
    special: Mapping[int, str] = Field(default_factory=dict, validate_default=True)
    compound_separator: str = " "

    @field_validator("special")
    @classmethod
    def freeze_special(cls, v: Mapping[int, str]) -> Mapping[int, str]:
        # frozen=True only blocks attribute assignment, not item assignment
        return MappingProxyType(dict(v))


# ─── Settings ───────────────────────────────────────────────────────


class LocaleSettings(_LocaleModel):
    """Formatting templates and elision flags."""

    skip_one_for_thousand: bool = False
    skip_one_for_hundred: bool = False
    negative_word: str = ""
    zero_word: str = ""
    currency_format: str = ""
    number_format: str = ""
    use_teens: bool = False
    use_compound_numbers: bool = False
    hundred_word: str = "hundred"  # emitted instead of hundreds[1] when skipping "one"


# ─── Locale Configuration ───────────────────────────────────────────


class LocaleConfig(_LocaleModel):
    """A validated, immutable locale definition.

    Table invariants are checked as soon as the model is built, so an
    invalid configuration raises ConfigError here and never reaches the
    converter.
    """

    currency: CurrencyNames
    numbers: NumberWords = Field(
        validation_alias=AliasChoices("numbers", "numberWords")
    )
    special_numbers: Optional[SpecialNumbers] = None
    settings: LocaleSettings = Field(default_factory=LocaleSettings)

    @model_validator(mode="after")
    def check_invariants(self) -> LocaleConfig:
        # ConfigError is not a ValueError, so pydantic lets it propagate as-is
        return validate_config(self)

    @property
    def teens(self) -> tuple[str, ...] | None:
        return self.special_numbers.teens if self.special_numbers else None

    @property
    def special(self) -> Mapping[int, str]:
        return self.special_numbers.special if self.special_numbers else _NO_SPECIALS

    @property
    def compound_separator(self) -> str:
        return self.special_numbers.compound_separator if self.special_numbers else " "

    @property
    def max_magnitude(self) -> int:
        """Largest whole number the scales table can render."""
        return 1000 ** max(len(self.numbers.scales), 1) - 1
