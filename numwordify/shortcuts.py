"""
One-call helpers: ``to_words(Decimal("12.50"), "en-US")``.

The locale may be a culture code (resolved and cached through
locales.get_config) or a ready LocaleConfig.
"""

from __future__ import annotations

from typing import Union

from .converter import Amount, convert, convert_without_currency
from .locales import get_config
from .models import LocaleConfig

LocaleLike = Union[str, LocaleConfig]


def to_words(amount: Amount, locale: LocaleLike = "en-US") -> str:
    """Amount in words including currency unit names."""
    return convert(amount, _resolve(locale))


def to_words_without_currency(amount: Amount, locale: LocaleLike = "en-US") -> str:
    """Amount in words using the locale's plain number template."""
    return convert_without_currency(amount, _resolve(locale))


def _resolve(locale: LocaleLike) -> LocaleConfig:
    return locale if isinstance(locale, LocaleConfig) else get_config(locale)
