"""
Convert decimal amounts to words using a LocaleConfig.

Supported patterns (en-US):
    1234.56  → "one thousand two hundred thirty-four dollars and fifty-six cents"
    11234    → "eleven thousand two hundred thirty-four dollars and zero cents"
    -5.50    → "minus five dollars and fifty cents"

Everything language-specific lives in the configuration; this module only
knows how to walk a number in base-1000 groups.

Algorithm:
    1. Record the sign, take the absolute value.
    2. Round to two places (ROUND_HALF_UP on the absolute value, i.e. half
       away from zero) and split into whole and fractional parts. A fraction
       that rounds to 100 carries into the whole part: 0.995 → 1.00.
    3. Render each part with render_magnitude(); an empty rendering means
       the part was 0 and becomes the locale's zero word.
    4. Fill the format template ({whole}, {decimal}, {major}, {minor}).
    5. Prepend the negative word if needed.

The scale index is passed explicitly from render_magnitude() down to
render_group(). Nothing here stores per-call state, so a single converter
can be shared between threads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import MAX_EMAX, ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Union

from .exceptions import ArgumentError, InvalidAmountError, RangeError
from .locales import SearchPath, get_config, load_config
from .models import CurrencyNames, LocaleConfig
from .validators import parse_config

logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, float, str]

_CENTS = Decimal("0.01")
_GROUP_BASE = 1000


# ─── Data Structures ────────────────────────────────────────────────


@dataclass(frozen=True)
class AmountWords:
    """Both halves of an amount, rendered but not yet templated."""

    negative: bool
    whole: int
    fractional: int  # always 0..99, minor units
    whole_words: str
    decimal_words: str


# ─── Public API ──────────────────────────────────────────────────────


def convert(
    amount: Amount, config: LocaleConfig, currency: CurrencyNames | None = None
) -> str:
    """Convert an amount to words including currency unit names.

    Args:
        amount: Decimal, int, float or numeric string.
        config: Validated locale configuration.
        currency: Overrides the locale's own major/minor unit names.

    Raises:
        InvalidAmountError: If the amount is not a finite number.
        RangeError: If the whole part exceeds the locale's scales table.
    """
    return compose(render_amount(amount, config), config, currency)


def convert_without_currency(amount: Amount, config: LocaleConfig) -> str:
    """Convert an amount to words using the plain number template."""
    return compose(render_amount(amount, config), config, include_currency=False)


def compose(
    parts: AmountWords,
    config: LocaleConfig,
    currency: CurrencyNames | None = None,
    include_currency: bool = True,
) -> str:
    """Fill the locale template from already rendered parts and apply the sign."""
    if include_currency:
        units = currency or config.currency
        text = _fill_template(
            config.settings.currency_format,
            whole=parts.whole_words,
            decimal=parts.decimal_words,
            major=units.major,
            minor=units.minor,
        )
    else:
        text = _fill_template(
            config.settings.number_format,
            whole=parts.whole_words,
            decimal=parts.decimal_words,
        )
    return _apply_sign(text, parts.negative, config)


def render_amount(amount: Amount, config: LocaleConfig) -> AmountWords:
    """Split an amount into sign, whole and minor units and render each part."""
    negative, whole, fractional = split_amount(amount)
    zero_word = config.settings.zero_word

    whole_words = render_magnitude(whole, config) or zero_word
    decimal_words = render_magnitude(fractional, config) or zero_word

    logger.debug(
        "Rendered %s → whole=%r decimal=%r negative=%s",
        amount, whole_words, decimal_words, negative,
    )
    return AmountWords(
        negative=negative,
        whole=whole,
        fractional=fractional,
        whole_words=whole_words,
        decimal_words=decimal_words,
    )


def split_amount(amount: Amount) -> tuple[bool, int, int]:
    """Return (negative, whole, fractional) with fractional in minor units.

    Rounding happens once, on the absolute value, before the split. The
    sign is taken from the amount as given, so -0.004 is negative even
    though both parts round to zero.
    """
    value = to_decimal(amount)
    with localcontext() as ctx:
        # Every integer digit plus two decimals must fit, or quantize() fails
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        ctx.Emax = MAX_EMAX
        rounded = abs(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
        whole = int(rounded)  # truncation == floor for a non-negative value
        fractional = int((rounded - whole) * 100)
    return value < 0, whole, fractional


def to_decimal(amount: Amount) -> Decimal:
    """Coerce caller input to a finite Decimal.

    Floats go through ``str`` so 0.1 becomes Decimal("0.1"), not the
    binary approximation.
    """
    if isinstance(amount, bool):
        raise InvalidAmountError(
            f"Amount must be a number, not a boolean: {amount!r}",
            details={"amount": repr(amount)},
        )

    try:
        if isinstance(amount, Decimal):
            value = amount
        elif isinstance(amount, (int, float)):
            value = Decimal(str(amount))
        elif isinstance(amount, str):
            value = Decimal(amount.strip())
        else:
            raise InvalidAmountError(
                f"Unsupported amount type: {type(amount).__name__}",
                details={"amount": repr(amount)},
            )
    except InvalidOperation as e:
        raise InvalidAmountError(
            f"Amount is not a number: {amount!r}", details={"amount": repr(amount)}
        ) from e

    if not value.is_finite():
        raise InvalidAmountError(
            f"Amount must be finite: {amount!r}", details={"amount": repr(amount)}
        )
    return value


# ─── Whole-Number Renderer ──────────────────────────────────────────


def render_magnitude(n: int, config: LocaleConfig) -> str:
    """Render a non-negative integer in words; 0 renders as "".

    Groups of value 0 are skipped together with their scale word, so
    1_000_000 is "one million", never "one million zero thousand".

    Raises:
        ArgumentError: If ``n`` is negative or not an int.
        RangeError: If a non-zero group falls past the scales table.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ArgumentError(
            f"Magnitude must be an int, got {type(n).__name__}", details={"value": repr(n)}
        )
    if n < 0:
        raise ArgumentError("Magnitude must be non-negative", details={"value": n})
    if n == 0:
        return ""

    scales = config.numbers.scales
    groups: list[str] = []
    remaining = n
    scale_index = 0

    while remaining > 0:
        remaining, group = divmod(remaining, _GROUP_BASE)
        if group > 0:
            if scale_index > 0 and scale_index >= len(scales):
                raise RangeError(
                    f"Number {n} is too large for this locale "
                    f"(maximum is {config.max_magnitude})",
                    details={
                        "magnitude": n,
                        "maximum": config.max_magnitude,
                        "scale_index": scale_index,
                        "scales_defined": len(scales),
                    },
                )
            words = [render_group(group, config, scale_index)]
            if scale_index > 0:
                words.append(scales[scale_index])
            groups.append(_join(words))
        scale_index += 1

    return _join(reversed(groups))


# ─── Group Renderer ─────────────────────────────────────────────────


def render_group(n: int, config: LocaleConfig, scale_index: int = 0) -> str:
    """Render a single group 1..999.

    ``scale_index`` is the group's position (0 = units, 1 = thousands ...).
    It only matters for the skip-one-for-thousand rule.
    """
    if not 1 <= n <= 999:
        raise ArgumentError(
            f"Group value must be between 1 and 999, got {n}", details={"value": n}
        )

    settings = config.settings
    hundreds_digit, remainder = divmod(n, 100)
    tokens: list[str] = []

    if hundreds_digit > 0:
        if settings.skip_one_for_hundred and hundreds_digit == 1:
            tokens.append(settings.hundred_word)
        else:
            tokens.append(config.numbers.hundreds[hundreds_digit])

    if remainder > 0:
        tokens.append(_render_remainder(remainder, n, scale_index, config))

    return _join(tokens)


def _render_remainder(remainder: int, group: int, scale_index: int, config: LocaleConfig) -> str:
    """Render the 1..99 part of a group: teens → special → tens/ones."""
    settings = config.settings
    words = config.numbers

    teens = config.teens
    if settings.use_teens and teens is not None and 11 <= remainder <= 19:
        return teens[remainder - 11]

    special = config.special
    if remainder in special:
        return special[remainder]

    tens_digit, ones_digit = divmod(remainder, 10)

    if tens_digit > 0:
        tens_word = words.tens[tens_digit]
        if ones_digit == 0:
            return tens_word
        if settings.use_compound_numbers:
            return f"{tens_word}{config.compound_separator}{words.ones[ones_digit]}"
        return _join([tens_word, words.ones[ones_digit]])

    # "one thousand" → "thousand", only for a bare 1 directly before the first scale word
    if settings.skip_one_for_thousand and ones_digit == 1 and group == 1 and scale_index == 1:
        return ""
    return words.ones[ones_digit]


# ─── Internal Helpers ────────────────────────────────────────────────


def _join(tokens) -> str:
    return " ".join(t for t in tokens if t).strip()


def _fill_template(template: str, **values: str) -> str:
    """Replace ``{name}`` placeholders; unknown ones are left verbatim."""
    result = template
    for name, value in values.items():
        result = result.replace("{" + name + "}", value)
    return result.strip()


def _apply_sign(text: str, negative: bool, config: LocaleConfig) -> str:
    return f"{config.settings.negative_word} {text}" if negative else text


# ─── Bound Converter ────────────────────────────────────────────────


class NumberToWordsConverter:
    """A converter bound to one locale configuration.

    Usage:
        converter = NumberToWordsConverter.from_locale("en-US")
        converter.convert(Decimal("1234.56"))
        # 'one thousand two hundred thirty-four dollars and fifty-six cents'

    The configuration is validated on construction. Instances hold no
    mutable state and may be shared freely.
    """

    def __init__(self, config: LocaleConfig | Mapping[str, Any]):
        self.config = config if isinstance(config, LocaleConfig) else parse_config(config)

    @classmethod
    def from_locale(
        cls, key: str, search_path: SearchPath | None = None
    ) -> NumberToWordsConverter:
        """Build a converter for a culture code such as "en-US" or "tr_TR"."""
        config = load_config(key, search_path) if search_path else get_config(key)
        return cls(config)

    def convert(self, amount: Amount, currency: CurrencyNames | None = None) -> str:
        return convert(amount, self.config, currency)

    def convert_without_currency(self, amount: Amount) -> str:
        return convert_without_currency(amount, self.config)

    def render(self, n: int) -> str:
        """Render a whole number, falling back to the zero word."""
        return render_magnitude(n, self.config) or self.config.settings.zero_word
