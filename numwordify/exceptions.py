"""
Custom exception hierarchy for number-to-words conversion.

Each exception type maps to a specific category of failure and carries a
machine-readable code plus a details dict, so callers (the API, the CLI)
can report precisely which field or magnitude was at fault.
"""

from __future__ import annotations


class NumWordifyError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigError(NumWordifyError):
    """A locale configuration is missing a field or breaks a table invariant."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("CONFIG_INVALID", message, details)


class RangeError(NumWordifyError):
    """The magnitude needs a scale word the locale does not define."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MAGNITUDE_OUT_OF_RANGE", message, details)


class ArgumentError(NumWordifyError):
    """Internal contract violation: a renderer got a value it never should."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_ARGUMENT", message, details)


class InvalidAmountError(NumWordifyError):
    """The caller's amount is not a finite number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_AMOUNT", message, details)


class LocaleNotFoundError(NumWordifyError):
    """No locale definition matches the requested culture code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("LOCALE_NOT_FOUND", message, details)
