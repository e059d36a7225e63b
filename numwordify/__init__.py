"""
NumWordify — locale-driven number and currency amounts in words.

Architecture: Locale JSON → LocaleConfig (validated, frozen) → Converter
Philosophy:  Grammar lives in data. Code only walks base-1000 groups.
"""

__version__ = "1.0.0"
