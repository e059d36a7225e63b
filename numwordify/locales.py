"""
Locale definition loading and culture-code resolution.

Locale definitions are JSON files named after their culture code
(``en-US.json``, ``tr-TR.json``). They are looked up along a search path:

  1. Directories passed explicitly by the caller
  2. Directories listed in $NUMWORDIFY_LOCALES_DIR (os.pathsep separated)
  3. The locales bundled with the package

The first match wins, so a project can shadow a bundled locale by dropping
its own ``en-US.json`` into an earlier directory.
"""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Union

from .exceptions import ConfigError, LocaleNotFoundError
from .models import LocaleConfig
from .validators import parse_config

logger = logging.getLogger(__name__)

BUNDLED_LOCALES_DIR = Path(__file__).parent / "data"
LOCALES_DIR_ENV = "NUMWORDIFY_LOCALES_DIR"
DEFAULT_LOCALE_ENV = "NUMWORDIFY_DEFAULT_LOCALE"
DEFAULT_LOCALE = "en-US"

# language[-_]REGION, e.g. "en", "en-US", "tr_tr", "zh-Hant-TW"
_LOCALE_KEY_PATTERN = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})*$")

SearchPath = Iterable[Union[str, Path]]


# ─── Culture Codes ───────────────────────────────────────────────────


def normalize_locale_key(key: str) -> str:
    """Canonicalize a culture code: "en_us" → "en-US", "TR" → "tr".

    Raises:
        LocaleNotFoundError: If the key is not shaped like a culture code.
    """
    cleaned = key.strip() if isinstance(key, str) else ""
    if not _LOCALE_KEY_PATTERN.match(cleaned):
        raise LocaleNotFoundError(
            f"Invalid locale key: {key!r}", details={"locale": str(key)}
        )

    language, *rest = re.split(r"[-_]", cleaned)
    parts = [language.lower()]
    for part in rest:
        # Two-letter region codes are upper case, script subtags title case
        parts.append(part.upper() if len(part) == 2 or part.isdigit() else part.title())
    return "-".join(parts)


def default_locale() -> str:
    """The locale used when callers do not name one ($NUMWORDIFY_DEFAULT_LOCALE)."""
    return normalize_locale_key(os.environ.get(DEFAULT_LOCALE_ENV) or DEFAULT_LOCALE)


# ─── Search Path ─────────────────────────────────────────────────────


def locale_search_path(extra: SearchPath | None = None) -> list[Path]:
    """Build the ordered list of directories to look for locale files in."""
    path = [Path(p) for p in extra or ()]

    env_dirs = os.environ.get(LOCALES_DIR_ENV, "")
    path.extend(Path(p) for p in env_dirs.split(os.pathsep) if p)

    path.append(BUNDLED_LOCALES_DIR)
    return path


def available_locales(search_path: SearchPath | None = None) -> list[str]:
    """List every locale key found along the search path, sorted."""
    keys: set[str] = set()
    for directory in locale_search_path(search_path):
        if not directory.is_dir():
            continue
        for file in directory.glob("*.json"):
            try:
                keys.add(normalize_locale_key(file.stem))
            except LocaleNotFoundError:
                logger.warning("Ignoring locale file with invalid name: %s", file)
    return sorted(keys)


# ─── Loading ─────────────────────────────────────────────────────────


def load_config(key: str, search_path: SearchPath | None = None) -> LocaleConfig:
    """Load and validate the locale definition for a culture code.

    "en-GB" falls back to "en" when no region-specific file exists.

    Raises:
        LocaleNotFoundError: If no file matches the key or its language.
        ConfigError: If the matching file is not valid JSON or breaks an
            invariant.
    """
    canonical = normalize_locale_key(key)
    directories = locale_search_path(search_path)

    candidates = [canonical]
    language = canonical.split("-")[0]
    if language != canonical:
        candidates.append(language)

    for candidate in candidates:
        file = _find_locale_file(candidate, directories)
        if file is None:
            continue
        if candidate != canonical:
            logger.warning("No locale file for %s, falling back to %s", canonical, candidate)
        return _read_locale_file(file)

    raise LocaleNotFoundError(
        f"Localization file not found for culture: {canonical}",
        details={
            "locale": canonical,
            "available": available_locales(search_path),
            "searched": [str(d) for d in directories],
        },
    )


@lru_cache(maxsize=32)
def _load_cached(canonical: str, env_dirs: str) -> LocaleConfig:
    # env_dirs is part of the cache key so a changed $NUMWORDIFY_LOCALES_DIR is honored
    return load_config(canonical)


def get_config(key: str) -> LocaleConfig:
    """Cached load_config() over the default search path.

    LocaleConfig is immutable, so one instance is shared by every caller.
    """
    return _load_cached(normalize_locale_key(key), os.environ.get(LOCALES_DIR_ENV, ""))


def clear_cache() -> None:
    _load_cached.cache_clear()


# ─── Internal Helpers ────────────────────────────────────────────────


def _find_locale_file(canonical: str, directories: list[Path]) -> Path | None:
    """Case-insensitive match of ``<key>.json`` (underscores allowed)."""
    wanted = canonical.lower()
    for directory in directories:
        if not directory.is_dir():
            continue
        for file in sorted(directory.glob("*.json")):
            if file.stem.lower().replace("_", "-") == wanted:
                return file
    return None


def _read_locale_file(file: Path) -> LocaleConfig:
    try:
        with file.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Locale file {file} is not valid JSON: {e.msg} (line {e.lineno})",
            details={"source": str(file), "line": e.lineno},
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Locale file {file} must contain a JSON object",
            details={"source": str(file)},
        )

    config = parse_config(data, source=str(file))
    logger.info("Loaded locale definition %s", file)
    return config
