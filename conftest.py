"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _isolated_locale_env(monkeypatch):
    """Keep the developer's locale environment out of the suite."""
    monkeypatch.delenv("NUMWORDIFY_LOCALES_DIR", raising=False)
    monkeypatch.delenv("NUMWORDIFY_DEFAULT_LOCALE", raising=False)
    from numwordify.locales import clear_cache

    clear_cache()
    yield
    clear_cache()
