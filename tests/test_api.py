"""
FastAPI endpoint tests for the NumWordify API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import json

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from numwordify.locales import BUNDLED_LOCALES_DIR, available_locales

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_locales() -> None:
    """Discover locales once for all API tests (bypasses lifespan)."""
    api._locales = available_locales()
    yield  # type: ignore[misc]
    api._locales = None


def _bundled_en_us() -> dict:
    with (BUNDLED_LOCALES_DIR / "en-US.json").open(encoding="utf-8") as f:
        return json.load(f)


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["locales_loaded"] >= 3


class TestLocalesEndpoint:
    def test_lists_bundled_locales(self) -> None:
        data = client.get("/locales").json()
        assert data["default"] == "en-US"
        assert {"en-US", "en-GB", "tr-TR"} <= set(data["locales"])


class TestConvertEndpoint:
    def test_converts_with_currency(self) -> None:
        resp = client.post("/convert", json={"amount": "1234.56", "locale": "en-US"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["text"] == "one thousand two hundred thirty-four dollars and fifty-six cents"
        assert data["whole_words"] == "one thousand two hundred thirty-four"
        assert data["decimal_words"] == "fifty-six"
        assert data["negative"] is False
        assert data["locale"] == "en-US"

    def test_default_locale_used(self) -> None:
        data = client.post("/convert", json={"amount": 3}).json()
        assert data["text"] == "three dollars and zero cents"

    def test_without_currency(self) -> None:
        data = client.post(
            "/convert", json={"amount": "7.25", "include_currency": False}
        ).json()
        assert data["text"] == "seven point twenty-five"

    def test_negative_amount(self) -> None:
        data = client.post("/convert", json={"amount": -5.5, "locale": "tr_TR"}).json()
        assert data["text"] == "eksi beş lira elli kuruş"
        assert data["negative"] is True
        assert data["locale"] == "tr-TR"

    def test_text_matches_rendered_parts(self) -> None:
        data = client.post(
            "/convert", json={"amount": "-0.004", "include_currency": False}
        ).json()
        assert data["text"] == "minus zero point zero"
        assert data["negative"] is True
        assert data["whole_words"] == data["decimal_words"] == "zero"

    def test_currency_override(self) -> None:
        data = client.post(
            "/convert",
            json={"amount": "2", "currency": {"major": "euros", "minor": "cents"}},
        ).json()
        assert data["text"] == "two euros and zero cents"


class TestConvertErrors:
    def test_unknown_locale_returns_404(self) -> None:
        resp = client.post("/convert", json={"amount": 1, "locale": "qq-QQ"})
        assert resp.status_code == 404
        assert resp.json()["code"] == "LOCALE_NOT_FOUND"

    def test_out_of_range_returns_422(self) -> None:
        resp = client.post("/convert", json={"amount": str(10**18)})
        assert resp.status_code == 422
        data = resp.json()
        assert data["code"] == "MAGNITUDE_OUT_OF_RANGE"
        assert data["details"]["maximum"] == 10**18 - 1

    def test_exponent_amount_past_decimal_precision_returns_422(self) -> None:
        resp = client.post("/convert", json={"amount": "1e30", "locale": "en-US"})
        assert resp.status_code == 422
        data = resp.json()
        assert data["code"] == "MAGNITUDE_OUT_OF_RANGE"
        assert data["details"]["magnitude"] == 10**30

    def test_missing_amount_returns_422(self) -> None:
        resp = client.post("/convert", json={})
        assert resp.status_code == 422

    def test_non_numeric_amount_returns_422(self) -> None:
        resp = client.post("/convert", json={"amount": "lots"})
        assert resp.status_code == 422


class TestCustomConvertEndpoint:
    def test_inline_config(self) -> None:
        config = _bundled_en_us()
        config["currency"] = {"major": "credits", "minor": "bits"}
        resp = client.post("/convert/custom", json={"amount": "10.01", "config": config})
        assert resp.status_code == 200
        assert resp.json()["text"] == "ten credits and one bits"

    def test_invalid_inline_config_returns_422(self) -> None:
        config = _bundled_en_us()
        config["numbers"]["ones"] = config["numbers"]["ones"][:9]
        resp = client.post("/convert/custom", json={"amount": 1, "config": config})
        assert resp.status_code == 422
        data = resp.json()
        assert data["code"] == "CONFIG_INVALID"
        assert data["details"]["field"] == "numbers.ones"
