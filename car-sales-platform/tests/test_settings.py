"""
Tests for `api/settings.py`.

Covers rules:
- Defaults apply when variables are unset.
- Booleans, integers and comma lists are parsed from the environment.
- Invalid values raise RuntimeError naming the variable.
"""

from __future__ import annotations

import pytest

from api.settings import Settings, load_settings

_VARIABLES = ("APP_NAME", "LOG_LEVEL", "CORS_ORIGINS", "SEED_DEMO_SALES", "DEMO_SALES_COUNT", "HOST", "PORT")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch) -> None:
    for name in _VARIABLES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    """Verify unset variables fall back to the defaults."""

    assert load_settings() == Settings()


def test_values_from_environment(monkeypatch) -> None:
    """Verify every variable is read and converted."""

    monkeypatch.setenv("APP_NAME", "Sales Test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://example.com")
    monkeypatch.setenv("SEED_DEMO_SALES", "yes")
    monkeypatch.setenv("DEMO_SALES_COUNT", "50")
    monkeypatch.setenv("PORT", "9000")

    settings = load_settings()

    assert settings.app_name == "Sales Test"
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("http://localhost:3000", "https://example.com")
    assert settings.seed_demo_sales is True
    assert settings.demo_sales_count == 50
    assert settings.port == 9000


@pytest.mark.parametrize(
    "name, value",
    [
        ("SEED_DEMO_SALES", "maybe"),
        ("DEMO_SALES_COUNT", "many"),
        ("DEMO_SALES_COUNT", "-1"),
        ("PORT", "0"),
        ("LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_raise(monkeypatch, name: str, value: str) -> None:
    """Verify bad values raise RuntimeError mentioning the variable."""

    monkeypatch.setenv(name, value)

    with pytest.raises(RuntimeError, match=name):
        load_settings()
