"""Unit tests for environment-driven settings."""

import pytest

from clikit.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CLIKIT_ENV", "CLIKIT_LOG_LEVEL", "CLIKIT_SPINNER_INTERVAL_MS",
                 "CLIKIT_CURSOR_TIMEOUT_MS", "CLIKIT_TEST_DELAY_MS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings()

    assert settings.app_env == "development"
    assert settings.log_level == "WARNING"
    assert settings.spinner_interval == pytest.approx(0.08)
    assert settings.cursor_timeout == pytest.approx(0.5)
    assert settings.test_delay_ms == 2000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CLIKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("CLIKIT_SPINNER_INTERVAL_MS", "120")
    monkeypatch.setenv("CLIKIT_TEST_DELAY_MS", "10")

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.spinner_interval == pytest.approx(0.12)
    assert settings.test_delay_ms == 10


def test_zero_cursor_timeout_means_unbounded(monkeypatch):
    monkeypatch.setenv("CLIKIT_CURSOR_TIMEOUT_MS", "0")

    assert Settings().cursor_timeout is None


def test_malformed_number_falls_back(monkeypatch):
    monkeypatch.setenv("CLIKIT_SPINNER_INTERVAL_MS", "fast")

    assert Settings().spinner_interval_ms == 80


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
