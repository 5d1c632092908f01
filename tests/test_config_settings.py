"""
Tests for configuration loading (csvtable/config/settings.py).

Environment variables are set with monkeypatch; conftest clears every
CSVTABLE_* variable and the settings singleton around each test.
"""

from pathlib import Path

import pytest

from csvtable.config.settings import (
    HttpStoreSettings,
    Settings,
    StoreSettings,
    get_settings,
    reset_settings,
)


def test_defaults_without_environment():
    settings = Settings.from_env()

    assert settings.store.backend == "local"
    assert settings.store.root_dir is None
    assert settings.store.encoding == "utf-8"
    assert settings.http is None
    assert settings.log_level == "WARNING"


def test_store_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("CSVTABLE_STORE", " Memory ")
    monkeypatch.setenv("CSVTABLE_ROOT_DIR", str(tmp_path))
    monkeypatch.setenv("CSVTABLE_ENCODING", "latin-1")

    store = StoreSettings.from_env()

    assert store.backend == "memory"
    assert store.root_dir == Path(tmp_path)
    assert store.encoding == "latin-1"


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError) as exc_info:
        StoreSettings(backend="ftp")

    assert "CSVTABLE_STORE" in str(exc_info.value)


def test_unknown_encoding_is_rejected():
    with pytest.raises(ValueError):
        StoreSettings(encoding="not-a-codec")


def test_http_settings_from_env(monkeypatch):
    monkeypatch.setenv("CSVTABLE_HTTP_BASE_URL", "https://objects.test/tables/")
    monkeypatch.setenv("CSVTABLE_HTTP_TOKEN", "secret")
    monkeypatch.setenv("CSVTABLE_HTTP_TIMEOUT_SECONDS", "5")

    http = HttpStoreSettings.from_env()

    assert http.base_url == "https://objects.test/tables"
    assert http.token == "secret"
    assert http.timeout_seconds == 5


def test_http_timeout_must_be_integer(monkeypatch):
    monkeypatch.setenv("CSVTABLE_HTTP_BASE_URL", "https://objects.test")
    monkeypatch.setenv("CSVTABLE_HTTP_TIMEOUT_SECONDS", "soon")

    with pytest.raises(ValueError) as exc_info:
        HttpStoreSettings.from_env()

    assert "must be an integer" in str(exc_info.value)


def test_http_backend_requires_base_url(monkeypatch):
    monkeypatch.setenv("CSVTABLE_STORE", "http")

    with pytest.raises(ValueError) as exc_info:
        Settings.from_env()

    assert "CSVTABLE_HTTP_BASE_URL" in str(exc_info.value)


def test_http_backend_with_base_url(monkeypatch):
    monkeypatch.setenv("CSVTABLE_STORE", "http")
    monkeypatch.setenv("CSVTABLE_HTTP_BASE_URL", "https://objects.test")

    settings = Settings.from_env()

    assert settings.http.base_url == "https://objects.test"
    assert settings.http.token is None


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("CSVTABLE_LOG_LEVEL", "chatty")

    with pytest.raises(ValueError):
        Settings.from_env()


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("CSVTABLE_LOG_LEVEL", "debug")
    assert get_settings().log_level == "WARNING"

    reset_settings()
    assert get_settings().log_level == "DEBUG"
