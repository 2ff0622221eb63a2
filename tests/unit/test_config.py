from __future__ import annotations

import pydantic
import pytest

from student_roster import config


def test_get_settings_defaults(monkeypatch, tmp_path):
    for var in ("APP_ENV", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)  # no .env here

    settings = config.get_settings()

    assert settings.app_env == "development"
    assert settings.log_level == "WARNING"
    assert settings.json_logs is False


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_JSON", "true")

    settings = config.get_settings()

    assert settings.app_env == "test"
    assert settings.log_level == "DEBUG"
    assert settings.json_logs is True


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(pydantic.ValidationError):
        config.get_settings()


def test_settings_accept_field_names():
    settings = config.Settings(log_level="error", json_logs=True)
    assert settings.log_level == "ERROR"
    assert settings.json_logs is True
