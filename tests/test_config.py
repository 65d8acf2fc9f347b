import pytest
from pydantic import ValidationError

from day_planner.config import Settings, get_settings, reset_settings


def test_settings_defaults():
    settings = get_settings()
    assert settings.day_start == "07:00"
    assert settings.default_duration == 30
    assert settings.log_level == "INFO"
    assert get_settings() is settings


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DAY_PLANNER_DAY_START", "05:45")
    monkeypatch.setenv("DAY_PLANNER_LOG_LEVEL", "debug")
    reset_settings()
    settings = get_settings()
    assert settings.day_start == "05:45"
    assert settings.log_level == "DEBUG"


def test_settings_reject_malformed_day_start(monkeypatch):
    monkeypatch.setenv("DAY_PLANNER_DAY_START", "7am")
    with pytest.raises(ValidationError):
        Settings()
