import pytest

from day_planner.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("DAY_PLANNER_DAY_START", "DAY_PLANNER_DEFAULT_DURATION", "DAY_PLANNER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
