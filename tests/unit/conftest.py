# tests/unit/conftest.py
import pytest


class FakeClock:
    """Deterministic millisecond clock; only moves when told to."""

    def __init__(self, start: float = 1_000_000):
        self.t = start
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return self.t

    def advance(self, ms: float) -> None:
        self.t += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    """
    Keep the environment predictable: drop STOPWATCH_* overrides and the cached
    settings singleton so each test starts from defaults.
    """
    import config.settings as settings_mod

    monkeypatch.delenv("STOPWATCH_CLOCK", raising=False)
    monkeypatch.delenv("STOPWATCH_LOG_LEVEL", raising=False)
    settings_mod._settings_singleton = None
    yield
    settings_mod._settings_singleton = None
