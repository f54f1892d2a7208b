# tests/unit/test_settings.py
import logging

import pydantic
import pytest

from config.settings import Settings, configure_logging, get_settings
from core.timing.clock import default_clock, monotonic_ms, now_ts_ms, resolve_clock


def test_defaults():
    s = get_settings(force_refresh=True)
    assert s.clock == "wall"
    assert s.log_level == "WARNING"
    assert default_clock() is now_ts_ms


def test_env_overrides_take_precedence(monkeypatch):
    monkeypatch.setenv("STOPWATCH_CLOCK", "monotonic")
    monkeypatch.setenv("STOPWATCH_LOG_LEVEL", "debug")
    s = get_settings(force_refresh=True)
    assert s.clock == "monotonic"
    assert s.log_level == "DEBUG"
    assert default_clock() is monotonic_ms


def test_singleton_is_cached_until_refresh(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("STOPWATCH_CLOCK", "monotonic")
    assert get_settings() is first
    assert get_settings(force_refresh=True).clock == "monotonic"


@pytest.mark.parametrize("var,value", [("STOPWATCH_CLOCK", "sundial"), ("STOPWATCH_LOG_LEVEL", "LOUD")])
def test_invalid_env_raises(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(pydantic.ValidationError):
        get_settings(force_refresh=True)


def test_resolve_clock_rejects_unknown_names():
    assert resolve_clock("wall") is now_ts_ms
    with pytest.raises(ValueError, match="Unknown clock"):
        resolve_clock("sundial")


def test_monotonic_clock_never_goes_back():
    a = monotonic_ms()
    b = monotonic_ms()
    assert isinstance(a, int)
    assert b >= a


def test_configure_logging_applies_level(monkeypatch):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    configure_logging(Settings(log_level="info"))
    assert seen["level"] == "INFO"
