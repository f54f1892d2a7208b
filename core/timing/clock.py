"""Millisecond clock sources used by the timing utilities."""

from __future__ import annotations

import time
from typing import Callable, Dict, Union

from .units import NS_PER_MS

Clock = Callable[[], Union[int, float]]


def now_ts_ms() -> int:
    """Return the current wall-clock timestamp in milliseconds."""

    return int(time.time() * 1000)


def monotonic_ms() -> int:
    """Return a monotonic reading in milliseconds (arbitrary epoch)."""

    return time.monotonic_ns() // NS_PER_MS


CLOCKS: Dict[str, Clock] = {
    "wall": now_ts_ms,
    "monotonic": monotonic_ms,
}


def resolve_clock(name: str) -> Clock:
    """Map a clock name (``wall`` / ``monotonic``) to its function."""

    try:
        return CLOCKS[name]
    except KeyError:
        raise ValueError(f"Unknown clock {name!r}; expected one of {sorted(CLOCKS)}") from None


def default_clock() -> Clock:
    """Return the clock selected by the current settings."""

    from config.settings import get_settings

    return resolve_clock(get_settings().clock)


__all__ = ["Clock", "CLOCKS", "default_clock", "monotonic_ms", "now_ts_ms", "resolve_clock"]
