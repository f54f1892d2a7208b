"""Immutable duration value returned by the stopwatch."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .units import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND, HOURS_PER_DAY, MINUTES_PER_HOUR, SECONDS_PER_MINUTE


class TimeSpan(BaseModel):
    """A length of time stored as a (possibly fractional) millisecond count.

    Totals (``total_seconds`` etc.) are exact conversions. Components
    (``hours``, ``minutes`` ...) are truncated toward zero and carry the sign
    of the span, so ``-90s`` has ``minutes == -1`` and ``seconds == -30``.
    """

    model_config = ConfigDict(frozen=True)

    total_milliseconds: float = 0.0

    # ----- factories -----

    @classmethod
    def from_milliseconds(cls, milliseconds: float) -> "TimeSpan":
        return cls(total_milliseconds=milliseconds)

    @classmethod
    def from_seconds(cls, seconds: float) -> "TimeSpan":
        return cls(total_milliseconds=seconds * MS_PER_SECOND)

    @classmethod
    def from_timedelta(cls, td: timedelta) -> "TimeSpan":
        return cls(total_milliseconds=td / timedelta(milliseconds=1))

    @classmethod
    def zero(cls) -> "TimeSpan":
        return ZERO

    # ----- totals -----

    @property
    def total_seconds(self) -> float:
        return self.total_milliseconds / MS_PER_SECOND

    @property
    def total_minutes(self) -> float:
        return self.total_milliseconds / MS_PER_MINUTE

    @property
    def total_hours(self) -> float:
        return self.total_milliseconds / MS_PER_HOUR

    @property
    def total_days(self) -> float:
        return self.total_milliseconds / MS_PER_DAY

    # ----- components -----

    def _part(self, unit: int, modulo: Optional[int] = None) -> int:
        whole = int(self.total_milliseconds / unit)
        if modulo is None:
            return whole
        return int(math.fmod(whole, modulo))

    @property
    def days(self) -> int:
        return self._part(MS_PER_DAY)

    @property
    def hours(self) -> int:
        return self._part(MS_PER_HOUR, HOURS_PER_DAY)

    @property
    def minutes(self) -> int:
        return self._part(MS_PER_MINUTE, MINUTES_PER_HOUR)

    @property
    def seconds(self) -> int:
        return self._part(MS_PER_SECOND, SECONDS_PER_MINUTE)

    @property
    def milliseconds(self) -> int:
        return self._part(1, MS_PER_SECOND)

    # ----- conversion / arithmetic -----

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.total_milliseconds)

    def __add__(self, other: object) -> "TimeSpan":
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(total_milliseconds=self.total_milliseconds + other.total_milliseconds)

    def __sub__(self, other: object) -> "TimeSpan":
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(total_milliseconds=self.total_milliseconds - other.total_milliseconds)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.total_milliseconds < other.total_milliseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.total_milliseconds <= other.total_milliseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.total_milliseconds > other.total_milliseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.total_milliseconds >= other.total_milliseconds


ZERO = TimeSpan(total_milliseconds=0.0)


__all__ = ["TimeSpan", "ZERO"]
