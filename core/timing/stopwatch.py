"""Cumulative stopwatch with lap splitting.

The stopwatch folds every finished run segment (on :meth:`Stopwatch.stop` or
:meth:`Stopwatch.lap`) into a single accumulator, so its state stays constant
in size no matter how many cycles it goes through. Individual lap durations
are only handed back to the caller; they are not retained.

Time is read from an injectable clock returning milliseconds since a fixed
epoch (see :mod:`core.timing.clock`). Tests pass a fake clock for exact
assertions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from .clock import Clock, default_clock
from .timespan import TimeSpan

logger = logging.getLogger(__name__)

Number = Union[int, float]


@dataclass(eq=False, repr=False)
class Stopwatch:
    clock: Clock = field(default_factory=default_clock)
    _start_ts: Optional[Number] = field(default=None, init=False)
    _elapsed_ms: Number = field(default=0, init=False)
    _running: bool = field(default=False, init=False)

    # ----- static helpers -----

    @staticmethod
    def get_timestamp_milliseconds() -> Number:
        """Return the default clock reading, unmodified."""
        return default_clock()()

    @classmethod
    def start_new(cls, clock: Optional[Clock] = None) -> "Stopwatch":
        """Create a stopwatch and start it."""
        sw = cls() if clock is None else cls(clock=clock)
        sw.start()
        return sw

    @staticmethod
    def measure(operation: Callable[[], Any], clock: Optional[Clock] = None) -> TimeSpan:
        """Time a single synchronous call of ``operation``.

        Whatever ``operation`` raises propagates to the caller untouched.
        """
        now = clock or default_clock()
        start = now()
        operation()
        delta = now() - start
        logger.debug("measured %r: %s ms", operation, delta)
        return TimeSpan.from_milliseconds(delta)

    # ----- read-only state -----

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def current_lap_milliseconds(self) -> Number:
        if not self._running:
            return 0
        return self.clock() - self._start_ts

    @property
    def current_lap(self) -> TimeSpan:
        if not self._running:
            return TimeSpan.zero()
        return TimeSpan.from_milliseconds(self.current_lap_milliseconds)

    @property
    def elapsed_milliseconds(self) -> Number:
        """Completed segments plus the in-progress one, if running."""
        return self._elapsed_ms + self.current_lap_milliseconds

    @property
    def elapsed(self) -> TimeSpan:
        return TimeSpan.from_milliseconds(self.elapsed_milliseconds)

    # ----- transitions -----

    def start(self) -> None:
        """Start, or resume after a stop. No effect while running."""
        if self._running:
            logger.debug("start() ignored: already running")
            return
        self._start_ts = self.clock()
        self._running = True
        logger.debug("stopwatch started (accumulated %s ms)", self._elapsed_ms)

    def stop(self) -> None:
        """Stop and keep the elapsed time. No effect while stopped."""
        if not self._running:
            logger.debug("stop() ignored: not running")
            return
        self._elapsed_ms += self.clock() - self._start_ts
        self._running = False
        logger.debug("stopwatch stopped at %s ms", self._elapsed_ms)

    def reset(self) -> None:
        """Zero the stopwatch and leave it stopped, even if it was running."""
        self._elapsed_ms = 0
        self._start_ts = None
        self._running = False
        logger.debug("stopwatch reset")

    def lap(self) -> TimeSpan:
        """Close the current lap and return its length.

        The total elapsed time is unchanged by a lap. Returns a zero span
        when the stopwatch is stopped.
        """
        if not self._running:
            logger.debug("lap() on stopped stopwatch")
            return TimeSpan.zero()
        now = self.clock()
        delta = now - self._start_ts
        self._start_ts = now
        self._elapsed_ms += delta
        logger.debug("lap: %s ms", delta)
        return TimeSpan.from_milliseconds(delta)

    # ----- context manager -----

    def __enter__(self) -> "Stopwatch":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def __repr__(self) -> str:
        state = "running" if self._running else "stopped"
        return f"<Stopwatch {state} elapsed_ms={self.elapsed_milliseconds}>"


__all__ = ["Stopwatch"]
