
from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class Timer(Protocol):
    """Anything that can be started, stopped and reset."""

    @property
    def is_running(self) -> bool: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def reset(self) -> None: ...
