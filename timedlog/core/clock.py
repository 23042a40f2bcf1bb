"""
Location : timedlog/core/clock.py
Purpose  : Elapsed-time capability injected into recorders and players.
Notes    : A clock is owned by exactly one recorder or player; do not share one between sessions.
"""
from __future__ import annotations
import time
from typing import Callable, Optional, Protocol


class Clock(Protocol):
    def start(self) -> None:
        """(Re)start the counter at zero."""

    def elapsed_s(self) -> float:
        """Seconds since the most recent start()."""


class MonotonicClock:
    def __init__(self, source: Callable[[], float] = time.monotonic) -> None:
        self._source = source
        self._t0: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._t0 is not None

    def start(self) -> None:
        self._t0 = self._source()

    def elapsed_s(self) -> float:
        if self._t0 is None:
            return 0.0
        return max(0.0, self._source() - self._t0)
