from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now_ms(self) -> int: ...


class MonotonicClock:
    def now_ms(self) -> int:
        return int(time.monotonic() * 1000)


class ManualClock:
    """Clock that only moves when told to. Used by tests and the gym env."""

    def __init__(self, start_ms: int = 0) -> None:
        self.current_ms = int(start_ms)

    def now_ms(self) -> int:
        return self.current_ms

    def advance(self, ms: int) -> int:
        self.current_ms += int(ms)
        return self.current_ms
