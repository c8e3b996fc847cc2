# core/clock.py
import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int: ...


class SystemClock:
    """Wall clock in whole seconds since epoch."""

    def now(self) -> int:
        return int(time.time())


class FixedClock:
    def __init__(self, ts: int) -> None:
        self.ts = int(ts)

    def now(self) -> int:
        return self.ts

    def advance(self, seconds: int) -> None:
        self.ts += int(seconds)
