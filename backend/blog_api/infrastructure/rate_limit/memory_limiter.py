"""In-memory fixed-window request counter."""

import math
import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitContext:
    """Outcome of one hit, exposed to clients as X-RateLimit-* headers."""

    limit: int
    remaining: int
    reset: int  # unix seconds at which the current window ends
    reached: bool


@dataclass
class _Window:
    count: int
    expires_at: float


class FixedWindowRateLimiter:
    """Allows ``limit`` hits per key within a window of ``period`` seconds.

    A key's window opens on its first hit and closes ``period`` seconds
    later; the next hit after that opens a fresh window. Expired windows are
    swept at most once per period. Meant to be called from the event loop
    thread only.
    """

    def __init__(
        self,
        limit: int,
        period: float = 60.0,
        clock: Callable[[], float] = time.time,
    ):
        if limit < 1:
            raise ValueError("rate limit must be at least 1")
        self._limit = limit
        self._period = period
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._next_sweep = clock() + period

    @property
    def limit(self) -> int:
        return self._limit

    def hit(self, key: str) -> RateLimitContext:
        """Count one request for ``key`` and report the remaining budget."""
        now = self._clock()
        if now >= self._next_sweep:
            self._sweep(now)

        window = self._windows.get(key)
        if window is None or window.expires_at <= now:
            window = _Window(count=0, expires_at=now + self._period)
            self._windows[key] = window
        window.count += 1

        return RateLimitContext(
            limit=self._limit,
            remaining=max(self._limit - window.count, 0),
            reset=math.ceil(window.expires_at),
            reached=window.count > self._limit,
        )

    def _sweep(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if window.expires_at <= now]
        for key in expired:
            del self._windows[key]
        self._next_sweep = now + self._period
