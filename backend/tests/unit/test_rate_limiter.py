"""Unit tests for the in-memory fixed-window rate limiter."""

import pytest

from blog_api.infrastructure.rate_limit import FixedWindowRateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_allows_up_to_limit_then_rejects():
    limiter = FixedWindowRateLimiter(limit=3, period=60.0, clock=FakeClock())

    contexts = [limiter.hit("1.2.3.4") for _ in range(4)]

    assert [c.reached for c in contexts] == [False, False, False, True]
    assert [c.remaining for c in contexts] == [2, 1, 0, 0]
    assert all(c.limit == 3 for c in contexts)


def test_window_resets_after_period():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(limit=1, period=60.0, clock=clock)
    first = limiter.hit("client")
    assert limiter.hit("client").reached

    clock.now += 60.0
    context = limiter.hit("client")

    assert not context.reached
    assert context.reset == first.reset + 60


def test_clients_have_separate_budgets():
    limiter = FixedWindowRateLimiter(limit=1, clock=FakeClock())
    limiter.hit("a")
    assert limiter.hit("a").reached
    assert not limiter.hit("b").reached


def test_reset_is_window_end_in_unix_seconds():
    limiter = FixedWindowRateLimiter(limit=5, period=60.0, clock=FakeClock(1000.5))
    assert limiter.hit("client").reset == 1061


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        FixedWindowRateLimiter(limit=0)
