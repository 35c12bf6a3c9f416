"""Rate limiting adapters.

An in-memory fixed-window limiter keyed by client address, plus the ASGI
middleware that enforces it ahead of routing. The limiter is process-local;
several worker processes each keep their own budget.
"""

from .memory_limiter import FixedWindowRateLimiter, RateLimitContext
from .middleware import RateLimitMiddleware

__all__ = [
    "FixedWindowRateLimiter",
    "RateLimitContext",
    "RateLimitMiddleware",
]
