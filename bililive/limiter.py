"""Token-bucket rate limiter used to pace outgoing requests."""

from __future__ import annotations

import threading
import time


class RateLimiter:
    """Hands out one token every ``interval_ms``, holding at most ``burst``.

    :meth:`acquire` waits up to ``timeout_ms`` for a token.
    """

    def __init__(self, burst, interval_ms, timeout_ms):
        if burst < 1:
            raise ValueError("burst must be at least 1")
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        if timeout_ms < 0:
            raise ValueError("timeout_ms must not be negative")
        self.burst = burst
        self.interval = interval_ms / 1000
        self.timeout = timeout_ms / 1000
        self._tokens = float(burst)
        self._stamp = time.monotonic()
        self._cond = threading.Condition()

    def _refill(self, now: float) -> None:
        elapsed = now - self._stamp
        if elapsed > 0:
            self._tokens = min(float(self.burst), self._tokens + elapsed / self.interval)
            self._stamp = now

    def acquire(self):
        """Take a token; return False if none became available in time."""
        deadline = time.monotonic() + self.timeout
        with self._cond:
            while True:
                now = time.monotonic()
                self._refill(now)
                if self._tokens >= 1:
                    self._tokens -= 1
                    return True
                remaining = deadline - now
                if remaining <= 0:
                    return False
                needed = (1 - self._tokens) * self.interval
                self._cond.wait(min(needed, remaining))