"""Rate limiting: a fixed-rate limiter and a token bucket."""

from __future__ import annotations

import math
import threading
import time
from datetime import datetime


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S.%f")[:-3]


class FixedRateLimiter:
    """Lets one caller through every ``interval / rate`` seconds."""

    def __init__(self, rate: int, interval: float = 1.0) -> None:
        if rate <= 0:
            raise ValueError("rate must be positive")
        period = interval / rate
        if period <= 0:
            raise ValueError("interval must be positive")
        self._period = period
        self._next_tick = time.monotonic() + period
        self._lock = threading.Lock()
        self._stopped = threading.Event()

    def wait(self) -> None:
        """Block until the next tick."""
        with self._lock:
            if self._stopped.is_set():
                raise RuntimeError("rate limiter is stopped")
            delay = self._next_tick - time.monotonic()
            if delay > 0 and self._stopped.wait(delay):
                raise RuntimeError("rate limiter is stopped")
            now = time.monotonic()
            self._next_tick += self._period
            if self._next_tick < now:
                missed = math.ceil((now - self._next_tick) / self._period)
                self._next_tick += missed * self._period

    def stop(self) -> None:
        """Stop ticking; pending and later waits raise RuntimeError."""
        self._stopped.set()

    def __enter__(self) -> FixedRateLimiter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


class TokenBucketLimiter:
    """Holds up to ``burst`` tokens, refilled at ``rate`` tokens per ``interval``."""

    def __init__(self, rate: int, burst: int, interval: float = 1.0) -> None:
        if rate <= 0:
            raise ValueError("rate must be positive")
        if burst < 0:
            raise ValueError("burst must not be negative")
        period = interval / rate
        if period <= 0:
            raise ValueError("interval must be positive")
        self._period = period
        self._burst = burst
        self._tokens = burst
        self._cond = threading.Condition()
        self._stopped = threading.Event()
        threading.Thread(target=self._refill, daemon=True).start()

    def _refill(self) -> None:
        while not self._stopped.wait(self._period):
            with self._cond:
                if self._tokens < self._burst:
                    self._tokens += 1
                    self._cond.notify()

    @property
    def tokens(self) -> int:
        """Tokens currently available."""
        with self._cond:
            return self._tokens

    def allow(self) -> bool:
        """Take a token if one is available."""
        with self._cond:
            if self._tokens == 0:
                return False
            self._tokens -= 1
            return True

    def wait(self) -> None:
        """Block until a token is available, then take it."""
        with self._cond:
            while self._tokens == 0:
                if self._stopped.is_set():
                    raise RuntimeError("token bucket is stopped")
                self._cond.wait(self._period)
            self._tokens -= 1

    def stop(self) -> None:
        """Stop refilling the bucket."""
        self._stopped.set()
        with self._cond:
            self._cond.notify_all()

    def __enter__(self) -> TokenBucketLimiter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


def run_rate_limiting(time_scale: float = 1.0) -> dict[str, list[int]]:
    """Run both examples; return the fixed-rate order and the granted and denied ids."""
    print("=== Rate Limiting Pattern Example ===")

    print("\n1. Fixed rate limiting (2 requests per second):")
    fixed_order: list[int] = []
    lock = threading.Lock()
    with FixedRateLimiter(2, 1.0 * time_scale) as limiter:

        def limited(request_id: int) -> None:
            limiter.wait()
            with lock:
                fixed_order.append(request_id)
            print(f"Request {request_id} processed at {_timestamp()}")

        threads = [threading.Thread(target=limited, args=(i,)) for i in range(1, 7)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    print("\n2. Token bucket rate limiting (3 tokens per second, burst of 5):")
    granted: list[int] = []
    denied: list[int] = []
    with TokenBucketLimiter(3, 5, 1.0 * time_scale) as bucket:

        def request(request_id: int) -> None:
            if bucket.allow():
                with lock:
                    granted.append(request_id)
                print(f"Token request {request_id} granted at {_timestamp()}")
            else:
                with lock:
                    denied.append(request_id)
                print(f"Token request {request_id} denied at {_timestamp()}")

        threads = [threading.Thread(target=request, args=(i,)) for i in range(1, 11)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    print("\nRate Limiting example completed!")
    return {"fixed": fixed_order, "granted": granted, "denied": denied}