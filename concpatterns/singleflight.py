"""Singleflight: concurrent calls for the same key share one execution."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Any


def _pause(seconds: float, time_scale: float) -> None:
    delay = seconds * time_scale
    if delay > 0:
        time.sleep(delay)


class _Call:
    __slots__ = ("done", "value", "error", "dups")

    def __init__(self) -> None:
        self.done = threading.Event()
        self.value: Any = None
        self.error: Exception | None = None
        self.dups = 0


class Group:
    """Runs at most one call per key at a time; duplicates wait for its result."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._calls: dict[str, _Call] = {}

    def do(self, key: str, fn: Callable[[], Any]) -> Any:
        """Return ``fn()``, or the result of a call for ``key`` already in flight."""
        with self._lock:
            call = self._calls.get(key)
            leader = call is None
            if call is None:
                call = _Call()
                self._calls[key] = call
            else:
                call.dups += 1

        if leader:
            try:
                call.value = fn()
            except Exception as exc:
                call.error = exc
            finally:
                call.done.set()
                with self._lock:
                    del self._calls[key]
        else:
            print(f"Duplicate call for key {key}, waiting for result...")
            call.done.wait()

        if call.error is not None:
            raise call.error
        return call.value


def run_singleflight(time_scale: float = 1.0) -> tuple[list[str], list[str]]:
    """Run both examples; return the results of the same-key and mixed-key requests."""
    print("=== Singleflight (Spaceflight) Pattern Example ===")
    group = Group()
    key = "user:123"
    num_requests = 5
    results: list[str] = [""] * num_requests

    print(f"Making {num_requests} concurrent requests for key: {key}")

    def same_key(request_id: int) -> None:
        print(f"Request {request_id}: Starting...")

        def expensive() -> str:
            print(f"Request {request_id}: Executing expensive operation...")
            _pause(2.0, time_scale)
            return f"Data for {key} (processed by request {request_id})"

        result = group.do(key, expensive)
        results[request_id] = result
        print(f"Request {request_id}: Completed with result: {result}")

    threads = [threading.Thread(target=same_key, args=(i,)) for i in range(num_requests)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    print("\nAll results should be identical:")
    for request_id, result in enumerate(results):
        print(f"  Request {request_id}: {result}")

    print("\nTesting with different keys:")
    keys = ["user:123", "user:456", "user:123"]
    mixed: list[str] = [""] * len(keys)

    def by_key(request_id: int, k: str) -> None:
        def fetch() -> str:
            print(f"Request {request_id}: Executing for key {k}...")
            _pause(1.0, time_scale)
            return f"Data for {k}"

        result = group.do(k, fetch)
        mixed[request_id] = result
        print(f"Request {request_id}: Key {k} -> {result}")

    threads = [threading.Thread(target=by_key, args=(i, k)) for i, k in enumerate(keys)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    print("\nSingleflight example completed!")
    return results, mixed