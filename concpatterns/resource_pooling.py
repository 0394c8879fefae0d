"""Resource pooling: reuse a bounded set of expensive resources."""

from __future__ import annotations

import random
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any


def _pause(seconds: float, time_scale: float) -> None:
    delay = seconds * time_scale
    if delay > 0:
        time.sleep(delay)


@dataclass
class Resource:
    """A pooled resource such as a database connection or an HTTP client."""

    id: int
    last_used: float = field(default_factory=time.monotonic)


class ResourcePool:
    """Hands out idle resources, creating new ones up to ``max_size``."""

    def __init__(
        self,
        initial: int,
        max_size: int,
        name: str = "connection",
        pool_name: str = "DB pool",
    ) -> None:
        if initial < 0:
            raise ValueError("initial must not be negative")
        if max_size < initial:
            raise ValueError("max_size must be at least initial")
        self._max_size = max_size
        self._name = name
        self._pool_name = pool_name
        self._idle: deque[Resource] = deque(Resource(i) for i in range(1, initial + 1))
        self._created = initial
        self._closed = False
        self._cond = threading.Condition()

    @property
    def created(self) -> int:
        """How many resources the pool has created."""
        with self._cond:
            return self._created

    @property
    def idle(self) -> int:
        """How many resources are waiting in the pool."""
        with self._cond:
            return len(self._idle)

    @property
    def max_size(self) -> int:
        return self._max_size

    def acquire(self) -> Resource:
        """Take an idle resource, create one, or wait for one to be released."""
        with self._cond:
            if self._closed:
                raise RuntimeError("pool is closed")
            if not self._idle and self._created < self._max_size:
                self._created += 1
                return Resource(self._created)
            while not self._idle:
                if self._closed:
                    raise RuntimeError("pool is closed")
                self._cond.wait()
            resource = self._idle.popleft()
        resource.last_used = time.monotonic()
        return resource

    def release(self, resource: Resource) -> bool:
        """Return ``resource`` to the pool; False if the pool was full and it was discarded."""
        with self._cond:
            if self._closed:
                raise RuntimeError("pool is closed")
            if len(self._idle) >= self._max_size:
                print(f"Pool full, discarding {self._name} {resource.id}")
                return False
            self._idle.append(resource)
            self._cond.notify()
            return True

    def close(self) -> None:
        """Close the pool; waiting and later callers raise RuntimeError."""
        with self._cond:
            if self._closed:
                raise RuntimeError("pool is already closed")
            self._closed = True
            self._cond.notify_all()
            created = self._created
        print(f"{self._pool_name} closed. Total {self._name}s created: {created}")


def _exercise(
    pool: ResourcePool,
    workers: int,
    label: str,
    action: str,
    base_ms: int,
    spread_ms: int,
    source: Any,
    time_scale: float,
) -> None:
    def work(worker_id: int) -> None:
        resource = pool.acquire()
        print(f"Worker {worker_id}: Got {label} {resource.id}")
        _pause((source.randrange(spread_ms) + base_ms) / 1000, time_scale)
        print(f"Worker {worker_id}: {action} {resource.id}")
        pool.release(resource)
        print(f"Worker {worker_id}: Released {label} {resource.id}")

    threads = [threading.Thread(target=work, args=(i,)) for i in range(1, workers + 1)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def run_resource_pooling(rng: Any = None, time_scale: float = 1.0) -> dict[str, int]:
    """Run the database and HTTP client examples; return how many of each were created."""
    print("=== Resource Pooling Pattern Example ===")
    source = random if rng is None else rng

    print("\n1. Database Connection Pool Example:")
    db_pool = ResourcePool(3, 5, "connection", "DB pool")
    _exercise(
        db_pool, 8, "DB connection", "Executing query on connection", 200, 500, source, time_scale
    )
    db_pool.close()

    print("\n2. HTTP Client Pool Example:")
    client_pool = ResourcePool(2, 4, "HTTP client", "HTTP client pool")
    _exercise(
        client_pool, 6, "HTTP client", "Making API request with client", 100, 300, source, time_scale
    )
    client_pool.close()

    print("\nResource Pooling example completed!")
    return {"db": db_pool.created, "http": client_pool.created}