"""Producers and consumers sharing a bounded buffer."""

from __future__ import annotations

import queue
import random
import threading
import time
from typing import Any

_DONE = object()


def _pause(seconds: float, time_scale: float) -> None:
    delay = seconds * time_scale
    if delay > 0:
        time.sleep(delay)


def run_producer_consumer(
    buffer_size: int = 5,
    num_producers: int = 2,
    num_consumers: int = 3,
    num_items: int = 10,
    rng: Any = None,
    time_scale: float = 1.0,
) -> list[int]:
    """Run the example and return the items in the order they were consumed."""
    if buffer_size < 0:
        raise ValueError("buffer_size must not be negative")
    if num_consumers < 1:
        raise ValueError("num_consumers must be at least 1")
    print("=== Producer-Consumer Pattern Example ===")
    source = random if rng is None else rng

    buffer: queue.Queue = queue.Queue(maxsize=buffer_size or 1)
    consumed: list[int] = []
    lock = threading.Lock()

    def produce(producer_id: int) -> None:
        for _ in range(num_items):
            item = source.randrange(100)
            buffer.put(item)
            print(f"Producer {producer_id} produced: {item}")
            _pause((source.randrange(200) + 100) / 1000, time_scale)

    def consume(consumer_id: int) -> None:
        for item in iter(buffer.get, _DONE):
            print(f"Consumer {consumer_id} consumed: {item}")
            with lock:
                consumed.append(item)
            _pause((source.randrange(300) + 100) / 1000, time_scale)

    producers = [
        threading.Thread(target=produce, args=(pid,), daemon=True)
        for pid in range(1, num_producers + 1)
    ]
    consumers = [
        threading.Thread(target=consume, args=(cid,), daemon=True)
        for cid in range(1, num_consumers + 1)
    ]
    for thread in producers + consumers:
        thread.start()

    for thread in producers:
        thread.join()
    for _ in consumers:
        buffer.put(_DONE)
    for thread in consumers:
        thread.join()

    print("Producer-Consumer example completed!")
    return consumed