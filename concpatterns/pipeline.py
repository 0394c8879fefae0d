"""Multi-stage pipeline: generate numbers, square them, then add ten."""

from __future__ import annotations

import queue
import random
import threading
import time
from collections.abc import Iterable, Iterator
from typing import Any

_DONE = object()


class _Failure:
    """Carries an exception raised inside a stage to the consumer."""

    __slots__ = ("error",)

    def __init__(self, error: BaseException) -> None:
        self.error = error


def _pause(seconds: float, time_scale: float) -> None:
    delay = seconds * time_scale
    if delay > 0:
        time.sleep(delay)


def _receive(channel: queue.Queue) -> Iterator[Any]:
    while True:
        item = channel.get()
        if item is _DONE:
            return
        if isinstance(item, _Failure):
            raise item.error
        yield item


def _stage(produce: Iterable[Any]) -> Iterator[Any]:
    """Run ``produce`` in its own thread and return an iterator over its output."""
    channel: queue.Queue = queue.Queue(maxsize=1)

    def pump() -> None:
        try:
            for item in produce:
                channel.put(item)
        except Exception as exc:  # handed over to the consumer
            channel.put(_Failure(exc))
            return
        channel.put(_DONE)

    threading.Thread(target=pump, daemon=True).start()
    return _receive(channel)


def generate_numbers(count: int = 10, rng: Any = None, time_scale: float = 1.0) -> Iterator[int]:
    """First stage: emit ``count`` random numbers between 1 and 10."""
    source = random if rng is None else rng

    def produce() -> Iterator[int]:
        for _ in range(count):
            number = source.randrange(10) + 1
            print(f"Generated: {number}")
            yield number
            _pause(0.1, time_scale)

    return _stage(produce())


def square(numbers: Iterable[int], time_scale: float = 1.0) -> Iterator[int]:
    """Second stage: square every incoming number."""

    def produce() -> Iterator[int]:
        for number in numbers:
            squared = number * number
            print(f"Squared {number} -> {squared}")
            yield squared
            _pause(0.15, time_scale)

    return _stage(produce())


def add_ten(numbers: Iterable[int], time_scale: float = 1.0) -> Iterator[int]:
    """Third stage: add ten to every incoming number."""

    def produce() -> Iterator[int]:
        for number in numbers:
            result = number + 10
            print(f"Added 10 to {number} -> {result}")
            yield result
            _pause(0.1, time_scale)

    return _stage(produce())


def run_pipeline(count: int = 10, rng: Any = None, time_scale: float = 1.0) -> list[int]:
    """Run the three-stage pipeline and return its results in order."""
    print("=== Pipeline Pattern Example ===")

    numbers = generate_numbers(count, rng, time_scale)
    squared = square(numbers, time_scale)
    results = add_ten(squared, time_scale)

    print("Pipeline stages:")
    print("1. Generate numbers")
    print("2. Square numbers")
    print("3. Add 10")
    print()

    collected = []
    for number in results:
        print(f"Result: {number}")
        collected.append(number)

    print("Pipeline completed!")
    return collected