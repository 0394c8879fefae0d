"""Word counting in three phases: map, shuffle and reduce."""

from __future__ import annotations

import queue
import random
import threading
import time
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

SAMPLE_DATA = (
    "hello world",
    "hello go",
    "world of concurrency",
    "go programming",
    "concurrency patterns",
    "hello concurrency",
    "go world",
    "patterns in go",
)

_DONE = object()


class _Failure:
    __slots__ = ("error",)

    def __init__(self, error: BaseException) -> None:
        self.error = error


@dataclass(frozen=True)
class KeyValue:
    """A key with an associated count."""

    key: str
    value: int


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


def _format_list(values: Iterable[Any]) -> str:
    return "[" + " ".join(str(value) for value in values) + "]"


def map_phase(data: Iterable[str], rng: Any = None, time_scale: float = 1.0) -> Iterator[KeyValue]:
    """Split every line into lower-case words, emitting (word, 1) from one thread per line."""
    source = random if rng is None else rng
    out: queue.Queue = queue.Queue()

    def emit(text: str) -> None:
        try:
            for word in text.lower().split():
                _pause(source.randrange(50) / 1000, time_scale)
                out.put(KeyValue(word, 1))
                print(f"Map: emitted ({word}, 1)")
        except Exception as exc:
            out.put(_Failure(exc))

    mappers = [threading.Thread(target=emit, args=(line,), daemon=True) for line in data]
    for mapper in mappers:
        mapper.start()

    def close_when_done() -> None:
        for mapper in mappers:
            mapper.join()
        out.put(_DONE)

    threading.Thread(target=close_when_done, daemon=True).start()
    return _receive(out)


def shuffle_phase(mapped: Iterable[KeyValue]) -> dict[str, list[int]]:
    """Group emitted values by key."""
    grouped: dict[str, list[int]] = {}
    for pair in mapped:
        values = grouped.setdefault(pair.key, [])
        values.append(pair.value)
        print(f"Shuffle: grouped {pair.key} -> {_format_list(values)}")
    return grouped


def reduce_phase(
    grouped: Mapping[str, Iterable[int]],
    rng: Any = None,
    time_scale: float = 1.0,
) -> dict[str, int]:
    """Sum the values of every key, one thread per key."""
    source = random if rng is None else rng
    result: dict[str, int] = {}
    lock = threading.Lock()

    def reduce(word: str, counts: Iterable[int]) -> None:
        _pause(source.randrange(100) / 1000, time_scale)
        total = sum(counts)
        with lock:
            result[word] = total
        print(f"Reduce: {word} -> {total}")

    reducers = [
        threading.Thread(target=reduce, args=(word, counts))
        for word, counts in grouped.items()
    ]
    for reducer in reducers:
        reducer.start()
    for reducer in reducers:
        reducer.join()
    return result


def run_mapreduce(
    data: Iterable[str] | None = None,
    rng: Any = None,
    time_scale: float = 1.0,
) -> dict[str, int]:
    """Count the words of ``data`` (the sample lines by default)."""
    print("=== MapReduce Pattern Example ===")
    lines = list(SAMPLE_DATA if data is None else data)
    print(f"Input data: {_format_list(lines)}")

    mapped = map_phase(lines, rng, time_scale)
    grouped = shuffle_phase(mapped)
    result = reduce_phase(grouped, rng, time_scale)

    print("\nWord count results:")
    for word in sorted(result):
        print(f"  {word}: {result[word]}")

    print("\nMapReduce example completed!")
    return result