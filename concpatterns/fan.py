"""Fan-out/fan-in: spread work across workers, then merge their results."""

from __future__ import annotations

import queue
import random
import threading
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

_DONE = object()


class _Failure:
    __slots__ = ("error",)

    def __init__(self, error: BaseException) -> None:
        self.error = error


@dataclass(frozen=True)
class WorkItem:
    """A unit of work."""

    id: int
    data: str


@dataclass(frozen=True)
class Result:
    """A processed work item."""

    original_id: int
    processed: str
    worker_id: int


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


def _shared(iterable: Iterable[Any]) -> Callable[[], Any]:
    """Return a thread-safe ``take`` that yields items or ``_DONE`` when exhausted."""
    iterator = iter(iterable)
    lock = threading.Lock()

    def take() -> Any:
        with lock:
            return next(iterator, _DONE)

    return take


def generate_work_items(count: int = 20, time_scale: float = 1.0) -> Iterator[WorkItem]:
    """Emit ``count`` work items from a background thread."""
    channel: queue.Queue = queue.Queue(maxsize=1)

    def produce() -> None:
        for index in range(count):
            print(f"Generated work item: {index}")
            channel.put(WorkItem(index, f"data-{index}"))
            _pause(0.05, time_scale)
        channel.put(_DONE)

    threading.Thread(target=produce, daemon=True).start()
    return _receive(channel)


def _work(
    worker_id: int,
    take: Callable[[], Any],
    out: queue.Queue,
    source: Any,
    time_scale: float,
) -> None:
    try:
        while (job := take()) is not _DONE:
            _pause((source.randrange(200) + 100) / 1000, time_scale)
            result = Result(
                original_id=job.id,
                processed=f"processed-{job.data}-by-worker-{worker_id}",
                worker_id=worker_id,
            )
            print(f"Worker {worker_id} processed item {job.id}")
            out.put(result)
    except Exception as exc:
        out.put(_Failure(exc))
        return
    out.put(_DONE)


def fan_out(
    jobs: Iterable[WorkItem],
    num_workers: int = 4,
    rng: Any = None,
    time_scale: float = 1.0,
) -> list[Iterator[Result]]:
    """Start ``num_workers`` workers sharing ``jobs``; return one result stream per worker."""
    if num_workers < 1:
        raise ValueError("num_workers must be at least 1")
    source = random if rng is None else rng
    take = _shared(jobs)
    streams = []
    for worker_id in range(1, num_workers + 1):
        channel: queue.Queue = queue.Queue()
        threading.Thread(
            target=_work,
            args=(worker_id, take, channel, source, time_scale),
            daemon=True,
        ).start()
        streams.append(_receive(channel))
    return streams


def fan_in(sources: Iterable[Iterable[Any]]) -> Iterator[Any]:
    """Merge several streams into one, in arrival order."""
    merged: queue.Queue = queue.Queue()

    def forward(stream: Iterable[Any]) -> None:
        try:
            for item in stream:
                merged.put(item)
        except Exception as exc:
            merged.put(_Failure(exc))

    threads = [threading.Thread(target=forward, args=(stream,), daemon=True) for stream in sources]
    for thread in threads:
        thread.start()

    def close_when_done() -> None:
        for thread in threads:
            thread.join()
        merged.put(_DONE)

    threading.Thread(target=close_when_done, daemon=True).start()
    return _receive(merged)


def run_fan(
    count: int = 20,
    num_workers: int = 4,
    rng: Any = None,
    time_scale: float = 1.0,
) -> list[Result]:
    """Run the fan-out/fan-in example and return every result collected."""
    print("=== Fan-out/Fan-in Pattern Example ===")

    items = generate_work_items(count, time_scale)
    streams = fan_out(items, num_workers, rng, time_scale)
    merged = fan_in(streams)

    print(f"Distributing {count} work items across {num_workers} workers...")
    print()

    collected = []
    for result in merged:
        print(
            f"Processed: Item {result.original_id} -> {result.processed} "
            f"(by Worker {result.worker_id})"
        )
        collected.append(result)

    print(f"\nFan-out/Fan-in completed! Processed {len(collected)} items.")
    return collected