"""Worker pool: a fixed set of workers drains a shared job queue."""

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


def _pool_worker(
    worker_id: int,
    jobs: queue.Queue,
    results: queue.Queue,
    source: Any,
    time_scale: float,
) -> None:
    print(f"Worker {worker_id} started")
    for job in iter(jobs.get, _DONE):
        millis = source.randrange(300) + 200
        print(f"Worker {worker_id} processing job {job} (will take {millis}ms)")
        _pause(millis / 1000, time_scale)
        results.put(f"Job {job} completed by worker {worker_id} in {millis}ms")
    print(f"Worker {worker_id} finished")


def run_pools(
    num_workers: int = 3,
    num_jobs: int = 15,
    rng: Any = None,
    time_scale: float = 1.0,
) -> list[str]:
    """Run ``num_jobs`` jobs through ``num_workers`` workers and return the result lines."""
    print("=== Worker Pools Pattern Example ===")
    source = random if rng is None else rng

    jobs: queue.Queue = queue.Queue(maxsize=max(num_jobs, 1))
    results: queue.Queue = queue.Queue()

    workers = [
        threading.Thread(
            target=_pool_worker,
            args=(worker_id, jobs, results, source, time_scale),
            daemon=True,
        )
        for worker_id in range(1, num_workers + 1)
    ]
    for worker in workers:
        worker.start()

    def send() -> None:
        for job in range(1, num_jobs + 1):
            print(f"Sending job {job} to pool")
            jobs.put(job)
            _pause(0.1, time_scale)
        for _ in workers:
            jobs.put(_DONE)

    def close_results() -> None:
        for worker in workers:
            worker.join()
        results.put(_DONE)

    threading.Thread(target=send, daemon=True).start()
    threading.Thread(target=close_results, daemon=True).start()

    print(f"\nWorker pool with {num_workers} workers processing {num_jobs} jobs:")
    print()

    collected = []
    for result in iter(results.get, _DONE):
        print(f"Result: {result}")
        collected.append(result)

    print(f"\nWorker pool completed! Processed {len(collected)} jobs.")
    return collected