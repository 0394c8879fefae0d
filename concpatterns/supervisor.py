"""Supervisor that restarts a worker which randomly fails."""

from __future__ import annotations

import random
import threading
import time
from typing import Any


def _pause(seconds: float, time_scale: float) -> None:
    delay = seconds * time_scale
    if delay > 0:
        time.sleep(delay)


def worker_with_failure(
    stop: threading.Event,
    rng: Any = None,
    time_scale: float = 1.0,
) -> str:
    """Work for a random while; return "failed", "completed" or "stopped"."""
    source = random if rng is None else rng
    print("Worker: Started")
    work_time = (source.randrange(1200) + 400) / 1000
    if stop.wait(work_time * time_scale):
        print("Worker: Received stop signal.")
        return "stopped"
    if source.random() < 0.6:
        print("Worker: Simulated failure!")
        return "failed"
    print("Worker: Completed work successfully.")
    return "completed"


def run_supervisor(duration: float = 4.0, rng: Any = None, time_scale: float = 1.0) -> int:
    """Supervise the worker for ``duration`` seconds; return how often it was restarted."""
    print("=== Supervisor/Restart Pattern Example ===")
    source = random if rng is None else rng
    stop = threading.Event()
    restarts = 0

    def supervise() -> None:
        nonlocal restarts
        while True:
            if worker_with_failure(stop, source, time_scale) == "stopped":
                print("Supervisor: Stopping worker supervision.")
                return
            restarts += 1
            print("Supervisor: Worker failed, restarting...")
            _pause(0.5, time_scale)

    supervisor = threading.Thread(target=supervise, daemon=True)
    supervisor.start()

    _pause(duration, time_scale)
    stop.set()
    supervisor.join()

    print(f"Supervisor example completed! Worker was restarted {restarts - 1} times.")
    return restarts