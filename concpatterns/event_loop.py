"""Event loop: a single loop dispatches events arriving from several producers."""

from __future__ import annotations

import queue
import random
import threading
import time
from enum import Enum
from typing import Any

_POLL_INTERVAL = 0.01

USER_ACTIONS = ("login", "logout", "click", "scroll", "submit")
SYSTEM_ACTIONS = ("backup", "update", "maintenance", "alert", "sync")


class EventKind(Enum):
    """Source of an event, with the time it takes to process one."""

    USER = ("user", 0.1)
    SYSTEM = ("system", 0.15)
    TIMER = ("timer", 0.05)

    def __init__(self, label: str, processing_time: float) -> None:
        self.label = label
        self.processing_time = processing_time


def _pause(seconds: float, time_scale: float) -> None:
    delay = seconds * time_scale
    if delay > 0:
        time.sleep(delay)


def user_event_producer(events: queue.Queue, rng: Any = None, time_scale: float = 1.0) -> list[str]:
    """Emit eight user events at random intervals; return what was emitted."""
    source = random if rng is None else rng
    emitted = []
    for number in range(1, 9):
        _pause((source.randrange(800) + 200) / 1000, time_scale)
        action = source.choice(USER_ACTIONS)
        event = f"{action} (user_{number})"
        events.put((EventKind.USER, event))
        emitted.append(event)
    return emitted


def system_event_producer(events: queue.Queue, rng: Any = None, time_scale: float = 1.0) -> list[str]:
    """Emit six system events at random intervals; return what was emitted."""
    source = random if rng is None else rng
    emitted = []
    for number in range(1, 7):
        _pause((source.randrange(1000) + 500) / 1000, time_scale)
        action = source.choice(SYSTEM_ACTIONS)
        event = f"{action} (system_{number})"
        events.put((EventKind.SYSTEM, event))
        emitted.append(event)
    return emitted


def timer_event_producer(events: queue.Queue, time_scale: float = 1.0) -> list[str]:
    """Emit five heartbeats, one per second; return what was emitted."""
    period = 1.0 * time_scale
    next_tick = time.monotonic() + period
    emitted = []
    for number in range(1, 6):
        delay = next_tick - time.monotonic()
        if delay > 0:
            time.sleep(delay)
        next_tick += period
        event = f"heartbeat (timer_{number})"
        events.put((EventKind.TIMER, event))
        emitted.append(event)
    return emitted


def process_event(kind: EventKind, event: str, time_scale: float = 1.0) -> str:
    """Handle one event and return the line reporting it."""
    _pause(kind.processing_time, time_scale)
    line = f"  -> {kind.label.capitalize()} event processed: {event}"
    print(line)
    return line


def event_loop(
    events: queue.Queue,
    shutdown: threading.Event,
    time_scale: float = 1.0,
) -> list[tuple[EventKind, str]]:
    """Dispatch events until ``shutdown`` is set; return the events handled, in order."""
    print("Event loop started...")
    handled: list[tuple[EventKind, str]] = []
    while True:
        if shutdown.is_set():
            print("Event Loop: Shutdown signal received, cleaning up...")
            return handled
        try:
            kind, event = events.get(timeout=_POLL_INTERVAL)
        except queue.Empty:
            continue
        print(f"Event Loop: Processing {kind.label} event: {event}")
        process_event(kind, event, time_scale)
        handled.append((kind, event))


def run_event_loop(
    duration: float = 5.0,
    rng: Any = None,
    time_scale: float = 1.0,
) -> list[tuple[EventKind, str]]:
    """Run producers and the loop for ``duration`` seconds; return the events handled."""
    print("=== Event Loop Pattern Example ===")
    source = random if rng is None else rng
    events: queue.Queue = queue.Queue(maxsize=30)
    shutdown = threading.Event()

    producers = [
        threading.Thread(target=user_event_producer, args=(events, source, time_scale), daemon=True),
        threading.Thread(target=system_event_producer, args=(events, source, time_scale), daemon=True),
        threading.Thread(target=timer_event_producer, args=(events, time_scale), daemon=True),
    ]
    for producer in producers:
        producer.start()

    handled: list[tuple[EventKind, str]] = []

    def loop() -> None:
        handled.extend(event_loop(events, shutdown, time_scale))

    loop_thread = threading.Thread(target=loop, daemon=True)
    loop_thread.start()

    _pause(duration, time_scale)
    print("Shutting down event loop...")
    shutdown.set()

    _pause(0.5, time_scale)
    loop_thread.join()
    print("Event loop example completed!")
    return handled