import queue
import random
import threading
from collections import Counter

from concpatterns.event_loop import (
    EventKind,
    event_loop,
    process_event,
    run_event_loop,
    system_event_producer,
    timer_event_producer,
    user_event_producer,
)


def _drain(events):
    items = []
    while True:
        try:
            items.append(events.get_nowait())
        except queue.Empty:
            return items


def test_user_producer_emits_numbered_user_events():
    events = queue.Queue()
    emitted = user_event_producer(events, random.Random(1), 0)
    queued = _drain(events)
    assert [event for _, event in queued] == emitted
    assert all(kind is EventKind.USER for kind, _ in queued)
    for number, event in enumerate(emitted, start=1):
        action, suffix = event.split(" ")
        assert suffix == f"(user_{number})"
        assert action in {"login", "logout", "click", "scroll", "submit"}


def test_system_producer_emits_numbered_system_events():
    events = queue.Queue()
    emitted = system_event_producer(events, random.Random(2), 0)
    queued = _drain(events)
    assert [event for _, event in queued] == emitted
    assert all(kind is EventKind.SYSTEM for kind, _ in queued)
    assert [event.split(" ")[1] for event in emitted] == [f"(system_{n})" for n in range(1, 7)]


def test_timer_producer_emits_heartbeats():
    events = queue.Queue()
    emitted = timer_event_producer(events, 0)
    assert emitted[0] == "heartbeat (timer_1)"
    assert emitted[-1] == "heartbeat (timer_5)"
    assert [kind for kind, _ in _drain(events)] == [EventKind.TIMER] * len(emitted)


def test_process_event_reports_line():
    assert process_event(EventKind.SYSTEM, "sync (system_2)", 0) == (
        "  -> System event processed: sync (system_2)"
    )


def test_event_loop_handles_events_in_order_until_shutdown():
    events = queue.Queue()
    sent = [
        (EventKind.USER, "click (user_1)"),
        (EventKind.TIMER, "heartbeat (timer_1)"),
        (EventKind.SYSTEM, "backup (system_1)"),
    ]
    for item in sent:
        events.put(item)
    shutdown = threading.Event()
    timer = threading.Timer(0.3, shutdown.set)
    timer.start()
    handled = event_loop(events, shutdown, 0)
    timer.join()
    assert handled == sent


def test_event_loop_returns_at_once_when_already_shut_down():
    events = queue.Queue()
    events.put((EventKind.USER, "login (user_1)"))
    shutdown = threading.Event()
    shutdown.set()
    assert event_loop(events, shutdown, 0) == []


def test_run_event_loop_handles_every_produced_event():
    handled = run_event_loop(duration=50, rng=random.Random(3), time_scale=0.01)
    counts = Counter(kind for kind, _ in handled)
    assert counts[EventKind.USER] == 8
    assert counts[EventKind.SYSTEM] == 6
    assert counts[EventKind.TIMER] == 5