"""Publish-subscribe: every published message reaches every subscriber."""

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Iterator


def _pause(seconds: float, time_scale: float) -> None:
    delay = seconds * time_scale
    if delay > 0:
        time.sleep(delay)


class _Subscription:
    """A bounded message buffer that can be closed by its producer."""

    def __init__(self, capacity: int) -> None:
        self._items: deque[str] = deque()
        self._capacity = capacity
        self._closed = False
        self._cond = threading.Condition()

    def put(self, message: str) -> None:
        with self._cond:
            while len(self._items) >= self._capacity:
                self._cond.wait()
            self._items.append(message)
            self._cond.notify_all()

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[str]:
        while True:
            with self._cond:
                while not self._items and not self._closed:
                    self._cond.wait()
                if not self._items:
                    return
                message = self._items.popleft()
                self._cond.notify_all()
            yield message


class Broadcaster:
    """Delivers each published message to all current subscribers."""

    def __init__(self, buffer_size: int = 2) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._buffer_size = buffer_size
        self._subscribers: list[_Subscription] = []
        self._closed = False
        self._lock = threading.Lock()

    def subscribe(self) -> Iterator[str]:
        """Register a subscriber; iterate the result to receive messages until close."""
        with self._lock:
            if self._closed:
                raise RuntimeError("broadcaster is closed")
            subscription = _Subscription(self._buffer_size)
            self._subscribers.append(subscription)
        return iter(subscription)

    def publish(self, message: str) -> None:
        """Send ``message`` to every subscriber; ignored once closed."""
        with self._lock:
            if self._closed:
                return
            for subscription in self._subscribers:
                subscription.put(message)

    def close(self) -> None:
        """End every subscription; further calls do nothing."""
        with self._lock:
            if self._closed:
                return
            for subscription in self._subscribers:
                subscription.close()
            self._closed = True


def run_pubsub(
    num_subscribers: int = 3,
    num_messages: int = 5,
    time_scale: float = 1.0,
) -> dict[int, list[str]]:
    """Run the example and return the messages each subscriber received."""
    print("=== Publish-Subscribe (Pub/Sub) Pattern Example ===")
    broadcaster = Broadcaster()
    received: dict[int, list[str]] = {}

    def listen(subscriber_id: int, messages: Iterator[str]) -> None:
        inbox = received[subscriber_id]
        for message in messages:
            print(f"Subscriber {subscriber_id} received: {message}")
            inbox.append(message)
        print(f"Subscriber {subscriber_id} done.")

    listeners = []
    for subscriber_id in range(1, num_subscribers + 1):
        received[subscriber_id] = []
        messages = broadcaster.subscribe()
        thread = threading.Thread(target=listen, args=(subscriber_id, messages), daemon=True)
        thread.start()
        listeners.append(thread)

    def publish() -> None:
        for number in range(1, num_messages + 1):
            message = f"Message {number}"
            print(f"Publisher sending: {message}")
            broadcaster.publish(message)
            _pause(0.4, time_scale)
        broadcaster.close()

    threading.Thread(target=publish, daemon=True).start()

    for thread in listeners:
        thread.join()
    print("Pub/Sub example completed!")
    return received