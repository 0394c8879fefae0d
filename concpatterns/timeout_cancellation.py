"""Timeouts and cancellation with a small cancellable context."""

from __future__ import annotations

import queue
import random
import threading
import time
from typing import Any


class CancelledError(Exception):
    """The context was cancelled."""

    def __init__(self) -> None:
        super().__init__("context canceled")


class DeadlineExceededError(Exception):
    """The context's deadline passed."""

    def __init__(self) -> None:
        super().__init__("context deadline exceeded")


class Context:
    """A signal that ends either by cancellation or by a deadline."""

    def __init__(self, timeout: float | None = None) -> None:
        self._done = threading.Event()
        self._lock = threading.Lock()
        self._error: Exception | None = None
        self._timer: threading.Timer | None = None
        if timeout is not None:
            if timeout <= 0:
                self._finish(DeadlineExceededError())
            else:
                self._timer = threading.Timer(timeout, self._finish, args=(DeadlineExceededError(),))
                self._timer.daemon = True
                self._timer.start()

    def _finish(self, error: Exception) -> None:
        with self._lock:
            if self._error is not None:
                return
            self._error = error
        self._done.set()

    def cancel(self) -> None:
        """Cancel the context; does nothing if it has already ended."""
        if self._timer is not None:
            self._timer.cancel()
        self._finish(CancelledError())

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for the context to end; True if it has."""
        return self._done.wait(timeout)

    def done(self) -> bool:
        """Whether the context has ended."""
        return self._done.is_set()

    def error(self) -> Exception | None:
        """Why the context ended, or None while it is live."""
        with self._lock:
            return self._error

    def __enter__(self) -> Context:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()


def with_timeout(timeout: float) -> Context:
    """A context that ends by itself after ``timeout`` seconds."""
    return Context(timeout)


def with_cancel() -> Context:
    """A context that ends only when cancelled."""
    return Context()


def _format_duration(millis: int) -> str:
    if millis < 1000:
        return f"{millis}ms"
    return f"{millis / 1000:g}s"


def long_running_task(ctx: Context, rng: Any = None, time_scale: float = 1.0) -> str:
    """Work for one to four seconds unless ``ctx`` ends first, in which case its error is raised."""
    source = random if rng is None else rng
    millis = source.randrange(3000) + 1000
    print(f"Starting long task (will take {_format_duration(millis)})...")
    if ctx.wait(max(millis / 1000 * time_scale, 0)):
        error = ctx.error()
        print(f"Long task cancelled: {error}")
        raise error
    return "Long task completed successfully"


def run_timeout_cancellation(rng: Any = None, time_scale: float = 1.0) -> list[str]:
    """Run the three examples and return the outcome line of each."""
    print("=== Timeouts and Cancellation Pattern Example ===")
    source = random if rng is None else rng
    outcomes: list[str] = []

    print("\n1. Context-based timeout example:")
    with with_timeout(2.0 * time_scale) as ctx:
        first: queue.Queue = queue.Queue()

        def task() -> None:
            try:
                first.put(("result", long_running_task(ctx, source, time_scale)))
            except (CancelledError, DeadlineExceededError):
                pass

        def watch() -> None:
            ctx.wait()
            first.put(("done", ctx.error()))

        threading.Thread(target=task, daemon=True).start()
        threading.Thread(target=watch, daemon=True).start()
        kind, value = first.get()
        line = f"Task completed: {value}" if kind == "result" else f"Task timed out: {value}"
    print(line)
    outcomes.append(line)

    print("\n2. Channel-based timeout example:")
    channel: queue.Queue = queue.Queue(maxsize=1)

    def slow() -> None:
        time.sleep(3.0 * time_scale)
        channel.put("Channel task completed")

    threading.Thread(target=slow, daemon=True).start()
    try:
        line = f"Channel task: {channel.get(timeout=1.0 * time_scale)}"
    except queue.Empty:
        line = "Channel task timed out"
    print(line)
    outcomes.append(line)

    print("\n3. Context cancellation example:")
    with with_cancel() as ctx2:

        def cancel_later() -> None:
            time.sleep(0.5 * time_scale)
            print("Cancelling context...")
            ctx2.cancel()

        threading.Thread(target=cancel_later, daemon=True).start()
        if ctx2.wait(2.0 * time_scale):
            line = f"Context cancelled: {ctx2.error()}"
        else:
            line = "Context cancellation example completed"
    print(line)
    outcomes.append(line)

    print("\nTimeouts and Cancellation example completed!")
    return outcomes