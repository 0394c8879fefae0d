"""Demonstrations of common concurrency patterns built on threads, queues and events."""

__version__ = "0.1.0"