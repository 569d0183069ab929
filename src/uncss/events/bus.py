"""Synchronous event bus for uncss run lifecycle events."""

from __future__ import annotations

import threading
from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Synchronous publish-subscribe event bus.

    Listeners subscribe to one event type or to every event.  Events are
    dispatched in registration order on the emitting thread; renders run in
    worker threads, so registration and dispatch are guarded by a lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> None:
        """Register a callback for a specific event type."""
        with self._lock:
            self._listeners.setdefault(event_type, []).append(callback)

    def on_all(self, callback: Listener) -> None:
        """Register a callback that receives every event."""
        with self._lock:
            self._global_listeners.append(callback)

    def emit(self, event: Any) -> None:
        """Dispatch *event* to all matching listeners."""
        with self._lock:
            listeners = self._global_listeners + self._listeners.get(type(event), [])
        for callback in listeners:
            callback(event)
