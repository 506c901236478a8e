"""Per-entity event publishing for Hearthmoor MUD."""

import threading
from collections.abc import Callable
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

Listener = Callable[..., Any]


class EventEmitter:
    """
    Named-event publish/subscribe.

    Listeners for an event are called in registration order. Rooms hold one
    of these as a field so behaviors can subscribe to and publish room events.
    """

    def __init__(self) -> None:
        """Initialize an emitter with no listeners."""
        self._listeners: dict[str, list[Listener]] = {}
        self._lock = threading.Lock()

    def on(self, event: str, listener: Listener) -> None:
        """
        Register a listener for an event.

        Args:
            event: Event name (e.g., "playerEnter")
            listener: Callable invoked with the emitted arguments
        """
        with self._lock:
            self._listeners.setdefault(event, []).append(listener)

    def off(self, event: str, listener: Listener) -> None:
        """Remove a previously registered listener; unknown listeners are ignored."""
        with self._lock:
            current = self._listeners.get(event)
            if current and listener in current:
                current.remove(listener)

    def listeners(self, event: str) -> list[Listener]:
        """Get a copy of the listeners registered for an event."""
        with self._lock:
            return list(self._listeners.get(event, ()))

    def emit(self, event: str, *args: Any, **kwargs: Any) -> bool:
        """
        Publish an event to its listeners.

        Args:
            event: Event name
            *args: Positional payload passed to each listener
            **kwargs: Keyword payload passed to each listener

        Returns:
            True if at least one listener was called
        """
        targets = self.listeners(event)
        for listener in targets:
            listener(*args, **kwargs)

        if targets:
            logger.debug("event_emitted", name=event, listeners=len(targets))

        return bool(targets)
