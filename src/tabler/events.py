"""Synchronous publish/subscribe for tables and plugins.

EventEmitter is held by composition: ``Table.events`` owns one and the
table's ``on/off/emit`` delegate to it.

Example:
    >>> events = EventEmitter()
    >>> seen = []
    >>> events.on("sorted", seen.append)
    >>> events.emit("sorted", "name")
    >>> seen
    ['name']
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Handler = Callable[..., Any]


class EventEmitter:
    """Minimal event emitter.

    Handlers run synchronously, in registration order, with whatever
    arguments were passed to ``emit``. Handler exceptions propagate to the
    emitter's caller and stop delivery to the remaining handlers.
    """

    __slots__ = ("_events",)

    def __init__(self) -> None:
        self._events: dict[str, list[Handler]] = {}

    def on(self, event: str, handler: Handler) -> None:
        """Subscribe ``handler`` to ``event``.

        Registering the same handler twice means it is called twice.
        """
        self._events.setdefault(event, []).append(handler)

    def off(self, event: str | None = None, handler: Handler | None = None) -> None:
        """Unsubscribe.

        Args:
            event: Event name. None means every event.
            handler: Handler to remove (first registration per event). None
                removes every handler of ``event``.

        ``off()`` with neither argument removes every subscription;
        ``off(handler=h)`` removes ``h`` from every event. Removing a
        handler that was never registered is a no-op.
        """
        if event is None:
            if handler is None:
                self._events.clear()
                return
            for name in list(self._events):
                self.off(name, handler)
            return

        handlers = self._events.get(event)
        if handlers is None:
            return

        if handler is None:
            del self._events[event]
            return

        try:
            handlers.remove(handler)
        except ValueError:
            return
        if not handlers:
            del self._events[event]

    def emit(self, event: str, *args: Any, **kwargs: Any) -> None:
        """Call every handler of ``event``.

        Iterates over a snapshot, so handlers may subscribe or unsubscribe
        during delivery without affecting the current emit.
        """
        for handler in tuple(self._events.get(event, ())):
            handler(*args, **kwargs)

    def listeners(self, event: str) -> tuple[Handler, ...]:
        """Handlers currently subscribed to ``event``."""
        return tuple(self._events.get(event, ()))

    def __len__(self) -> int:
        """Total number of subscriptions."""
        return sum(len(handlers) for handlers in self._events.values())
