"""Synchronous event bus for generator run events."""

from typing import Any, Callable


class EventBus:
    """Publish-subscribe bus dispatching on the event's exact type.

    Callbacks run synchronously on the emitting thread, global listeners
    first, then type listeners, each in registration order.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable[[Any], None]]] = {}
        self._global_listeners: list[Callable[[Any], None]] = []

    def subscribe(self, event_type: type, callback: Callable[[Any], None]) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns a function that removes it."""
        callbacks = self._listeners.setdefault(event_type, [])
        callbacks.append(callback)
        return lambda: callbacks.remove(callback)

    def on_all(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        """Register *callback* for every event; returns a function that removes it."""
        self._global_listeners.append(callback)
        return lambda: self._global_listeners.remove(callback)

    def emit(self, event: Any) -> None:
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)
