"""Named-event observer registry with synchronous dispatch."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[..., None]


class Observable:
    """Keeps an ordered list of listeners per event name.

    ``notify`` calls every listener registered for the event, in the order
    they were added, before returning. A listener that raises stops the
    dispatch and the exception reaches the caller of ``notify``.
    """

    def __init__(self) -> None:
        self._observers: Dict[str, List[Listener]] = {}

    def add_observer(self, event: str, listener: Listener) -> None:
        listeners = self._observers.setdefault(event, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_observer(self, event: str, listener: Listener) -> bool:
        """Unsubscribe *listener*. Returns False if it was not registered."""
        listeners = self._observers.get(event)
        if not listeners or listener not in listeners:
            return False
        listeners.remove(listener)
        if not listeners:
            del self._observers[event]
        return True

    def observers(self, event: str) -> list[Listener]:
        return list(self._observers.get(event, []))

    def clear_observers(self) -> None:
        self._observers.clear()

    def notify(self, event: str, *args: Any) -> None:
        listeners = self.observers(event)
        logger.debug(f"notify {event} -> {len(listeners)} listener(s)")
        for listener in listeners:
            listener(*args)
