"""Callback registry for controller notifications."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")


class EventBus:
    """Delivers published events to callbacks registered for their type.

    Callbacks registered for ``object`` receive every event. A failing
    callback is logged and does not stop delivery to the others.
    """

    def __init__(self) -> None:
        self._subscribers: defaultdict[type, list[Callable[[Any], None]]] = defaultdict(list)

    def subscribe(self, event_type: type[E], callback: Callable[[E], None]) -> Callable[[], None]:
        """Register ``callback`` for ``event_type``.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers[event_type].append(callback)

        def unsubscribe() -> None:
            callbacks = self._subscribers.get(event_type, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def publish(self, event: object) -> None:
        for event_type in type(event).__mro__:
            for callback in list(self._subscribers.get(event_type, ())):
                try:
                    callback(event)
                except Exception:
                    logger.exception(
                        "Listener %r failed handling %s", callback, type(event).__name__
                    )
