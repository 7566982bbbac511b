"""
Lightweight EventBus used by the greenhouse, inventory and sales subjects.

Key invariants (enforced by call sites + tests):
  - Event topics come from EventTopic in nursery.enums.events.
  - Payloads are the pydantic models in nursery.schemas.events, handed to
    every subscriber as the same object (order events are per-notification
    copies of the stored order).
  - Delivery is synchronous and follows registration order.
  - A failing subscriber is logged and never blocks later subscribers.
"""

import logging
import threading
from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Dict, Hashable, Iterable

from nursery.enums.events import EventTopic

logger = logging.getLogger(__name__)


class EventBus:
    """
    Handles event-driven communication between a subject and its observers.

    Each subject owns its own bus; subscribers registered after an event has
    been published never see that event.
    """

    def __init__(self) -> None:
        self.subscribers: Dict[Hashable, list[Callable[[Any], None]]] = defaultdict(list)
        self.lock = threading.Lock()
        self._published = 0
        self._failed_deliveries = 0
        self._failures_by_event: Dict[str, int] = defaultdict(int)

    def subscribe(self, event_name: EventTopic | str, callback: Callable[[Any], None]) -> Callable[[], None]:
        """
        Subscribes a callback function to an event.

        Args:
            event_name: The enum topic (preferred) or raw string.
            callback: Function to call when the event occurs.

        Returns:
            A callable that removes the subscription again.
        """
        name = event_name.value if isinstance(event_name, Enum) else event_name
        with self.lock:
            self.subscribers[name].append(callback)

        def unsubscribe() -> None:
            with self.lock:
                callbacks = self.subscribers.get(name, [])
                try:
                    callbacks.remove(callback)
                except ValueError:
                    return

        return unsubscribe

    def publish(self, event_name: EventTopic | str, data: Any | None = None) -> int:
        """
        Publishes an event, calling all subscribed callback functions in order.

        Args:
            event_name: The enum topic (preferred) or raw string.
            data: Payload object handed to every subscriber unchanged.

        Returns:
            Number of subscribers that handled the event without raising.
        """
        name = event_name.value if isinstance(event_name, Enum) else event_name

        with self.lock:
            callbacks: Iterable[Callable[[Any], None]] = list(self.subscribers.get(name, []))
            self._published += 1

        delivered = 0
        for callback in callbacks:
            try:
                callback(data)
                delivered += 1
            except Exception as exc:
                self._record_failure(name)
                logger.error("Error in callback for event %s: %s", name, exc, exc_info=True)
        return delivered

    def _record_failure(self, event_name: str) -> None:
        with self.lock:
            self._failed_deliveries += 1
            self._failures_by_event[event_name] += 1

    def listener(self, event_name: EventTopic | str) -> Callable[[Callable[[Any], None]], Callable[[Any], None]]:
        """
        Decorator for subscribing a function to an event at definition time.

        Args:
            event_name: The enum topic (preferred) or raw string.
        """

        def decorator(func: Callable[[Any], None]) -> Callable[[Any], None]:
            self.subscribe(event_name, func)
            return func

        return decorator

    def subscriber_count(self, event_name: EventTopic | str) -> int:
        name = event_name.value if isinstance(event_name, Enum) else event_name
        with self.lock:
            return len(self.subscribers.get(name, []))

    def get_metrics(self) -> Dict[str, Any]:
        """Return lightweight metrics for logging and diagnostics."""
        with self.lock:
            return {
                "published_events": self._published,
                "failed_deliveries": self._failed_deliveries,
                "failures_by_event": dict(self._failures_by_event),
                "subscribers": sum(len(values) for values in self.subscribers.values()),
            }
