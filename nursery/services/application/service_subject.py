"""
Observer fan-out for nursery subjects.

A subject (Greenhouse, InventoryService, SalesService) owns an EventBus and
routes each event to the topic matching its type. Observers are plain
objects with any of ``on_plant_event``, ``on_stock_event`` and
``on_order_event``; attaching subscribes whichever handlers they define, in
attach order.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from nursery.enums.events import EventTopic
from nursery.schemas.events import OrderEvent, PlantEvent, StockEvent
from nursery.utils.event_bus import EventBus

logger = logging.getLogger(__name__)

_HANDLERS: tuple[tuple[EventTopic, str], ...] = (
    (EventTopic.PLANT, "on_plant_event"),
    (EventTopic.STOCK, "on_stock_event"),
    (EventTopic.ORDER, "on_order_event"),
)


def topic_for(event: Any) -> EventTopic:
    if isinstance(event, PlantEvent):
        return EventTopic.PLANT
    if isinstance(event, StockEvent):
        return EventTopic.STOCK
    if isinstance(event, OrderEvent):
        return EventTopic.ORDER
    raise TypeError(f"Unsupported event type: {type(event).__name__}")


class NurseryObserver:
    """Base observer with no-op handlers; override the ones you need."""

    def on_plant_event(self, event: PlantEvent) -> None:
        pass

    def on_stock_event(self, event: StockEvent) -> None:
        pass

    def on_order_event(self, event: OrderEvent) -> None:
        pass


class ServiceSubject:
    def __init__(self, event_bus: EventBus | None = None) -> None:
        self.event_bus = event_bus or EventBus()
        self._observers: dict[int, tuple[Any, list[Callable[[], None]]]] = {}

    def attach(self, observer: Any) -> bool:
        """Subscribe an observer's handlers. Returns False for None or an already attached observer."""
        if observer is None:
            return False
        key = id(observer)
        if key in self._observers:
            return False
        unsubscribes = []
        for topic, attr in _HANDLERS:
            handler = getattr(observer, attr, None)
            if callable(handler):
                unsubscribes.append(self.event_bus.subscribe(topic, handler))
        self._observers[key] = (observer, unsubscribes)
        logger.debug("%s attached observer %s", type(self).__name__, type(observer).__name__)
        return True

    def detach(self, observer: Any) -> bool:
        entry = self._observers.pop(id(observer), None)
        if entry is None:
            return False
        for unsubscribe in entry[1]:
            unsubscribe()
        return True

    def observers(self) -> list[Any]:
        return [observer for observer, _ in self._observers.values()]

    def notify(self, event: PlantEvent | StockEvent | OrderEvent) -> int:
        """Deliver an event to every handler for its type. Returns the number of successful deliveries."""
        return self.event_bus.publish(topic_for(event), event)
