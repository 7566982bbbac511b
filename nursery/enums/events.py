from enum import Enum


class EventTopic(str, Enum):
    """Event bus topics, one per event payload type."""

    PLANT = "plant"
    STOCK = "stock"
    ORDER = "order"


class PlantEventKind(str, Enum):
    MATURED = "matured"
    WILTED = "wilted"
    DIED = "died"


class StockEventKind(str, Enum):
    RESERVED = "reserved"
    RELEASED = "released"
    SOLD = "sold"
    LOW = "low"
    ADDED = "added"


class OrderEventKind(str, Enum):
    CREATED = "created"
    ASSIGNED = "assigned"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderStatus(str, Enum):
    """Processing status of a customer order."""

    NEW = "new"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
