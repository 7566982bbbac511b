"""Pydantic payloads exchanged over the nursery event bus."""

from nursery.schemas.events import OrderEvent, OrderLine, PlantEvent, Receipt, StockEvent

__all__ = ["OrderEvent", "OrderLine", "PlantEvent", "Receipt", "StockEvent"]
