"""
Enums Module
============

This module provides enumeration types for the nursery simulation.
Enums ensure type safety and consistency across the codebase.
"""

from nursery.enums.common import CareAction, InventoryStatus, StaffRole
from nursery.enums.events import (
    EventTopic,
    OrderEventKind,
    OrderStatus,
    PlantEventKind,
    StockEventKind,
)
from nursery.enums.growth import Biome, PlantStage, Season

__all__ = [
    # Growth enums
    "Biome",
    "PlantStage",
    "Season",
    # Event enums
    "EventTopic",
    "PlantEventKind",
    "StockEventKind",
    "OrderEventKind",
    "OrderStatus",
    # Common enums
    "CareAction",
    "InventoryStatus",
    "StaffRole",
]
