"""
Common Enumerations
====================

Application-wide enums that don't fit in the growth or event categories.
"""

from enum import Enum


class InventoryStatus(str, Enum):
    """
    Sellable-stock status of a tracked plant.
    Used by: InventoryService, NurseryHub
    """

    AVAILABLE = "available"
    RESERVED = "reserved"
    SOLD = "sold"
    WILTED = "wilted"
    DEAD = "dead"

    def __str__(self) -> str:
        return self.value


class StaffRole(str, Enum):
    """Roles a staff member can hold."""

    SALES = "sales"
    CARE = "care"
    MANAGER = "manager"

    def __str__(self) -> str:
        return self.value


class CareAction(str, Enum):
    """Care actions a strategy knows how to apply."""

    WATER = "water"
    FERTILIZE = "fertilize"
    SPRAY = "spray"

    def __str__(self) -> str:
        return self.value
