"""Application services: greenhouse, stock, sales, staff and the command log."""

from nursery.services.application.action_log import ActionLog
from nursery.services.application.command_factory import morning_routine, night_routine, restock, urgent_care
from nursery.services.application.commands import (
    Command,
    FertilizeCommand,
    MacroCommand,
    PlantCareCommand,
    RestockCommand,
    SprayCommand,
    WaterCommand,
)
from nursery.services.application.greenhouse import Greenhouse
from nursery.services.application.inventory_service import InventoryService
from nursery.services.application.nursery_hub import NurseryHub
from nursery.services.application.sales_service import SalesService
from nursery.services.application.service_subject import NurseryObserver, ServiceSubject
from nursery.services.application.staff_service import StaffMember, StaffService

__all__ = [
    "ActionLog",
    "Command",
    "PlantCareCommand",
    "WaterCommand",
    "FertilizeCommand",
    "SprayCommand",
    "RestockCommand",
    "MacroCommand",
    "restock",
    "morning_routine",
    "night_routine",
    "urgent_care",
    "Greenhouse",
    "InventoryService",
    "NurseryHub",
    "SalesService",
    "ServiceSubject",
    "NurseryObserver",
    "StaffService",
    "StaffMember",
]
