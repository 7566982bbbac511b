"""Ready-made commands for restocking and the daily care routines."""

from __future__ import annotations

import logging
from typing import Iterable

from nursery.constants import SYSTEM_USER_ID
from nursery.domain.plant_states import WILTING
from nursery.services.application.commands import (
    Command,
    FertilizeCommand,
    MacroCommand,
    RestockCommand,
    SprayCommand,
    WaterCommand,
)
from nursery.services.application.greenhouse import Greenhouse

logger = logging.getLogger(__name__)


def restock(greenhouse: Greenhouse, skus: Iterable[str] | str, quantity: int, user_id: str = SYSTEM_USER_ID) -> Command | None:
    """
    Build a restock for one or more SKUs.

    A single SKU gives a RestockCommand; several give an undoable
    "Batch Restock" macro. Returns None for an empty SKU list.
    """
    sku_list = [skus] if isinstance(skus, str) else list(skus)
    if not sku_list:
        return None
    if len(sku_list) == 1:
        return RestockCommand(greenhouse, sku_list[0], quantity, user_id)
    return MacroCommand(
        "Batch Restock",
        [RestockCommand(greenhouse, sku, quantity, user_id) for sku in sku_list],
        user_id,
        undoable=True,
    )


def morning_routine(greenhouse: Greenhouse, user_id: str = SYSTEM_USER_ID) -> MacroCommand:
    return MacroCommand(
        "Morning Routine",
        [WaterCommand(greenhouse, user_id=user_id), FertilizeCommand(greenhouse, user_id=user_id)],
        user_id,
    )


def night_routine(greenhouse: Greenhouse, user_id: str = SYSTEM_USER_ID) -> MacroCommand:
    return MacroCommand(
        "Night Routine",
        [WaterCommand(greenhouse, user_id=user_id), SprayCommand(greenhouse, user_id=user_id)],
        user_id,
    )


def urgent_care(greenhouse: Greenhouse, user_id: str = SYSTEM_USER_ID) -> MacroCommand | None:
    """Three rounds of fertilizer, then water and spray, for every wilting plant. None if nothing is wilting."""
    # fixed list: a plant that recovers partway through still gets every round
    wilting = list(greenhouse.iterate_by_state(WILTING))
    if not wilting:
        logger.info("No wilting plants need urgent care")
        return None
    commands: list[Command] = [FertilizeCommand(greenhouse, wilting, user_id) for _ in range(3)]
    commands.append(WaterCommand(greenhouse, wilting, user_id))
    commands.append(SprayCommand(greenhouse, wilting, user_id))
    return MacroCommand("Urgent Care", commands, user_id)
