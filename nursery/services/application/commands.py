"""
Staff commands
==============

Commands are queued on the ActionLog and executed against the greenhouse.
Each carries the issuing user ID, an action label and an undoable flag.

- Care commands (Water, Fertilize, Spray) apply one care action to a set of
  plants through ``Greenhouse.apply_care`` and remember the previous levels.
- RestockCommand clones new stock and remembers exactly which IDs it added.
- MacroCommand runs sub-commands in order and rolls back on failure.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from nursery.constants import SYSTEM_USER_ID
from nursery.domain.exceptions import CommandError, NotFoundError, ValidationError
from nursery.domain.plant import Plant
from nursery.domain.plant_states import PlantState
from nursery.enums.common import CareAction
from nursery.services.application.greenhouse import Greenhouse

logger = logging.getLogger(__name__)


class Command(ABC):
    action = "Command"

    def __init__(self, user_id: str = SYSTEM_USER_ID, undoable: bool = False) -> None:
        self.user_id = user_id
        self.undoable = undoable

    @abstractmethod
    def execute(self) -> None:
        ...

    def undo(self) -> None:
        """Reverse ``execute``. The default is a no-op."""
        return None

    @abstractmethod
    def description(self) -> str:
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} user={self.user_id!r} {self.description()!r}>"


# ==================== Care ====================


class PlantCareCommand(Command):
    """Apply one care action to every targeted plant."""

    care_action: CareAction

    def __init__(
        self,
        greenhouse: Greenhouse,
        plants: Iterable[Plant] | None = None,
        user_id: str = SYSTEM_USER_ID,
        undoable: bool = False,
    ) -> None:
        super().__init__(user_id, undoable)
        self.greenhouse = greenhouse
        # None targets every live plant at execute time
        self.plants = plants
        self._previous: list[tuple[Plant, int, int, int, PlantState]] = []

    def targets(self) -> list[Plant]:
        plants = self.plants if self.plants is not None else self.greenhouse.iterate()
        return [plant for plant in plants if plant is not None]

    def execute(self) -> None:
        self._previous = []
        for plant in self.targets():
            if plant.is_dead():
                continue
            self._previous.append((plant, plant.moisture, plant.health, plant.insecticide, plant.state))
            self.greenhouse.apply_care(plant, self.care_action)
        logger.debug("%s applied to %d plants", self.action, len(self._previous))

    def undo(self) -> None:
        """Restore the levels and state each living plant had before execute.

        The greenhouse republishes the lifecycle event of a restored
        Mature or Wilting state so inventory follows the rollback.
        """
        for plant, moisture, health, insecticide, state in reversed(self._previous):
            if plant.is_dead():
                logger.info("Skipping undo of %s on dead plant %s", self.action, plant.plant_id)
                continue
            self.greenhouse.restore_plant(plant, moisture, health, insecticide, state)
        self._previous = []

    @property
    def affected(self) -> int:
        return len(self._previous)

    def description(self) -> str:
        if self.plants is None:
            return f"{self.action} all plants"
        return f"{self.action} selected plants"


class WaterCommand(PlantCareCommand):
    action = "Water"
    care_action = CareAction.WATER


class FertilizeCommand(PlantCareCommand):
    action = "Fertilize"
    care_action = CareAction.FERTILIZE


class SprayCommand(PlantCareCommand):
    action = "Spray Insecticide"
    care_action = CareAction.SPRAY


# ==================== Restock ====================


class RestockCommand(Command):
    action = "Restock"

    def __init__(
        self,
        greenhouse: Greenhouse,
        sku: str,
        quantity: int,
        user_id: str = SYSTEM_USER_ID,
        undoable: bool = True,
    ) -> None:
        super().__init__(user_id, undoable)
        self.greenhouse = greenhouse
        self.sku = sku
        self.quantity = quantity
        self.added_ids: list[str] = []

    def execute(self) -> None:
        if self.quantity <= 0:
            raise ValidationError(
                f"Restock quantity must be positive, got {self.quantity}",
                detail={"sku": self.sku},
            )
        if not self.greenhouse.registry.has(self.sku):
            raise NotFoundError(f"No prototype registered for SKU {self.sku}", detail={"sku": self.sku})

        before = self.greenhouse.plant_ids_for_sku(self.sku)
        self.greenhouse.receive_shipment(self.sku, self.quantity)
        after = self.greenhouse.plant_ids_for_sku(self.sku)
        self.added_ids = sorted(after - before)
        if not self.added_ids:
            raise CommandError(f"Restock of {self.sku} added no plants", detail={"sku": self.sku})
        logger.info("Restocked %s with %d plants", self.sku, len(self.added_ids))

    def undo(self) -> None:
        if not self.added_ids:
            raise CommandError(f"Nothing to undo for restock of {self.sku}")
        for plant_id in self.added_ids:
            self.greenhouse.remove_plant(plant_id)
        logger.info("Undid restock of %s (%d plants removed)", self.sku, len(self.added_ids))
        self.added_ids = []

    def description(self) -> str:
        return f"Restock {self.quantity} x {self.sku}"


# ==================== Composite ====================


class MacroCommand(Command):
    action = "Macro"

    def __init__(
        self,
        name: str,
        commands: Iterable[Command] | None = None,
        user_id: str = SYSTEM_USER_ID,
        undoable: bool = False,
    ) -> None:
        super().__init__(user_id, undoable)
        self.name = name
        self.commands: list[Command] = [cmd for cmd in (commands or []) if cmd is not None]
        self._executed: list[Command] = []

    def add(self, command: Command) -> None:
        if command is not None:
            self.commands.append(command)

    def execute(self) -> None:
        """Run sub-commands in order; on failure undo the ones already run, newest first, then re-raise."""
        self._executed = []
        for command in self.commands:
            try:
                command.execute()
            except Exception:
                logger.warning("%s failed at %r, rolling back %d commands", self.name, command, len(self._executed))
                self._rollback()
                raise
            self._executed.append(command)

    def _rollback(self) -> None:
        for command in reversed(self._executed):
            try:
                command.undo()
            except Exception as exc:
                logger.error("Rollback of %r failed: %s", command, exc, exc_info=True)
        self._executed = []

    def undo(self) -> None:
        for command in reversed(self._executed):
            command.undo()
        self._executed = []

    def description(self) -> str:
        return f"{self.name} ({len(self.commands)} commands)"

    def __len__(self) -> int:
        return len(self.commands)
