"""
Greenhouse
==========

Owns every live Plant, generates plant IDs, drives the lifecycle tick and
emits Plant and Stock events. Events are published after the greenhouse lock
is released so observers may call back into any service.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict

from nursery.constants import COLOUR_PALETTE, PLANT_ID_SEPARATOR
from nursery.domain.plant import Plant
from nursery.domain.plant_iterators import PlantIterator, SkuIterator, StateIterator
from nursery.domain.plant_registry import PlantRegistry
from nursery.domain.plant_states import DEAD, MATURE, WILTING, PlantState
from nursery.enums.common import CareAction
from nursery.enums.events import PlantEventKind, StockEventKind
from nursery.schemas.events import PlantEvent, StockEvent
from nursery.services.application.service_subject import ServiceSubject
from nursery.utils.concurrency import synchronized
from nursery.utils.event_bus import EventBus

logger = logging.getLogger(__name__)

_TRANSITION_EVENTS = {
    MATURE: PlantEventKind.MATURED,
    WILTING: PlantEventKind.WILTED,
}


class Greenhouse(ServiceSubject):
    """
    Live plant population.

    Plants enter through ``receive_shipment`` (cloned from the registry's
    prototypes) or ``add_plant`` (seeding, no event). Dead plants are removed
    at the end of the tick that found them dead.
    """

    def __init__(
        self,
        registry: PlantRegistry,
        palette: tuple[str, ...] = COLOUR_PALETTE,
        event_bus: EventBus | None = None,
    ) -> None:
        super().__init__(event_bus)
        self.registry = registry
        self.palette = palette
        self._plants: dict[str, Plant] = {}
        self._sequence: dict[str, int] = defaultdict(int)
        self._colour_index = 0
        self._lock = threading.RLock()

    # ==================== Membership ====================

    @synchronized
    def add_plant(self, plant: Plant) -> bool:
        if plant is None or plant.plant_id in self._plants:
            return False
        self._plants[plant.plant_id] = plant
        return True

    @synchronized
    def remove_plant(self, plant_id: str) -> Plant | None:
        plant = self._plants.pop(plant_id, None)
        if plant is not None:
            logger.debug("Removed plant %s", plant_id)
        return plant

    @synchronized
    def get_plant(self, plant_id: str) -> Plant | None:
        return self._plants.get(plant_id)

    @synchronized
    def count_by_sku(self, sku: str) -> int:
        return sum(1 for plant in self._plants.values() if plant.sku == sku)

    @synchronized
    def plant_ids_for_sku(self, sku: str) -> set[str]:
        return {plant_id for plant_id, plant in self._plants.items() if plant.sku == sku}

    @synchronized
    def species_of(self, plant_id: str) -> str | None:
        plant = self._plants.get(plant_id)
        return plant.sku if plant else None

    def __len__(self) -> int:
        return len(self._plants)

    def __contains__(self, plant_id: object) -> bool:
        return plant_id in self._plants

    # ==================== Stock ====================

    def receive_shipment(self, sku: str, count: int) -> list[str]:
        """
        Clone ``count`` new plants of ``sku`` from its prototype.

        Args:
            sku: Species SKU with a registered prototype
            count: Number of plants to add

        Returns:
            IDs of the plants added. Empty when the SKU has no prototype or count <= 0.
        """
        if count <= 0:
            return []
        if not self.registry.has(sku):
            logger.warning("Cannot receive shipment: no prototype for SKU %s", sku)
            return []

        added: list[str] = []
        with self._lock:
            for _ in range(count):
                self._sequence[sku] += 1
                plant_id = f"{sku}{PLANT_ID_SEPARATOR}{self._sequence[sku]}"
                colour = self.palette[self._colour_index % len(self.palette)]
                self._colour_index += 1
                plant = self.registry.clone(sku, plant_id, colour)
                if plant is None:
                    break
                self._plants[plant_id] = plant
                added.append(plant_id)

        if added:
            logger.info("Received %d plants of %s", len(added), sku)
            self.notify(StockEvent(key=sku, kind=StockEventKind.ADDED, sku=sku, quantity=len(added)))
        return added

    # ==================== Lifecycle ====================

    def tick_all(self) -> list[PlantEvent]:
        """
        Run one lifecycle check on every live plant.

        Emits Matured/Wilted on a change into those states and Died for every
        plant found dead; dead plants are removed after the full pass.

        Returns:
            The events emitted, in emission order.
        """
        events: list[PlantEvent] = []
        with self._lock:
            snapshot = list(self._plants.values())
            doomed: list[str] = []
            for plant in snapshot:
                before = plant.state
                after = plant.check_state()
                event = self._transition_event(plant, before, after)
                if event is not None:
                    events.append(event)
                if after is DEAD:
                    events.append(self._plant_event(plant, PlantEventKind.DIED))
                    doomed.append(plant.plant_id)
            for plant_id in doomed:
                self._plants.pop(plant_id, None)

        if doomed:
            logger.info("Tick removed %d dead plants", len(doomed))
        for event in events:
            self.notify(event)
        return events

    def apply_care(self, plant: Plant, action: CareAction | str) -> PlantState:
        """
        Apply one care action, run the state check and report any transition.

        A plant that dies from the care is removed immediately. Dead plants
        are left untouched.
        """
        action = CareAction(action)
        events: list[PlantEvent] = []
        with self._lock:
            before = plant.state
            if before is DEAD:
                return before
            if plant.care is not None:
                plant.care.apply(plant, action)
            after = plant.check_state()
            event = self._transition_event(plant, before, after)
            if event is not None:
                events.append(event)
            if after is DEAD and before is not DEAD:
                events.append(self._plant_event(plant, PlantEventKind.DIED))
                self._plants.pop(plant.plant_id, None)

        for event in events:
            self.notify(event)
        return after

    def restore_plant(self, plant: Plant, moisture: int, health: int, insecticide: int, state: PlantState) -> None:
        """
        Put a living plant back to earlier resource levels and state.

        Returning to Mature or Wilting publishes Matured/Wilted so observers
        reverse what the undone transition told them. Dead plants are left
        untouched.
        """
        events: list[PlantEvent] = []
        with self._lock:
            before = plant.state
            if before is DEAD:
                return
            plant.add_water(moisture - plant.moisture)
            plant.add_insecticide(insecticide - plant.insecticide)
            plant.add_health(health - plant.health)
            plant.set_state(state)
            event = self._transition_event(plant, before, state)
            if event is not None:
                events.append(event)

        for event in events:
            self.notify(event)

    @staticmethod
    def _plant_event(plant: Plant, kind: PlantEventKind) -> PlantEvent:
        return PlantEvent(plant_id=plant.plant_id, sku=plant.sku or "", kind=kind)

    def _transition_event(self, plant: Plant, before: PlantState, after: PlantState) -> PlantEvent | None:
        if after is before:
            return None
        logger.info("Plant %s changed %s -> %s", plant.plant_id, before.name, after.name)
        kind = _TRANSITION_EVENTS.get(after)
        return self._plant_event(plant, kind) if kind else None

    # ==================== Iteration ====================

    @synchronized
    def iterate(self) -> PlantIterator:
        return PlantIterator(self._plants.values())

    @synchronized
    def iterate_by_state(self, state: PlantState) -> StateIterator:
        return StateIterator(self._plants.values(), state)

    @synchronized
    def iterate_by_sku(self, sku: str) -> SkuIterator:
        return SkuIterator(self._plants.values(), sku)
