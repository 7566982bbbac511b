"""
Plant Lifecycle States
======================

Seedling -> Growing -> Matured <-> Wilting, with Dead reachable from every
stage. Each state is a stateless singleton; per-plant data lives on the Plant.

Every ``check_change`` call first consumes resources and adjusts health,
then evaluates transitions in strict priority order: Dead, then Wilting or
recovery, then forward progression.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nursery.constants import LifecycleThresholds
from nursery.enums.growth import PlantStage

if TYPE_CHECKING:
    from nursery.domain.plant import Plant

logger = logging.getLogger(__name__)


def season_factor(plant: "Plant") -> float:
    """0.8 when the plant is in its thriving season, 1.2 otherwise."""
    species = plant.species
    if species is not None and species.thrives_in(plant.current_season()):
        return LifecycleThresholds.IN_SEASON_FACTOR
    return LifecycleThresholds.OFF_SEASON_FACTOR


def _growth_rate(plant: "Plant") -> float:
    return plant.species.growth_rate if plant.species is not None else 1.0


class PlantState:
    """Base lifecycle state. One instance per subclass."""

    stage: PlantStage
    _instances: dict = {}

    def __new__(cls):
        instance = PlantState._instances.get(cls)
        if instance is None:
            instance = super().__new__(cls)
            PlantState._instances[cls] = instance
        return instance

    @property
    def name(self) -> str:
        return self.stage.value

    def is_mature(self) -> bool:
        return False

    def is_dead(self) -> bool:
        return False

    def check_change(self, plant: "Plant") -> None:
        raise NotImplementedError

    def _transition(self, plant: "Plant", target: "PlantState") -> None:
        logger.debug("Plant %s: %s -> %s", plant.plant_id, self.name, target.name)
        plant.set_state(target)

    def __repr__(self) -> str:
        return f"<PlantState {self.name}>"

    def __str__(self) -> str:
        return self.name


class SeedlingState(PlantState):
    stage = PlantStage.SEEDLING

    def check_change(self, plant: "Plant") -> None:
        plant.add_water(-1)
        plant.add_insecticide(-1)

        if plant.moisture >= 40 and plant.insecticide >= 40:
            plant.add_health(2)
        else:
            if plant.moisture < 30:
                plant.add_health(-3)
            if plant.insecticide < 30:
                plant.add_health(-2)

        if plant.health <= 0:
            self._transition(plant, DEAD)
            return

        threshold = LifecycleThresholds.SEEDLING_AGE_FACTOR * _growth_rate(plant) * season_factor(plant)
        if plant.age_days > threshold and plant.health > 40:
            self._transition(plant, GROWING)


class GrowingState(PlantState):
    stage = PlantStage.GROWING

    def check_change(self, plant: "Plant") -> None:
        plant.add_water(-2)
        plant.add_insecticide(-1)

        if plant.moisture >= 40 and plant.insecticide >= 40:
            plant.add_health(3)
        else:
            if plant.moisture < 25:
                plant.add_health(-4)
            if plant.insecticide < 25:
                plant.add_health(-3)

        if plant.health <= 0:
            self._transition(plant, DEAD)
        elif plant.health <= 20:
            self._transition(plant, WILTING)
        else:
            threshold = LifecycleThresholds.GROWING_AGE_FACTOR * _growth_rate(plant) * season_factor(plant)
            if plant.age_days > threshold and plant.health > 50:
                self._transition(plant, MATURE)


class MatureState(PlantState):
    """Terminal growth stage with the highest resource demand."""

    stage = PlantStage.MATURE

    def is_mature(self) -> bool:
        return True

    def check_change(self, plant: "Plant") -> None:
        plant.add_water(-5)
        plant.add_insecticide(-5)

        if plant.moisture >= 55 and plant.insecticide >= 55:
            plant.add_health(4)
        else:
            if plant.moisture < 30:
                plant.add_health(-5)
            if plant.insecticide < 30:
                plant.add_health(-4)

        if plant.health <= 0:
            self._transition(plant, DEAD)
        elif plant.health <= 50:
            self._transition(plant, WILTING)


class WiltingState(PlantState):
    stage = PlantStage.WILTING

    def check_change(self, plant: "Plant") -> None:
        plant.add_water(-3)
        plant.add_insecticide(-3)

        if plant.moisture > 60 and plant.insecticide > 60:
            plant.add_health(5)
        else:
            if plant.moisture < 40:
                plant.add_health(-3)
            if plant.insecticide < 40:
                plant.add_health(-3)

        # Recovery wins over death
        if plant.health > 60 and plant.moisture > 40 and plant.insecticide > 40:
            self._transition(plant, MATURE)
        elif plant.health <= 0:
            self._transition(plant, DEAD)


class DeadState(PlantState):
    """Terminal. No resource changes, no transitions."""

    stage = PlantStage.DEAD

    def is_dead(self) -> bool:
        return True

    def check_change(self, plant: "Plant") -> None:
        return None


SEEDLING = SeedlingState()
GROWING = GrowingState()
MATURE = MatureState()
WILTING = WiltingState()
DEAD = DeadState()

_BY_STAGE = {state.stage: state for state in (SEEDLING, GROWING, MATURE, WILTING, DEAD)}


def state_for(stage: PlantStage | str) -> PlantState:
    """Look up the singleton for a stage or stage name."""
    return _BY_STAGE[PlantStage(stage)]
