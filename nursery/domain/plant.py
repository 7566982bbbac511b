"""
Plant - One grown or growing individual
=======================================

Holds the mutable resource levels of a single plant and delegates to its
shared SpeciesRecord (intrinsic data), its CareStrategy (biome-specific care)
and its PlantState (lifecycle transitions). Resource levels are integers
clamped to [0, 100] on every mutation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from nursery.constants import DEFAULT_SECONDS_PER_SIM_DAY, ResourceBounds
from nursery.domain.plant_states import DEAD, SEEDLING, PlantState
from nursery.domain.species import SpeciesRecord
from nursery.enums.growth import Season
from nursery.utils.seasons import current_season
from nursery.utils.time import elapsed_sim_days, epoch_seconds

if TYPE_CHECKING:
    from nursery.domain.care_strategies import CareStrategy
    from nursery.domain.plant_kits import Pot, SoilMix

logger = logging.getLogger(__name__)


def _clamp(value: int, low: int = ResourceBounds.MIN, high: int = ResourceBounds.MAX) -> int:
    return low if value < low else (high if value > high else value)


class Plant:
    """A single plant in the greenhouse."""

    def __init__(
        self,
        plant_id: str,
        colour: str,
        species: SpeciesRecord | None,
        care: "CareStrategy" | None = None,
        state: PlantState | None = None,
        *,
        pot: "Pot" | None = None,
        soil: "SoilMix" | None = None,
        clock: Callable[[], float] = epoch_seconds,
        season_provider: Callable[[], Season] = current_season,
        seconds_per_sim_day: float = DEFAULT_SECONDS_PER_SIM_DAY,
    ) -> None:
        self.plant_id = plant_id
        self.colour = colour
        self.species = species
        self.care = care
        self.state: PlantState = state or SEEDLING
        self.pot = pot
        self.soil = soil

        self.moisture = ResourceBounds.INITIAL_MOISTURE
        self.health = ResourceBounds.INITIAL_HEALTH
        self.insecticide = ResourceBounds.INITIAL_INSECTICIDE

        self._clock = clock
        self._season_provider = season_provider
        self.seconds_per_sim_day = seconds_per_sim_day
        self.created_at = clock()

    # -------------------------- Care --------------------------
    def water(self) -> None:
        """Water the plant using its care strategy."""
        if self.care:
            self.care.water(self)

    def fertilize(self) -> None:
        if self.care:
            self.care.fertilize(self)

    def spray_insecticide(self) -> None:
        if self.care:
            self.care.spray_insecticide(self)

    def check_state(self) -> PlantState:
        """Run the current state's transition rules once and return the resulting state."""
        self.state.check_change(self)
        return self.state

    # -------------------------- Mutators --------------------------
    def add_water(self, amount: int) -> None:
        self.moisture = _clamp(self.moisture + amount)

    def add_health(self, amount: int) -> None:
        """Adjust health; reaching 0 forces the Dead state whatever the current state is."""
        self.health = _clamp(self.health + amount)
        if self.health == 0 and self.state is not DEAD:
            logger.debug("Plant %s health reached 0 in state %s", self.plant_id, self.state.name)
            self.set_state(DEAD)

    def add_insecticide(self, amount: int) -> None:
        self.insecticide = _clamp(self.insecticide + amount)

    def set_state(self, state: PlantState) -> None:
        self.state = state

    # -------------------------- Accessors --------------------------
    @property
    def id(self) -> str:
        return self.plant_id

    @property
    def sku(self) -> str | None:
        return self.species.sku if self.species else None

    @property
    def name(self) -> str | None:
        return self.species.name if self.species else None

    @property
    def biome(self) -> str | None:
        return self.species.biome_tag if self.species else None

    @property
    def age_days(self) -> float:
        """Simulated age derived from elapsed real time."""
        return elapsed_sim_days(self.created_at, self._clock(), self.seconds_per_sim_day)

    def current_season(self) -> Season:
        return self._season_provider()

    def is_mature(self) -> bool:
        return self.state.is_mature()

    def is_dead(self) -> bool:
        return self.state is DEAD

    def cost(self) -> int:
        """Species base price plus pot and soil."""
        total = self.species.base_price if self.species else 0
        if self.pot:
            total += self.pot.cost
        if self.soil:
            total += self.soil.cost
        return total

    # -------------------------- Prototype --------------------------
    def clone(self, plant_id: str, colour: str) -> "Plant":
        """
        Copy this plant as a fresh seedling.

        The clone shares species, care strategy, pot and soil with the
        prototype but gets a new ID, colour, reset resources and age 0.
        """
        return Plant(
            plant_id,
            colour,
            self.species,
            self.care,
            SEEDLING,
            pot=self.pot,
            soil=self.soil,
            clock=self._clock,
            season_provider=self._season_provider,
            seconds_per_sim_day=self.seconds_per_sim_day,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "plant_id": self.plant_id,
            "sku": self.sku,
            "name": self.name,
            "biome": self.biome,
            "colour": self.colour,
            "state": self.state.name,
            "moisture": self.moisture,
            "health": self.health,
            "insecticide": self.insecticide,
            "age_days": round(self.age_days, 2),
            "cost": self.cost(),
        }

    def __repr__(self) -> str:
        return (
            f"Plant(id={self.plant_id!r}, sku={self.sku!r}, state={self.state.name}, "
            f"moisture={self.moisture}, health={self.health}, insecticide={self.insecticide})"
        )
