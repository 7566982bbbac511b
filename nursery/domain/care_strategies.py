"""
Care Strategies
===============

Biome-specific resource-mutation rules for water, fertilize and insecticide
care actions.

Each action computes a delta as a fixed base plus a contribution scaled by
the species' sensitivity, tolerance or growth rate. Water and insecticide
apply a health penalty when the projected (pre-clamp) level would exceed the
maximum, then apply the delta through the plant's clamped adder regardless.
Fertilize only raises health, and only while health is below the biome's
threshold.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nursery.constants import CarePenalties, ResourceBounds
from nursery.domain.species import SpeciesRecord
from nursery.enums.common import CareAction
from nursery.enums.growth import Biome

if TYPE_CHECKING:
    from nursery.domain.plant import Plant

logger = logging.getLogger(__name__)


class CareStrategy:
    """Table-driven care rules; subclasses only supply their biome's numbers."""

    biome: Biome
    water_base: int
    water_scale: float
    fertilize_threshold: int = 60
    fertilize_base: int
    fertilize_scale: float
    insecticide_base: int
    insecticide_scale: float

    # ==================== Deltas ====================

    def water_amount(self, species: SpeciesRecord) -> int:
        return int(self.water_base + species.water_sensitivity * self.water_scale)

    def fertilize_boost(self, species: SpeciesRecord) -> int:
        return self.fertilize_base + int(species.growth_rate * self.fertilize_scale)

    def insecticide_amount(self, species: SpeciesRecord) -> int:
        return self.insecticide_base + int(species.insecticide_tolerance * self.insecticide_scale)

    # ==================== Care Actions ====================

    def water(self, plant: "Plant") -> None:
        species = plant.species
        if species is None:
            return
        add = self.water_amount(species)
        if plant.moisture + add > ResourceBounds.MAX:
            plant.add_health(-CarePenalties.OVERWATER)
        plant.add_water(add)

    def fertilize(self, plant: "Plant") -> None:
        species = plant.species
        if species is None:
            return
        if plant.health < self.fertilize_threshold:
            plant.add_health(self.fertilize_boost(species))

    def spray_insecticide(self, plant: "Plant") -> None:
        species = plant.species
        if species is None:
            return
        add = self.insecticide_amount(species)
        if plant.insecticide + add > ResourceBounds.MAX:
            plant.add_health(-CarePenalties.OVERSPRAY)
        plant.add_insecticide(add)

    def apply(self, plant: "Plant", action: CareAction) -> None:
        """Dispatch a CareAction to the matching method."""
        if action == CareAction.WATER:
            self.water(plant)
        elif action == CareAction.FERTILIZE:
            self.fertilize(plant)
        elif action == CareAction.SPRAY:
            self.spray_insecticide(plant)
        else:
            raise ValueError(f"Unknown care action: {action}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DesertStrategy(CareStrategy):
    """Drought-tolerant species: the less water-sensitive, the more water each round."""

    biome = Biome.DESERT
    water_base = 10
    water_scale = 10.0
    fertilize_base = 3
    fertilize_scale = 4.0
    insecticide_base = 12
    insecticide_scale = 8.0

    def water_amount(self, species: SpeciesRecord) -> int:
        return int(self.water_base + (1.0 - species.water_sensitivity) * self.water_scale)


class TropicalStrategy(CareStrategy):
    biome = Biome.TROPICAL
    water_base = 20
    water_scale = 10.0
    fertilize_base = 8
    fertilize_scale = 5.0
    insecticide_base = 20
    insecticide_scale = 10.0


class IndoorStrategy(CareStrategy):
    biome = Biome.INDOOR
    water_base = 18
    water_scale = 7.0
    fertilize_base = 5
    fertilize_scale = 4.0
    insecticide_base = 12
    insecticide_scale = 6.0


class MediterraneanStrategy(CareStrategy):
    biome = Biome.MEDITERRANEAN
    water_base = 15
    water_scale = 8.0
    fertilize_base = 6
    fertilize_scale = 4.0
    insecticide_base = 16
    insecticide_scale = 8.0


class WetlandStrategy(CareStrategy):
    biome = Biome.WETLAND
    water_base = 25
    water_scale = 12.0
    fertilize_base = 10
    fertilize_scale = 6.0
    insecticide_base = 25
    insecticide_scale = 10.0


# Strategies are stateless, one shared instance per biome
STRATEGIES: dict[Biome, CareStrategy] = {
    Biome.DESERT: DesertStrategy(),
    Biome.TROPICAL: TropicalStrategy(),
    Biome.INDOOR: IndoorStrategy(),
    Biome.MEDITERRANEAN: MediterraneanStrategy(),
    Biome.WETLAND: WetlandStrategy(),
}


def strategy_for(biome: Biome | str | None) -> CareStrategy | None:
    """Return the shared strategy for a biome tag, or None when the biome is unknown."""
    resolved = Biome.parse(biome)
    if resolved is None:
        logger.warning("No care strategy for biome %r", biome)
        return None
    return STRATEGIES[resolved]
