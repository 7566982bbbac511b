"""
Plant Kits
==========

Per-biome bundles of care strategy, pot and soil mix. A kit builds new
seedlings for species of its biome; pot and soil feed into ``Plant.cost()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from nursery.domain.care_strategies import STRATEGIES, CareStrategy
from nursery.domain.plant import Plant
from nursery.domain.plant_states import SEEDLING
from nursery.domain.species import SpeciesRecord
from nursery.enums.growth import Biome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pot:
    name: str
    cost: int


@dataclass(frozen=True)
class SoilMix:
    name: str
    cost: int


@dataclass(frozen=True)
class PlantKit:
    """Everything a new plant of one biome is potted with."""

    biome: Biome
    strategy: CareStrategy
    pot: Pot
    soil: SoilMix

    def create_plant(
        self,
        plant_id: str,
        colour: str,
        species: SpeciesRecord | None,
        **plant_kwargs: Any,
    ) -> Plant:
        """Build a Seedling with this kit's strategy, pot and soil.

        Args:
            plant_id: Identifier for the new plant
            colour: Colour tag
            species: Shared species record
            **plant_kwargs: Forwarded to Plant (clock, season_provider, seconds_per_sim_day)
        """
        return Plant(
            plant_id,
            colour,
            species,
            self.strategy,
            SEEDLING,
            pot=self.pot,
            soil=self.soil,
            **plant_kwargs,
        )


KITS: dict[Biome, PlantKit] = {
    Biome.DESERT: PlantKit(
        Biome.DESERT, STRATEGIES[Biome.DESERT], Pot("Terracotta", 90), SoilMix("Sandy", 35)
    ),
    Biome.TROPICAL: PlantKit(
        Biome.TROPICAL, STRATEGIES[Biome.TROPICAL], Pot("Glazed Ceramic", 400), SoilMix("Peat", 50)
    ),
    Biome.INDOOR: PlantKit(
        Biome.INDOOR, STRATEGIES[Biome.INDOOR], Pot("Ceramic", 200), SoilMix("Light Airy", 90)
    ),
    Biome.MEDITERRANEAN: PlantKit(
        Biome.MEDITERRANEAN,
        STRATEGIES[Biome.MEDITERRANEAN],
        Pot("Unglazed Clay", 70),
        SoilMix("Gritty Lime", 120),
    ),
    Biome.WETLAND: PlantKit(
        Biome.WETLAND, STRATEGIES[Biome.WETLAND], Pot("Aquatic Basket", 250), SoilMix("Aquatic", 80)
    ),
}


def kit_for(biome: Biome | str | None) -> PlantKit:
    """Return the kit for a biome tag, falling back to Indoor for unknown tags."""
    resolved = Biome.parse(biome)
    if resolved is None:
        logger.warning("Unknown biome %r, using Indoor kit", biome)
        resolved = Biome.INDOOR
    return KITS[resolved]
