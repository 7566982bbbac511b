"""
Default species catalogue.

One or more species per biome, with sensitivities chosen so each biome's
care strategy behaves distinctly.
"""

from __future__ import annotations

import logging

from nursery.domain.plant_registry import PlantRegistry
from nursery.domain.species import SpeciesRecord
from nursery.domain.species_catalog import SpeciesCatalog
from nursery.enums.growth import Biome, Season

logger = logging.getLogger(__name__)

DEFAULT_SPECIES: tuple[SpeciesRecord, ...] = (
    SpeciesRecord("SUCC-001", "Echeveria", Biome.DESERT, 120, 0.3, 1.2, 0.8, Season.SUMMER),
    SpeciesRecord("CACT-002", "Golden Barrel Cactus", Biome.DESERT, 150, 0.2, 1.5, 0.6, Season.SUMMER),
    SpeciesRecord("TROP-010", "Bird of Paradise", Biome.TROPICAL, 450, 1.4, 0.8, 1.2, Season.SUMMER),
    SpeciesRecord("TROP-011", "Monstera", Biome.TROPICAL, 380, 1.2, 1.0, 1.0, Season.SPRING),
    SpeciesRecord("IND-020", "Peace Lily", Biome.INDOOR, 220, 1.0, 1.0, 1.0, Season.SPRING),
    SpeciesRecord("IND-021", "Snake Plant", Biome.INDOOR, 180, 0.5, 1.3, 0.7, Season.AUTUMN),
    SpeciesRecord("HERB-023", "Rosemary", Biome.MEDITERRANEAN, 85, 0.6, 1.4, 0.9, Season.SPRING),
    SpeciesRecord("MED-031", "Lavender", Biome.MEDITERRANEAN, 95, 0.5, 1.2, 1.1, Season.SUMMER),
    SpeciesRecord("WET-040", "Water Lily", Biome.WETLAND, 260, 1.8, 0.9, 1.3, Season.SUMMER),
    SpeciesRecord("WET-041", "Papyrus", Biome.WETLAND, 210, 1.6, 1.1, 1.2, Season.WINTER),
)


def seed_catalog(catalog: SpeciesCatalog, registry: PlantRegistry, species=DEFAULT_SPECIES) -> int:
    """Add every species to the catalogue and register a prototype for it.

    Returns:
        Number of species seeded
    """
    count = 0
    for record in species:
        catalog.add(record)
        registry.register_species(record)
        count += 1
    logger.info("Seeded %d species", count)
    return count
