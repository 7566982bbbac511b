"""
Shared test fixtures for the nursery test suite.

Provides:
- A controllable clock and season so plant age is deterministic
- Species records for every biome plus a catalogue/registry seeded with them
- A greenhouse wired to an inventory service
- An action log writing its audit trail under tmp_path

Usage:
    def test_example(greenhouse, clock):
        ids = greenhouse.receive_shipment("DES-1", 3)
        clock.advance_days(5)
        greenhouse.tick_all()
"""

from __future__ import annotations

import logging

import pytest

from infrastructure.logging.audit import AuditLogger
from nursery.constants import DEFAULT_SECONDS_PER_SIM_DAY
from nursery.domain.plant_kits import kit_for
from nursery.domain.plant_registry import PlantRegistry
from nursery.domain.species import SpeciesRecord
from nursery.domain.species_catalog import SpeciesCatalog
from nursery.enums.growth import Biome, Season
from nursery.services.application.action_log import ActionLog
from nursery.services.application.greenhouse import Greenhouse
from nursery.services.application.inventory_service import InventoryService

# ---------------------------------------------------------------------------
# Logging: keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("nursery").setLevel(logging.WARNING)


class FakeClock:
    """Manually advanced epoch-seconds clock."""

    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def advance_days(self, days: float) -> None:
        self.now += days * DEFAULT_SECONDS_PER_SIM_DAY


class FakeSeason:
    def __init__(self, season: Season = Season.SPRING) -> None:
        self.season = season

    def __call__(self) -> Season:
        return self.season


# ========================== Time Fixtures ==============================


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def season():
    return FakeSeason(Season.SPRING)


@pytest.fixture()
def plant_kwargs(clock, season):
    return {"clock": clock, "season_provider": season, "seconds_per_sim_day": DEFAULT_SECONDS_PER_SIM_DAY}


# ========================== Species Fixtures ==============================


@pytest.fixture()
def desert_species():
    return SpeciesRecord("DES-1", "Aloe", Biome.DESERT, 100, 0.5, 1.0, 1.0, Season.SPRING)


@pytest.fixture()
def tropical_species():
    return SpeciesRecord("TRO-1", "Monstera", Biome.TROPICAL, 300, 1.0, 1.0, 1.0, Season.SUMMER)


@pytest.fixture()
def indoor_species():
    return SpeciesRecord("IND-1", "Pothos", Biome.INDOOR, 150, 1.0, 1.0, 1.0, Season.SPRING)


@pytest.fixture()
def mediterranean_species():
    return SpeciesRecord("MED-1", "Rosemary", Biome.MEDITERRANEAN, 80, 0.5, 0.5, 1.0, Season.SPRING)


@pytest.fixture()
def wetland_species():
    return SpeciesRecord("WET-1", "Water Lily", Biome.WETLAND, 200, 1.5, 1.0, 1.5, Season.WINTER)


@pytest.fixture()
def all_species(desert_species, tropical_species, indoor_species, mediterranean_species, wetland_species):
    return [desert_species, tropical_species, indoor_species, mediterranean_species, wetland_species]


@pytest.fixture()
def catalog(all_species):
    catalog = SpeciesCatalog()
    for record in all_species:
        catalog.add(record)
    return catalog


@pytest.fixture()
def registry(all_species, plant_kwargs):
    registry = PlantRegistry(**plant_kwargs)
    for record in all_species:
        registry.register_species(record)
    return registry


@pytest.fixture()
def make_plant(plant_kwargs):
    """Factory for a standalone plant of a species using its biome kit."""

    def _make(species, plant_id="P#1", colour="Red"):
        return kit_for(species.biome).create_plant(plant_id, colour, species, **plant_kwargs)

    return _make


# ========================== Service Fixtures ==============================


@pytest.fixture()
def greenhouse(registry):
    return Greenhouse(registry)


@pytest.fixture()
def inventory():
    return InventoryService(low_stock_threshold=0)


@pytest.fixture()
def wired_greenhouse(greenhouse, inventory):
    """Greenhouse with the inventory service attached as an observer."""
    greenhouse.attach(inventory)
    return greenhouse


@pytest.fixture()
def audit_logger(tmp_path):
    logger = AuditLogger(str(tmp_path / "logs" / "commands.log"))
    yield logger
    logger.close()


@pytest.fixture()
def action_log(audit_logger):
    return ActionLog(audit_logger)
