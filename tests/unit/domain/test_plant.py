"""
Tests for Plant, plant kits and the prototype registry.
"""

from __future__ import annotations

import random

import pytest

from nursery.domain.plant import Plant
from nursery.domain.plant_kits import KITS, kit_for
from nursery.domain.plant_registry import PlantRegistry
from nursery.domain.plant_states import DEAD, GROWING, MATURE, SEEDLING
from nursery.enums.growth import Biome


class TestResources:
    def test_initial_levels(self, make_plant, desert_species):
        plant = make_plant(desert_species)
        assert (plant.moisture, plant.health, plant.insecticide) == (0, 100, 100)
        assert plant.state is SEEDLING

    def test_adders_clamp(self, make_plant, desert_species):
        plant = make_plant(desert_species)
        plant.add_water(250)
        plant.add_insecticide(-300)
        plant.add_health(40)
        assert (plant.moisture, plant.insecticide, plant.health) == (100, 0, 100)

    def test_health_zero_forces_dead_from_any_state(self, make_plant, desert_species):
        for state in (SEEDLING, GROWING, MATURE):
            plant = make_plant(desert_species)
            plant.set_state(state)
            plant.add_health(-150)
            assert plant.health == 0
            assert plant.state is DEAD

    def test_bounds_hold_for_random_care(self, make_plant, all_species):
        rng = random.Random(7)
        plants = [make_plant(species, f"P#{i}") for i, species in enumerate(all_species)]
        actions = ("water", "fertilize", "spray_insecticide", "check_state")
        for _ in range(500):
            plant = rng.choice(plants)
            getattr(plant, rng.choice(actions))()
            for p in plants:
                assert 0 <= p.moisture <= 100
                assert 0 <= p.health <= 100
                assert 0 <= p.insecticide <= 100


class TestAccessors:
    def test_species_passthrough(self, make_plant, tropical_species):
        plant = make_plant(tropical_species, "TRO-1#3", "Blue")
        assert plant.id == "TRO-1#3"
        assert plant.sku == "TRO-1"
        assert plant.name == "Monstera"
        assert plant.biome == "Tropical"
        assert plant.colour == "Blue"

    def test_age_in_sim_days(self, make_plant, desert_species, clock):
        plant = make_plant(desert_species)
        assert plant.age_days == 0
        clock.advance(25)
        assert plant.age_days == pytest.approx(2.5)

    def test_cost_includes_pot_and_soil(self, make_plant, desert_species, tropical_species):
        assert make_plant(desert_species).cost() == 100 + 90 + 35
        assert make_plant(tropical_species).cost() == 300 + 400 + 50

    def test_plant_without_species(self, clock, season):
        plant = Plant("X#1", "Red", None, clock=clock, season_provider=season)
        assert plant.sku is None
        assert plant.cost() == 0
        plant.water()
        assert plant.moisture == 0

    def test_to_dict(self, make_plant, desert_species):
        data = make_plant(desert_species, "DES-1#1").to_dict()
        assert data["plant_id"] == "DES-1#1"
        assert data["state"] == "Seedling"
        assert data["cost"] == 225


class TestClone:
    def test_clone_resets_and_shares_species(self, make_plant, desert_species, clock):
        prototype = make_plant(desert_species, "DES-1#PROTO")
        prototype.add_water(60)
        prototype.add_health(-30)
        prototype.set_state(MATURE)
        clock.advance_days(20)

        clone = prototype.clone("DES-1#1", "Gold")

        assert clone.plant_id == "DES-1#1"
        assert clone.colour == "Gold"
        assert (clone.moisture, clone.health, clone.insecticide) == (0, 100, 100)
        assert clone.age_days == 0
        assert clone.state is SEEDLING
        assert clone.species is prototype.species
        assert clone.care is prototype.care
        assert clone.pot is prototype.pot


class TestKits:
    @pytest.mark.parametrize(
        "biome, pot, soil",
        [
            (Biome.DESERT, 90, 35),
            (Biome.TROPICAL, 400, 50),
            (Biome.INDOOR, 200, 90),
            (Biome.MEDITERRANEAN, 70, 120),
            (Biome.WETLAND, 250, 80),
        ],
    )
    def test_kit_costs(self, biome, pot, soil):
        kit = KITS[biome]
        assert kit.pot.cost == pot
        assert kit.soil.cost == soil
        assert kit.strategy.biome == biome

    def test_unknown_biome_falls_back_to_indoor(self, caplog):
        with caplog.at_level("WARNING", logger="nursery.domain.plant_kits"):
            kit = kit_for("Tundra")
        assert kit is KITS[Biome.INDOOR]
        assert "Unknown biome" in caplog.text

    def test_create_plant_is_seedling(self, desert_species, plant_kwargs):
        plant = kit_for("desert").create_plant("DES-1#1", "Red", desert_species, **plant_kwargs)
        assert plant.state is SEEDLING
        assert plant.pot.name == "Terracotta"


class TestRegistry:
    def test_register_species_builds_prototype(self, desert_species, plant_kwargs):
        registry = PlantRegistry(**plant_kwargs)
        prototype = registry.register_species(desert_species)
        assert registry.has("DES-1")
        assert registry.get_prototype("DES-1") is prototype
        assert len(registry) == 1

    def test_clone_unknown_sku_returns_none(self, registry):
        assert registry.clone("NOPE", "NOPE#1", "Red") is None

    def test_clone(self, registry):
        plant = registry.clone("WET-1", "WET-1#1", "Red")
        assert plant.plant_id == "WET-1#1"
        assert plant.sku == "WET-1"

    def test_unregister(self, registry):
        assert registry.unregister("WET-1") is True
        assert registry.unregister("WET-1") is False
        assert not registry.has("WET-1")
