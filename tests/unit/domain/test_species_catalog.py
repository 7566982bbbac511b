from __future__ import annotations

import dataclasses

import pytest

from nursery.domain.species import SpeciesRecord
from nursery.domain.species_catalog import SpeciesCatalog
from nursery.enums.growth import Biome, Season


class TestSpeciesRecord:
    def test_is_immutable(self, desert_species):
        with pytest.raises(dataclasses.FrozenInstanceError):
            desert_species.base_price = 1

    @pytest.mark.parametrize("field", ["water_sensitivity", "insecticide_tolerance", "growth_rate"])
    def test_scales_are_bounded(self, field):
        with pytest.raises(ValueError, match=field):
            SpeciesRecord("X", "X", Biome.DESERT, **{field: 2.5})

    def test_requires_sku(self):
        with pytest.raises(ValueError):
            SpeciesRecord("", "X", Biome.DESERT)

    def test_thrives_in(self, desert_species):
        assert desert_species.thrives_in(Season.SPRING)
        assert not desert_species.thrives_in(Season.WINTER)


class TestSpeciesCatalog:
    def test_add_and_get_shares_record(self, desert_species):
        catalog = SpeciesCatalog()
        catalog.add(desert_species)
        assert catalog.get("DES-1") is desert_species
        assert catalog.has("DES-1")
        assert "DES-1" in catalog

    def test_missing_sku_is_absent_not_error(self):
        catalog = SpeciesCatalog()
        assert catalog.get("NOPE") is None
        assert not catalog.has("NOPE")
        catalog.remove("NOPE")

    def test_add_overwrites(self, desert_species):
        catalog = SpeciesCatalog()
        catalog.add(desert_species)
        replacement = dataclasses.replace(desert_species, name="Aloe Vera")
        catalog.add(replacement)
        assert len(catalog) == 1
        assert catalog.get("DES-1").name == "Aloe Vera"

    def test_none_is_ignored(self):
        catalog = SpeciesCatalog()
        catalog.add(None)
        assert len(catalog) == 0

    def test_remove_and_all(self, catalog):
        assert len(catalog.all()) == 5
        catalog.remove("TRO-1")
        assert {r.sku for r in catalog.all()} == {"DES-1", "IND-1", "MED-1", "WET-1"}
