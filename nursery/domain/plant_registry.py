"""
PlantRegistry - Prototype registry
==================================

Holds one prototype Plant per SKU. New stock is cloned from the prototype
so every plant of a species shares its species record, care strategy and kit.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from nursery.domain.plant import Plant
from nursery.domain.plant_kits import kit_for
from nursery.domain.species import SpeciesRecord

logger = logging.getLogger(__name__)


class PlantRegistry:
    def __init__(self, **plant_kwargs: Any) -> None:
        # clock / season_provider / seconds_per_sim_day for prototypes built here
        self._plant_kwargs = plant_kwargs
        self._prototypes: dict[str, Plant] = {}
        self._lock = threading.Lock()

    def register_prototype(self, sku: str, prototype: Plant) -> None:
        with self._lock:
            self._prototypes[sku] = prototype

    def register_species(self, record: SpeciesRecord) -> Plant:
        """Build a prototype for a species using its biome kit and register it."""
        kit = kit_for(record.biome)
        prototype = kit.create_plant(f"{record.sku}#PROTO", "None", record, **self._plant_kwargs)
        self.register_prototype(record.sku, prototype)
        return prototype

    def unregister(self, sku: str) -> bool:
        with self._lock:
            return self._prototypes.pop(sku, None) is not None

    def has(self, sku: str) -> bool:
        with self._lock:
            return sku in self._prototypes

    def get_prototype(self, sku: str) -> Plant | None:
        with self._lock:
            return self._prototypes.get(sku)

    def clone(self, sku: str, plant_id: str, colour: str) -> Plant | None:
        """Clone the prototype for ``sku``; returns None when no prototype is registered."""
        prototype = self.get_prototype(sku)
        if prototype is None:
            logger.warning("No prototype registered for SKU %s", sku)
            return None
        return prototype.clone(plant_id, colour)

    def skus(self) -> list[str]:
        with self._lock:
            return list(self._prototypes)

    def __len__(self) -> int:
        return len(self._prototypes)
