"""Domain model: species, plants, lifecycle states, care and inventory."""

from nursery.domain.care_strategies import (
    CareStrategy,
    DesertStrategy,
    IndoorStrategy,
    MediterraneanStrategy,
    TropicalStrategy,
    WetlandStrategy,
    strategy_for,
)
from nursery.domain.exceptions import (
    CommandError,
    ConfigurationError,
    NotFoundError,
    NurseryError,
    ValidationError,
)
from nursery.domain.inventory import Inventory, InventoryRecord
from nursery.domain.plant import Plant
from nursery.domain.plant_iterators import PlantIterator, SkuIterator, StateIterator
from nursery.domain.plant_kits import KITS, PlantKit, Pot, SoilMix, kit_for
from nursery.domain.plant_registry import PlantRegistry
from nursery.domain.plant_states import (
    DEAD,
    GROWING,
    MATURE,
    SEEDLING,
    WILTING,
    PlantState,
    state_for,
)
from nursery.domain.species import SpeciesRecord
from nursery.domain.species_catalog import SpeciesCatalog

__all__ = [
    "CareStrategy",
    "DesertStrategy",
    "TropicalStrategy",
    "IndoorStrategy",
    "MediterraneanStrategy",
    "WetlandStrategy",
    "strategy_for",
    "NurseryError",
    "ValidationError",
    "NotFoundError",
    "CommandError",
    "ConfigurationError",
    "Inventory",
    "InventoryRecord",
    "Plant",
    "PlantIterator",
    "StateIterator",
    "SkuIterator",
    "KITS",
    "PlantKit",
    "Pot",
    "SoilMix",
    "kit_for",
    "PlantRegistry",
    "PlantState",
    "SEEDLING",
    "GROWING",
    "MATURE",
    "WILTING",
    "DEAD",
    "state_for",
    "SpeciesRecord",
    "SpeciesCatalog",
]
