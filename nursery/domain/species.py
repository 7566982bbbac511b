"""
SpeciesRecord - Shared intrinsic species data
=============================================

One immutable record per SKU, owned by the SpeciesCatalog and referenced
(never copied) by every Plant of that species.
"""

from __future__ import annotations

from dataclasses import dataclass

from nursery.enums.growth import Biome, Season


@dataclass(frozen=True)
class SpeciesRecord:
    """Immutable per-species data (flyweight)."""

    sku: str
    name: str
    biome: Biome | str
    base_price: int = 0
    water_sensitivity: float = 1.0  # 0-2
    insecticide_tolerance: float = 1.0  # 0-2
    growth_rate: float = 1.0  # 0-2
    thriving_season: Season = Season.SPRING

    def __post_init__(self) -> None:
        if not self.sku:
            raise ValueError("SpeciesRecord requires a non-empty SKU")
        for attr in ("water_sensitivity", "insecticide_tolerance", "growth_rate"):
            value = getattr(self, attr)
            if value < 0 or value > 2:
                raise ValueError(f"{attr} {value} is outside the valid range (0-2).")
        if self.base_price < 0:
            raise ValueError(f"base_price {self.base_price} cannot be negative.")

    @property
    def biome_tag(self) -> str:
        """Biome as a plain string, whether or not it is a known Biome."""
        return str(self.biome)

    def thrives_in(self, season: Season) -> bool:
        return self.thriving_season == season
