"""
Growth-related Enumerations
============================

This module contains all enums related to species and plant lifecycles.
"""

from enum import Enum


class Biome(str, Enum):
    """Environmental category that selects the care strategy and plant kit."""

    DESERT = "Desert"
    TROPICAL = "Tropical"
    INDOOR = "Indoor"
    MEDITERRANEAN = "Mediterranean"
    WETLAND = "Wetland"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value: "Biome | str | None") -> "Biome | None":
        """Resolve a biome tag case-insensitively, returning None when unknown."""
        if isinstance(value, Biome):
            return value
        if not value:
            return None
        target = str(value).strip().lower()
        for biome in cls:
            if biome.value.lower() == target:
                return biome
        return None


class Season(str, Enum):
    """Seasons used for the thriving-season growth discount."""

    SPRING = "Spring"
    SUMMER = "Summer"
    AUTUMN = "Autumn"
    WINTER = "Winter"

    def __str__(self):
        return self.value


class PlantStage(str, Enum):
    """Lifecycle stages a plant moves through"""

    SEEDLING = "Seedling"
    GROWING = "Growing"
    MATURE = "Matured"
    WILTING = "Wilting"
    DEAD = "Dead"

    def __str__(self):
        return self.value
