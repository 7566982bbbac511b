"""
Application Constants
=====================

Centralized constants for the nursery simulation.
Organized by domain for easy discovery and maintenance.

Usage:
    from nursery.constants import COLOUR_PALETTE
    from nursery.constants import ResourceBounds, LifecycleThresholds
"""

# =============================================================================
# Plant Resources
# =============================================================================


class ResourceBounds:
    """Bounds and reset values for per-plant resource levels."""

    MIN = 0
    MAX = 100

    # Levels a freshly cloned plant starts with
    INITIAL_MOISTURE = 0
    INITIAL_HEALTH = 100
    INITIAL_INSECTICIDE = 100


class CarePenalties:
    """Health lost when a care action would push a resource past MAX."""

    OVERWATER = 5
    OVERSPRAY = 4


# =============================================================================
# Lifecycle
# =============================================================================


class LifecycleThresholds:
    """Age multipliers and season factors for stage progression."""

    SEEDLING_AGE_FACTOR = 5.0
    GROWING_AGE_FACTOR = 12.0

    # Multiplier applied to age thresholds
    IN_SEASON_FACTOR = 0.8
    OFF_SEASON_FACTOR = 1.2


DEFAULT_SECONDS_PER_SIM_DAY = 10.0


# =============================================================================
# Greenhouse
# =============================================================================

# Round-robin colours for new stock
COLOUR_PALETTE = (
    "Red",
    "Yellow",
    "Purple",
    "Pink",
    "White",
    "Orange",
    "Blue",
    "Silver",
    "Gold",
    "Green",
)

PLANT_ID_SEPARATOR = "#"


# =============================================================================
# Sales / Staff
# =============================================================================

ORDER_ID_PREFIX = "ORDER-"
SYSTEM_USER_ID = "SYSTEM"
