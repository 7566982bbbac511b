"""
Nursery Simulation Core
=======================

Plant lifecycle state machine, biome care strategies, greenhouse stock,
inventory consistency and the staff command log of the nursery simulation.
"""

__version__ = "1.0.0"
