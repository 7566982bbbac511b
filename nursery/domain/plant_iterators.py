"""Filtered, restartable iteration over a snapshot of plants."""

from __future__ import annotations

from typing import Iterable, Iterator

from nursery.domain.plant import Plant
from nursery.domain.plant_states import PlantState


class PlantIterator:
    """
    Lazy traversal over a point-in-time snapshot.

    Iterating twice yields the same plants; mutations of the source
    collection after construction are not seen.
    """

    def __init__(self, plants: Iterable[Plant]) -> None:
        self._snapshot: tuple[Plant, ...] = tuple(plants)

    def matches(self, plant: Plant) -> bool:
        return True

    def __iter__(self) -> Iterator[Plant]:
        return (plant for plant in self._snapshot if plant is not None and self.matches(plant))

    def first(self) -> Plant | None:
        return next(iter(self), None)

    def count(self) -> int:
        return sum(1 for _ in self)

    def ids(self) -> list[str]:
        return [plant.plant_id for plant in self]


class StateIterator(PlantIterator):
    def __init__(self, plants: Iterable[Plant], state: PlantState) -> None:
        super().__init__(plants)
        self.state = state

    def matches(self, plant: Plant) -> bool:
        return plant.state is self.state


class SkuIterator(PlantIterator):
    def __init__(self, plants: Iterable[Plant], sku: str) -> None:
        super().__init__(plants)
        self.sku = sku

    def matches(self, plant: Plant) -> bool:
        return plant.sku == self.sku
