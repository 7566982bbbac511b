"""
Inventory store
===============

Primary map of plant ID to InventoryRecord plus per-SKU sets for the three
sellable statuses. The store itself enforces that an ID sits in at most one
status set; InventoryService decides which transitions are legal.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass

from nursery.enums.common import InventoryStatus


@dataclass
class InventoryRecord:
    plant_id: str
    sku: str
    status: InventoryStatus = InventoryStatus.AVAILABLE


class Inventory:
    def __init__(self) -> None:
        self.by_id: dict[str, InventoryRecord] = {}
        self.available_by_sku: dict[str, set[str]] = defaultdict(set)
        self.reserved_by_sku: dict[str, set[str]] = defaultdict(set)
        self.sold_by_sku: dict[str, set[str]] = defaultdict(set)

    def _set_for(self, status: InventoryStatus) -> dict[str, set[str]] | None:
        if status == InventoryStatus.AVAILABLE:
            return self.available_by_sku
        if status == InventoryStatus.RESERVED:
            return self.reserved_by_sku
        if status == InventoryStatus.SOLD:
            return self.sold_by_sku
        return None

    def get(self, plant_id: str) -> InventoryRecord | None:
        return self.by_id.get(plant_id)

    def insert(self, plant_id: str, sku: str, status: InventoryStatus = InventoryStatus.AVAILABLE) -> InventoryRecord:
        record = InventoryRecord(plant_id, sku, status)
        self.by_id[plant_id] = record
        index = self._set_for(status)
        if index is not None:
            index[sku].add(plant_id)
        return record

    def purge(self, plant_id: str, sku: str) -> None:
        """Remove the ID from every per-SKU status set."""
        for index in (self.available_by_sku, self.reserved_by_sku, self.sold_by_sku):
            members = index.get(sku)
            if members is not None:
                members.discard(plant_id)

    def move(self, record: InventoryRecord, status: InventoryStatus) -> None:
        """Change a record's status and its set membership in one step."""
        self.purge(record.plant_id, record.sku)
        record.status = status
        index = self._set_for(status)
        if index is not None:
            index[record.sku].add(record.plant_id)

    def count(self, status: InventoryStatus, sku: str) -> int:
        index = self._set_for(status)
        if index is None:
            return sum(1 for r in self.by_id.values() if r.sku == sku and r.status == status)
        members = index.get(sku)
        return len(members) if members else 0

    def ids(self, status: InventoryStatus, sku: str) -> set[str]:
        index = self._set_for(status)
        if index is None:
            return {r.plant_id for r in self.by_id.values() if r.sku == sku and r.status == status}
        return set(index.get(sku, ()))

    def skus(self) -> set[str]:
        return {record.sku for record in self.by_id.values()}

    def __len__(self) -> int:
        return len(self.by_id)

    def __contains__(self, plant_id: object) -> bool:
        return plant_id in self.by_id
