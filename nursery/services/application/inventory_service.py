"""
InventoryService
================

Keeps sellable stock consistent with the plant lifecycle.

Status transitions:
    (unseen) --add_plant / Matured--> Available
    Available --reserve--> Reserved --release--> Available
    Available | Reserved --mark_sold--> Sold
    Available --Wilted--> Wilted --Matured--> Available
    any --Died--> Dead

Illegal transitions return False and are logged; nothing here raises for
an unknown plant or SKU.
"""

from __future__ import annotations

import logging
import threading

from nursery.domain.inventory import Inventory, InventoryRecord
from nursery.enums.common import InventoryStatus
from nursery.enums.events import PlantEventKind, StockEventKind
from nursery.schemas.events import PlantEvent, StockEvent
from nursery.services.application.service_subject import ServiceSubject
from nursery.utils.concurrency import synchronized
from nursery.utils.event_bus import EventBus

logger = logging.getLogger(__name__)


class InventoryService(ServiceSubject):
    def __init__(self, low_stock_threshold: int = 2, event_bus: EventBus | None = None) -> None:
        super().__init__(event_bus)
        self.low_stock_threshold = low_stock_threshold
        self.inventory = Inventory()
        self._lock = threading.RLock()

    # ==================== Direct Operations ====================

    @synchronized
    def add_plant(self, plant_id: str, sku: str) -> bool:
        """Track a new plant as Available. Returns False if the ID is already tracked."""
        if plant_id in self.inventory:
            return False
        self.inventory.insert(plant_id, sku)
        logger.debug("Inventory added %s (%s)", plant_id, sku)
        return True

    def reserve_plant(self, plant_id: str) -> bool:
        with self._lock:
            record = self._require(plant_id, InventoryStatus.AVAILABLE, "reserve")
            if record is None:
                return False
            self.inventory.move(record, InventoryStatus.RESERVED)
            events = [StockEvent(key=plant_id, kind=StockEventKind.RESERVED, sku=record.sku)]
            events.extend(self._low_stock_events(record.sku))
        self._publish(events)
        return True

    def reserve_any_available(self, sku: str) -> str | None:
        """Reserve some Available plant of ``sku`` and return its ID, or None when none is available."""
        with self._lock:
            candidates = sorted(self.inventory.ids(InventoryStatus.AVAILABLE, sku))
            if not candidates:
                logger.info("No available stock for %s", sku)
                return None
            plant_id = candidates[0]
        return plant_id if self.reserve_plant(plant_id) else None

    def release_plant_from_order(self, plant_id: str) -> bool:
        with self._lock:
            record = self._require(plant_id, InventoryStatus.RESERVED, "release")
            if record is None:
                return False
            self.inventory.move(record, InventoryStatus.AVAILABLE)
            event = StockEvent(key=plant_id, kind=StockEventKind.RELEASED, sku=record.sku)
        self._publish([event])
        return True

    def mark_sold(self, plant_id: str) -> bool:
        with self._lock:
            record = self._require(plant_id, (InventoryStatus.AVAILABLE, InventoryStatus.RESERVED), "sell")
            if record is None:
                return False
            self.inventory.move(record, InventoryStatus.SOLD)
            events = [StockEvent(key=plant_id, kind=StockEventKind.SOLD, sku=record.sku)]
            events.extend(self._low_stock_events(record.sku))
        self._publish(events)
        return True

    # ==================== Plant Events ====================

    @synchronized
    def on_plant_event(self, event: PlantEvent) -> None:
        if event.kind == PlantEventKind.MATURED:
            self._on_matured(event)
        elif event.kind == PlantEventKind.WILTED:
            self._on_wilted(event)
        elif event.kind == PlantEventKind.DIED:
            self._on_died(event)

    def _on_matured(self, event: PlantEvent) -> None:
        record = self.inventory.get(event.plant_id)
        if record is None:
            self.inventory.insert(event.plant_id, event.sku)
            logger.info("Plant %s matured and is now available", event.plant_id)
            return
        if record.status == InventoryStatus.WILTED:
            # clears any stale reserved/sold membership as well
            self.inventory.move(record, InventoryStatus.AVAILABLE)
            logger.info("Plant %s recovered and is available again", event.plant_id)

    def _on_wilted(self, event: PlantEvent) -> None:
        record = self.inventory.get(event.plant_id)
        if record is None or record.status != InventoryStatus.AVAILABLE:
            return
        self.inventory.move(record, InventoryStatus.WILTED)
        logger.info("Plant %s wilted and was pulled from sale", event.plant_id)

    def _on_died(self, event: PlantEvent) -> None:
        record = self.inventory.get(event.plant_id)
        if record is None:
            record = self.inventory.insert(event.plant_id, event.sku, InventoryStatus.DEAD)
        self.inventory.move(record, InventoryStatus.DEAD)
        logger.info("Plant %s died", event.plant_id)

    # ==================== Queries ====================

    @synchronized
    def status_of(self, plant_id: str) -> InventoryStatus | None:
        record = self.inventory.get(plant_id)
        return record.status if record else None

    @synchronized
    def available_count(self, sku: str) -> int:
        return self.inventory.count(InventoryStatus.AVAILABLE, sku)

    @synchronized
    def reserved_count(self, sku: str) -> int:
        return self.inventory.count(InventoryStatus.RESERVED, sku)

    @synchronized
    def sold_count(self, sku: str) -> int:
        return self.inventory.count(InventoryStatus.SOLD, sku)

    @synchronized
    def list_available_plants(self, sku: str | None = None) -> list[str]:
        """Available plant IDs, for one SKU or across all SKUs, sorted."""
        skus = [sku] if sku is not None else list(self.inventory.available_by_sku)
        ids: list[str] = []
        for key in skus:
            ids.extend(self.inventory.ids(InventoryStatus.AVAILABLE, key))
        return sorted(ids)

    # ==================== Helpers ====================

    def _require(
        self,
        plant_id: str,
        allowed: InventoryStatus | tuple[InventoryStatus, ...],
        action: str,
    ) -> InventoryRecord | None:
        allowed = allowed if isinstance(allowed, tuple) else (allowed,)
        record = self.inventory.get(plant_id)
        if record is None:
            logger.warning("Cannot %s %s: not in inventory", action, plant_id)
            return None
        if record.status not in allowed:
            logger.warning("Cannot %s %s from status %s", action, plant_id, record.status)
            return None
        return record

    def _low_stock_events(self, sku: str) -> list[StockEvent]:
        remaining = self.inventory.count(InventoryStatus.AVAILABLE, sku)
        if remaining > self.low_stock_threshold:
            return []
        logger.info("Stock low for %s (%d available)", sku, remaining)
        return [StockEvent(key=sku, kind=StockEventKind.LOW, sku=sku, quantity=remaining)]

    def _publish(self, events: list[StockEvent]) -> None:
        for event in events:
            self.notify(event)
