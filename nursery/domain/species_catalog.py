"""Species catalog: the flyweight factory keyed by SKU."""

from __future__ import annotations

import logging
import threading

from nursery.domain.species import SpeciesRecord

logger = logging.getLogger(__name__)


class SpeciesCatalog:
    """Stores one shared SpeciesRecord per SKU."""

    def __init__(self) -> None:
        self._by_sku: dict[str, SpeciesRecord] = {}
        self._lock = threading.Lock()

    def add(self, record: SpeciesRecord | None) -> None:
        """Store a record, overwriting any existing record with the same SKU."""
        if record is None:
            return
        with self._lock:
            if record.sku in self._by_sku:
                logger.debug("Replacing species record for SKU %s", record.sku)
            self._by_sku[record.sku] = record

    def get(self, sku: str) -> SpeciesRecord | None:
        return self._by_sku.get(sku)

    def has(self, sku: str) -> bool:
        return sku in self._by_sku

    def remove(self, sku: str) -> None:
        with self._lock:
            self._by_sku.pop(sku, None)

    def all(self) -> list[SpeciesRecord]:
        """Return every record (order irrelevant)."""
        with self._lock:
            return list(self._by_sku.values())

    def __len__(self) -> int:
        return len(self._by_sku)

    def __contains__(self, sku: object) -> bool:
        return sku in self._by_sku
