from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from infrastructure.logging.audit import AuditLogger
from nursery.config import AppConfig
from nursery.domain.plant_registry import PlantRegistry
from nursery.domain.species_catalog import SpeciesCatalog
from nursery.enums.growth import Season
from nursery.seed.species_seed import seed_catalog
from nursery.services.application.action_log import ActionLog
from nursery.services.application.greenhouse import Greenhouse
from nursery.services.application.inventory_service import InventoryService
from nursery.services.application.nursery_hub import NurseryHub
from nursery.services.application.sales_service import SalesService
from nursery.services.application.staff_service import StaffService
from nursery.workers.lifecycle_ticker import LifecycleTicker

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Aggregate and wire the nursery services."""

    config: AppConfig
    catalog: SpeciesCatalog
    registry: PlantRegistry
    greenhouse: Greenhouse
    inventory: InventoryService
    sales: SalesService
    staff: StaffService
    hub: NurseryHub
    action_log: ActionLog
    ticker: LifecycleTicker
    audit_logger: Optional[AuditLogger] = None

    @classmethod
    def build(
        cls,
        config: AppConfig,
        *,
        audit_logger: AuditLogger | None = None,
        clock: Callable[[], float] | None = None,
        season_provider: Callable[[], Season] | None = None,
        seed: bool = True,
    ) -> "ServiceContainer":
        """Construct the services and connect their observers.

        Args:
            config: Application configuration
            audit_logger: Audit trail for the action log; built from config when omitted
            clock: Plant clock override (tests)
            season_provider: Season override (tests)
            seed: Load the default species catalogue
        """
        logger.info("Building ServiceContainer...")
        plant_kwargs = {"seconds_per_sim_day": config.seconds_per_sim_day}
        if clock is not None:
            plant_kwargs["clock"] = clock
        if season_provider is not None:
            plant_kwargs["season_provider"] = season_provider

        catalog = SpeciesCatalog()
        registry = PlantRegistry(**plant_kwargs)
        greenhouse = Greenhouse(registry)
        inventory = InventoryService(low_stock_threshold=config.low_stock_threshold)
        sales = SalesService()
        staff = StaffService(max_orders_per_staff=config.max_orders_per_staff)

        greenhouse.attach(inventory)
        hub = NurseryHub(greenhouse, inventory, sales, staff, config.restock_batch_size).connect()

        if audit_logger is None and config.audit_enabled:
            audit_logger = AuditLogger(config.audit_log_path)
        action_log = ActionLog(audit_logger)
        ticker = LifecycleTicker(greenhouse, config.tick_interval_seconds)

        if seed:
            seed_catalog(catalog, registry)

        logger.info("ServiceContainer built successfully.")
        return cls(
            config=config,
            catalog=catalog,
            registry=registry,
            greenhouse=greenhouse,
            inventory=inventory,
            sales=sales,
            staff=staff,
            hub=hub,
            action_log=action_log,
            ticker=ticker,
            audit_logger=audit_logger,
        )

    def shutdown(self) -> None:
        """Stop background work and release the audit file."""
        self.ticker.stop()
        if self.audit_logger is not None:
            self.audit_logger.close()
        logger.info("ServiceContainer shutdown complete.")
