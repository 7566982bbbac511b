"""
NurseryHub
==========

Mediator between the greenhouse, inventory, sales and staff services. It
observes stock and order events and turns them into follow-up actions:

- Stock Low: restock the SKU from the greenhouse prototypes
- Order Created: assign the least-loaded sales staff member
- Order Completed: sell every line, remove the plants, free the staff slot
- Order Cancelled: release every reserved line, free the staff slot
"""

from __future__ import annotations

import logging

from nursery.enums.events import OrderEventKind, OrderStatus, StockEventKind
from nursery.schemas.events import OrderEvent, OrderLine, StockEvent
from nursery.services.application.greenhouse import Greenhouse
from nursery.services.application.inventory_service import InventoryService
from nursery.services.application.sales_service import SalesService
from nursery.services.application.service_subject import NurseryObserver
from nursery.services.application.staff_service import StaffService

logger = logging.getLogger(__name__)


class NurseryHub(NurseryObserver):
    def __init__(
        self,
        greenhouse: Greenhouse,
        inventory: InventoryService,
        sales: SalesService,
        staff: StaffService,
        restock_batch_size: int = 10,
    ) -> None:
        self.greenhouse = greenhouse
        self.inventory = inventory
        self.sales = sales
        self.staff = staff
        self.restock_batch_size = restock_batch_size

    def connect(self) -> "NurseryHub":
        """Attach the hub to the inventory and sales subjects."""
        self.inventory.attach(self)
        self.sales.attach(self)
        return self

    # ==================== Workflows ====================

    def handle_new_order(self, customer_id: str, skus: list[str]) -> str | None:
        """
        Reserve one available plant per requested SKU and open an order for them.

        SKUs without stock are skipped. Returns the order ID, or None when
        nothing could be reserved.
        """
        lines: list[OrderLine] = []
        for sku in skus:
            plant_id = self.inventory.reserve_any_available(sku)
            if plant_id is None:
                logger.info("No stock for SKU %s", sku)
                continue
            plant = self.greenhouse.get_plant(plant_id)
            lines.append(
                OrderLine(
                    plant_id=plant_id,
                    species_sku=sku,
                    description=(plant.name or sku) if plant else sku,
                    final_cost=plant.cost() if plant else 0,
                )
            )

        if not lines:
            logger.info("Order for %s failed: no available stock", customer_id)
            return None
        return self.sales.create_order(customer_id, lines)

    def complete_order(self, order_id: str) -> bool:
        return self._close(order_id, OrderStatus.COMPLETED)

    def cancel_order(self, order_id: str) -> bool:
        return self._close(order_id, OrderStatus.CANCELLED)

    def _close(self, order_id: str, status: OrderStatus) -> bool:
        order = self.sales.get(order_id)
        if order is None:
            logger.warning("Cannot close unknown order %s", order_id)
            return False
        if order.status in (OrderStatus.COMPLETED, OrderStatus.CANCELLED):
            logger.warning("Order %s is already %s", order_id, order.status.value)
            return False
        return self.sales.update_status(order_id, status)

    # ==================== Observer ====================

    def on_stock_event(self, event: StockEvent) -> None:
        if event.kind != StockEventKind.LOW:
            return
        sku = event.sku or event.key
        logger.info("Restocking %s with %d plants", sku, self.restock_batch_size)
        self.greenhouse.receive_shipment(sku, self.restock_batch_size)

    def on_order_event(self, event: OrderEvent) -> None:
        if event.kind == OrderEventKind.CREATED:
            self._assign_staff(event)
        elif event.kind == OrderEventKind.COMPLETED:
            for line in event.lines:
                self.inventory.mark_sold(line.plant_id)
                self.greenhouse.remove_plant(line.plant_id)
            self.staff.complete_order(event.order_id)
        elif event.kind == OrderEventKind.CANCELLED:
            for line in event.lines:
                self.inventory.release_plant_from_order(line.plant_id)
            self.staff.complete_order(event.order_id)

    def _assign_staff(self, order: OrderEvent) -> None:
        if order.staff_id:
            return
        staff_id = self.staff.least_loaded()
        if staff_id is None:
            logger.warning("No sales staff available for order %s", order.order_id)
            return
        self.staff.assign_order(staff_id, order.order_id)
        self.sales.assign(order.order_id, staff_id)
