"""
SalesService
============

Order book and checkout. The stored OrderEvent is the live order; every
change is published as a copy taken at notification time, so the kind an
observer receives never changes while the event is still being delivered.
"""

from __future__ import annotations

import itertools
import logging
import threading

from nursery.constants import ORDER_ID_PREFIX
from nursery.enums.events import OrderEventKind, OrderStatus
from nursery.schemas.events import OrderEvent, OrderLine, Receipt
from nursery.services.application.service_subject import ServiceSubject
from nursery.utils.concurrency import synchronized
from nursery.utils.event_bus import EventBus

logger = logging.getLogger(__name__)

_STATUS_EVENTS = {
    OrderStatus.ASSIGNED: OrderEventKind.ASSIGNED,
    OrderStatus.COMPLETED: OrderEventKind.COMPLETED,
    OrderStatus.CANCELLED: OrderEventKind.CANCELLED,
}


class SalesService(ServiceSubject):
    def __init__(self, event_bus: EventBus | None = None) -> None:
        super().__init__(event_bus)
        self._orders: dict[str, OrderEvent] = {}
        self._receipts: dict[str, Receipt] = {}
        self._sequence = itertools.count(1)
        self._lock = threading.RLock()

    def _next_order_id(self) -> str:
        return f"{ORDER_ID_PREFIX}{next(self._sequence)}"

    # ==================== Orders ====================

    def create_order(self, customer_id: str, lines: list[OrderLine]) -> str:
        """Record a new order and notify observers with a Created event.

        Returns:
            The new order ID
        """
        with self._lock:
            order = OrderEvent(
                order_id=self._next_order_id(),
                customer_id=customer_id,
                lines=list(lines),
                kind=OrderEventKind.CREATED,
                status=OrderStatus.NEW,
            )
            self._orders[order.order_id] = order
            event = order.model_copy()
        logger.info("Created order %s for %s (%d lines)", order.order_id, customer_id, len(order.lines))
        self.notify(event)
        return order.order_id

    def assign(self, order_id: str, staff_id: str) -> bool:
        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                logger.warning("Cannot assign unknown order %s", order_id)
                return False
            order.staff_id = staff_id
            if order.status == OrderStatus.NEW:
                order.status = OrderStatus.ASSIGNED
            order.kind = OrderEventKind.ASSIGNED
            event = order.model_copy()
        logger.info("Order %s assigned to %s", order_id, staff_id)
        self.notify(event)
        return True

    def update_status(self, order_id: str, status: OrderStatus | str) -> bool:
        status = OrderStatus(status)
        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                logger.warning("Cannot update unknown order %s", order_id)
                return False
            order.status = status
            order.kind = _STATUS_EVENTS.get(status, order.kind)
            event = order.model_copy()
        logger.info("Order %s is now %s", order_id, status.value)
        self.notify(event)
        return True

    @synchronized
    def get(self, order_id: str) -> OrderEvent | None:
        return self._orders.get(order_id)

    @synchronized
    def list_by_staff(self, staff_id: str) -> list[OrderEvent]:
        return [order for order in self._orders.values() if order.staff_id == staff_id]

    @synchronized
    def orders_by_customer(self, customer_id: str) -> list[OrderEvent]:
        return [order for order in self._orders.values() if order.customer_id == customer_id]

    # ==================== Checkout ====================

    def checkout(self, customer_id: str, lines: list[OrderLine], amount_paid: float) -> Receipt:
        """
        Take payment for a cart and create the order.

        An empty cart or a short payment yields an unsuccessful receipt and
        creates no order.
        """
        if not lines:
            return Receipt(amount_paid=amount_paid, message="Cart is empty")

        total = sum(line.final_cost for line in lines)
        if amount_paid < total:
            return Receipt(
                total_cost=total,
                amount_paid=amount_paid,
                message=f"Insufficient payment. Required: R{total:.2f}",
            )

        order_id = self.create_order(customer_id, lines)
        receipt = Receipt(
            success=True,
            order_id=order_id,
            total_cost=total,
            amount_paid=amount_paid,
            change=amount_paid - total,
            message="Payment successful",
        )
        with self._lock:
            self._receipts[order_id] = receipt
        return receipt

    @synchronized
    def get_receipt(self, order_id: str) -> Receipt | None:
        return self._receipts.get(order_id)

    @synchronized
    def customer_receipts(self, customer_id: str) -> list[Receipt]:
        return [
            receipt
            for order_id, receipt in self._receipts.items()
            if self._orders.get(order_id) is not None and self._orders[order_id].customer_id == customer_id
        ]
