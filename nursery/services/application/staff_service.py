"""Staff roster and order workload."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from nursery.enums.common import StaffRole
from nursery.utils.concurrency import synchronized

logger = logging.getLogger(__name__)


@dataclass
class StaffMember:
    staff_id: str
    name: str
    role: StaffRole = StaffRole.SALES
    assigned_orders: list[str] = field(default_factory=list)
    available: bool = True

    @property
    def load(self) -> int:
        return len(self.assigned_orders)


class StaffService:
    def __init__(self, max_orders_per_staff: int = 5) -> None:
        self.max_orders_per_staff = max_orders_per_staff
        self._staff: dict[str, StaffMember] = {}
        self._lock = threading.RLock()

    @synchronized
    def add_staff(self, staff_id: str, name: str, role: StaffRole | str = StaffRole.SALES) -> StaffMember:
        member = StaffMember(staff_id, name, StaffRole(role))
        self._staff[staff_id] = member
        return member

    @synchronized
    def least_loaded(self) -> str | None:
        """Sales staff member with the fewest open orders; ties go to the earliest added."""
        best: StaffMember | None = None
        for member in self._staff.values():
            if member.role != StaffRole.SALES:
                continue
            if not member.available and member.load > 0:
                continue
            if best is None or member.load < best.load:
                best = member
        return best.staff_id if best else None

    @synchronized
    def assign_order(self, staff_id: str, order_id: str) -> bool:
        member = self._staff.get(staff_id)
        if member is None:
            logger.warning("Cannot assign %s: unknown staff %s", order_id, staff_id)
            return False
        member.assigned_orders.append(order_id)
        if member.load >= self.max_orders_per_staff:
            member.available = False
            logger.info("Staff %s reached %d orders and is unavailable", staff_id, member.load)
        return True

    @synchronized
    def complete_order(self, order_id: str) -> str | None:
        """Release the order from whoever holds it. Returns that staff ID, or None."""
        for member in self._staff.values():
            if order_id in member.assigned_orders:
                member.assigned_orders.remove(order_id)
                if member.load < self.max_orders_per_staff:
                    member.available = True
                return member.staff_id
        return None

    @synchronized
    def is_available(self, staff_id: str) -> bool:
        member = self._staff.get(staff_id)
        return member is not None and member.available

    @synchronized
    def get_staff(self, staff_id: str) -> StaffMember | None:
        return self._staff.get(staff_id)

    @synchronized
    def orders_for_staff(self, staff_id: str) -> list[str]:
        member = self._staff.get(staff_id)
        return list(member.assigned_orders) if member else []

    @synchronized
    def list_staff(self) -> list[StaffMember]:
        return list(self._staff.values())
