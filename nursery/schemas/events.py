from pydantic import BaseModel, ConfigDict, Field

from nursery.enums.events import OrderEventKind, OrderStatus, PlantEventKind, StockEventKind


class PlantEvent(BaseModel):
    """Lifecycle notification emitted by the greenhouse."""

    model_config = ConfigDict(frozen=True)

    schema_version: int = Field(default=1)
    plant_id: str
    sku: str
    kind: PlantEventKind


class StockEvent(BaseModel):
    """Stock-level notification.

    ``key`` is the species SKU for Added/Low events and the plant ID for
    Reserved/Released/Sold events.
    """

    model_config = ConfigDict(frozen=True)

    schema_version: int = Field(default=1)
    key: str
    kind: StockEventKind
    sku: str | None = None
    quantity: int | None = None


class OrderLine(BaseModel):
    """A single plant on an order."""

    plant_id: str
    species_sku: str
    description: str = ""
    final_cost: float = Field(default=0.0, ge=0.0)


class OrderEvent(BaseModel):
    """Order notification. Delivered by reference, observers may read it but must not assume exclusive access."""

    schema_version: int = Field(default=1)
    order_id: str
    customer_id: str
    lines: list[OrderLine] = Field(default_factory=list)
    staff_id: str | None = None
    kind: OrderEventKind = OrderEventKind.CREATED
    status: OrderStatus = OrderStatus.NEW


class Receipt(BaseModel):
    """Outcome of a checkout."""

    success: bool = False
    order_id: str = ""
    total_cost: float = 0.0
    amount_paid: float = 0.0
    change: float = 0.0
    message: str = ""
