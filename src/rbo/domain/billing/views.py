from __future__ import annotations

from dataclasses import dataclass, field

from rbo.domain.common.ids import OrderId, OrderItemId, TableId


@dataclass(frozen=True)
class BillingLine:
    order_item_id: OrderItemId | None
    order_id: OrderId
    table_id: TableId | None
    table_number: int | None
    food_name: str | None
    food_image: str | None
    price: float
    quantity: int
    amount: float


@dataclass(frozen=True)
class BillingView:
    order_id: OrderId
    table_id: TableId | None
    table_number: int | None
    payment_due: float
    total_count: int
    order_items: list[BillingLine] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.total_count != len(self.order_items):
            raise ValueError("total_count must match the number of order items")
