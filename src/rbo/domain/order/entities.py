from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from rbo.domain.common.ids import FoodId, OrderId, OrderItemId, TableId
from rbo.domain.common.money import is_normalized, normalize_amount


@dataclass(frozen=True)
class Order:
    order_id: OrderId
    table_id: TableId | None
    order_date: datetime
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class OrderItem:
    order_item_id: OrderItemId
    order_id: OrderId
    food_id: FoodId
    quantity: int
    unit_price: float
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("quantity must be >= 0")
        if self.unit_price < 0:
            raise ValueError("unit_price must be >= 0")
        if not is_normalized(self.unit_price):
            raise ValueError("unit_price must be normalized to 2 decimal places")

    @property
    def line_amount(self) -> float:
        return normalize_amount(self.unit_price * self.quantity)


def create_order(order_id: OrderId, table_id: TableId | None, now: datetime) -> Order:
    return Order(
        order_id=order_id,
        table_id=table_id,
        order_date=now,
        created_at=now,
        updated_at=now,
    )


def create_order_item(
    order_item_id: OrderItemId,
    order_id: OrderId,
    food_id: FoodId,
    quantity: int,
    unit_price: float,
    now: datetime,
) -> OrderItem:
    if not math.isfinite(unit_price):
        raise ValueError("unit_price must be a finite number")
    return OrderItem(
        order_item_id=order_item_id,
        order_id=order_id,
        food_id=food_id,
        quantity=quantity,
        unit_price=normalize_amount(unit_price),
        created_at=now,
        updated_at=now,
    )
