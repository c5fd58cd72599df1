from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pymongo.collection import Collection

from rbo.application.ports.repositories import BillingQuery, PipelineError
from rbo.domain.billing.views import BillingLine, BillingView
from rbo.domain.common.ids import OrderId, OrderItemId, TableId
from rbo.domain.common.money import normalize_amount
from rbo.infrastructure.db.collections import FOOD, ORDER, TABLE
from rbo.infrastructure.db.errors import translate_store_errors


def _left_join(source: str, local_field: str, foreign_field: str, as_: str) -> list[dict[str, Any]]:
    return [
        {
            "$lookup": {
                "from": source,
                "localField": local_field,
                "foreignField": foreign_field,
                "as": as_,
            }
        },
        {"$unwind": {"path": f"${as_}", "preserveNullAndEmptyArrays": True}},
    ]


def billing_pipeline(order_id: OrderId) -> list[dict[str, Any]]:
    """Aggregation over ``orderItem`` producing one billing group per order and table."""
    return [
        {"$match": {"order_id": str(order_id)}},
        *_left_join(FOOD, "food_id", "food_id", "food"),
        *_left_join(ORDER, "order_id", "order_id", "order"),
        *_left_join(TABLE, "order.table_id", "table_id", "table"),
        {
            "$project": {
                "_id": 0,
                "amount": {"$multiply": ["$unit_price", "$quantity"]},
                "food_name": "$food.name",
                "food_image": "$food.food_image",
                "table_number": "$table.table_number",
                "table_id": "$table.table_id",
                "order_id": "$order_id",
                "price": "$unit_price",
                "quantity": 1,
                "order_item_id": 1,
            }
        },
        {
            "$group": {
                "_id": {
                    "order_id": "$order_id",
                    "table_id": "$table_id",
                    "table_number": "$table_number",
                },
                "payment_due": {"$sum": "$amount"},
                "total_count": {"$sum": 1},
                "order_items": {"$push": "$$ROOT"},
            }
        },
        {
            "$project": {
                "_id": 0,
                "payment_due": 1,
                "total_count": 1,
                "table_number": "$_id.table_number",
                "order_id": "$_id.order_id",
                "table_id": "$_id.table_id",
                "order_items": 1,
            }
        },
    ]


def _optional_table_id(value: Any) -> TableId | None:
    return TableId(str(value)) if value is not None else None


def _to_line(row: Mapping[str, Any]) -> BillingLine:
    order_item_id = row.get("order_item_id")
    return BillingLine(
        order_item_id=OrderItemId(str(order_item_id)) if order_item_id is not None else None,
        order_id=OrderId(str(row["order_id"])),
        table_id=_optional_table_id(row.get("table_id")),
        table_number=row.get("table_number"),
        food_name=row.get("food_name"),
        food_image=row.get("food_image"),
        price=normalize_amount(float(row.get("price") or 0.0)),
        quantity=int(row.get("quantity") or 0),
        amount=normalize_amount(float(row.get("amount") or 0.0)),
    )


def _to_view(row: Mapping[str, Any]) -> BillingView:
    lines = [_to_line(line) for line in row.get("order_items", [])]
    return BillingView(
        order_id=OrderId(str(row["order_id"])),
        table_id=_optional_table_id(row.get("table_id")),
        table_number=row.get("table_number"),
        payment_due=normalize_amount(float(row.get("payment_due") or 0.0)),
        total_count=int(row.get("total_count", 0)),
        order_items=lines,
    )


class MongoBillingQuery(BillingQuery):
    def __init__(self, order_items: Collection) -> None:
        self._order_items = order_items

    def compute_billing(self, order_id: OrderId) -> list[BillingView]:
        with translate_store_errors("compute billing", pipeline=True):
            rows = list(self._order_items.aggregate(billing_pipeline(order_id)))

        try:
            return [_to_view(row) for row in rows]
        except (KeyError, TypeError, ValueError) as exc:
            raise PipelineError(f"malformed billing row for order {order_id}") from exc
