from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pymongo.collection import Collection

from rbo.application.ports.repositories import OrderItemRepository
from rbo.domain.common.clock import as_utc
from rbo.domain.common.ids import FoodId, OrderId, OrderItemId
from rbo.domain.order.entities import OrderItem
from rbo.infrastructure.db.errors import translate_store_errors
from rbo.infrastructure.db.repositories.documents import find_all, find_one, set_fields


class MongoOrderItemRepository(OrderItemRepository):
    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def add_many(self, items: list[OrderItem]) -> None:
        if not items:
            return
        with translate_store_errors("insert orderItem"):
            self._collection.insert_many([self._to_document(item) for item in items])

    def get(self, order_item_id: OrderItemId) -> OrderItem | None:
        document = find_one(self._collection, "order_item_id", str(order_item_id))
        if document is None:
            return None
        return self._to_domain(document)

    def update(self, item: OrderItem, fields: Iterable[str]) -> None:
        set_fields(self._collection, "order_item_id", self._to_document(item), fields)

    def list_all(self) -> list[OrderItem]:
        return [self._to_domain(document) for document in find_all(self._collection)]

    def _to_document(self, item: OrderItem) -> dict[str, Any]:
        return {
            "order_item_id": str(item.order_item_id),
            "order_id": str(item.order_id),
            "food_id": str(item.food_id),
            "quantity": item.quantity,
            "unit_price": item.unit_price,
            "created_at": item.created_at,
            "updated_at": item.updated_at,
        }

    def _to_domain(self, document: Mapping[str, Any]) -> OrderItem:
        return OrderItem(
            order_item_id=OrderItemId(document["order_item_id"]),
            order_id=OrderId(document["order_id"]),
            food_id=FoodId(document["food_id"]),
            quantity=int(document["quantity"]),
            unit_price=float(document["unit_price"]),
            created_at=as_utc(document["created_at"]),
            updated_at=as_utc(document["updated_at"]),
        )
