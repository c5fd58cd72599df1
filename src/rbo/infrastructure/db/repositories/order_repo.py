from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pymongo.collection import Collection

from rbo.application.ports.repositories import OrderRepository
from rbo.domain.common.clock import as_utc
from rbo.domain.common.ids import OrderId, TableId
from rbo.domain.order.entities import Order
from rbo.infrastructure.db.repositories.documents import (
    find_all,
    find_one,
    insert_one,
    set_fields,
)


class MongoOrderRepository(OrderRepository):
    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def add(self, order: Order) -> None:
        insert_one(self._collection, self._to_document(order))

    def get(self, order_id: OrderId) -> Order | None:
        document = find_one(self._collection, "order_id", str(order_id))
        if document is None:
            return None
        return self._to_domain(document)

    def update(self, order: Order, fields: Iterable[str]) -> None:
        set_fields(self._collection, "order_id", self._to_document(order), fields)

    def list_all(self) -> list[Order]:
        return [self._to_domain(document) for document in find_all(self._collection)]

    def _to_document(self, order: Order) -> dict[str, Any]:
        return {
            "order_id": str(order.order_id),
            "table_id": str(order.table_id) if order.table_id else None,
            "order_date": order.order_date,
            "created_at": order.created_at,
            "updated_at": order.updated_at,
        }

    def _to_domain(self, document: Mapping[str, Any]) -> Order:
        table_id = document.get("table_id")
        return Order(
            order_id=OrderId(document["order_id"]),
            table_id=TableId(table_id) if table_id else None,
            order_date=as_utc(document["order_date"]),
            created_at=as_utc(document["created_at"]),
            updated_at=as_utc(document["updated_at"]),
        )
