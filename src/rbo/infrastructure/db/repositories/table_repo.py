from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pymongo.collection import Collection

from rbo.application.ports.repositories import TableRepository
from rbo.domain.common.clock import as_utc
from rbo.domain.common.ids import TableId
from rbo.domain.table.entities import Table
from rbo.infrastructure.db.repositories.documents import (
    find_all,
    find_one,
    insert_one,
    set_fields,
)


class MongoTableRepository(TableRepository):
    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def add(self, table: Table) -> None:
        insert_one(self._collection, self._to_document(table))

    def get(self, table_id: TableId) -> Table | None:
        document = find_one(self._collection, "table_id", str(table_id))
        if document is None:
            return None
        return self._to_domain(document)

    def update(self, table: Table, fields: Iterable[str]) -> None:
        set_fields(self._collection, "table_id", self._to_document(table), fields)

    def list_all(self) -> list[Table]:
        return [self._to_domain(document) for document in find_all(self._collection)]

    def _to_document(self, table: Table) -> dict[str, Any]:
        return {
            "table_id": str(table.table_id),
            "table_number": table.table_number,
            "number_of_guests": table.number_of_guests,
            "created_at": table.created_at,
            "updated_at": table.updated_at,
        }

    def _to_domain(self, document: Mapping[str, Any]) -> Table:
        return Table(
            table_id=TableId(document["table_id"]),
            table_number=int(document["table_number"]),
            number_of_guests=int(document["number_of_guests"]),
            created_at=as_utc(document["created_at"]),
            updated_at=as_utc(document["updated_at"]),
        )
