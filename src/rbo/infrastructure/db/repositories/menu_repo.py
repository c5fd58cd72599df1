from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pymongo.collection import Collection

from rbo.application.ports.repositories import MenuRepository
from rbo.domain.catalog.entities import Menu
from rbo.domain.common.clock import as_utc, as_utc_or_none
from rbo.domain.common.ids import MenuId
from rbo.infrastructure.db.repositories.documents import (
    find_all,
    find_one,
    insert_one,
    set_fields,
)


class MongoMenuRepository(MenuRepository):
    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def add(self, menu: Menu) -> None:
        insert_one(self._collection, self._to_document(menu))

    def get(self, menu_id: MenuId) -> Menu | None:
        document = find_one(self._collection, "menu_id", str(menu_id))
        if document is None:
            return None
        return self._to_domain(document)

    def update(self, menu: Menu, fields: Iterable[str]) -> None:
        set_fields(self._collection, "menu_id", self._to_document(menu), fields)

    def list_all(self) -> list[Menu]:
        return [self._to_domain(document) for document in find_all(self._collection)]

    def _to_document(self, menu: Menu) -> dict[str, Any]:
        return {
            "menu_id": str(menu.menu_id),
            "name": menu.name,
            "category": menu.category,
            "start_date": menu.start_date,
            "end_date": menu.end_date,
            "created_at": menu.created_at,
            "updated_at": menu.updated_at,
        }

    def _to_domain(self, document: Mapping[str, Any]) -> Menu:
        return Menu(
            menu_id=MenuId(document["menu_id"]),
            name=document["name"],
            category=document["category"],
            start_date=as_utc_or_none(document.get("start_date")),
            end_date=as_utc_or_none(document.get("end_date")),
            created_at=as_utc(document["created_at"]),
            updated_at=as_utc(document["updated_at"]),
        )
