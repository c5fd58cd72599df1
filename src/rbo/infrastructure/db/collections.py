from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pymongo.collection import Collection
from pymongo.database import Database

from rbo.infrastructure.db.client import get_database

FOOD = "food"
MENU = "menu"
TABLE = "table"
ORDER = "order"
ORDER_ITEM = "orderItem"
INVOICE = "invoice"
USER = "user"


@dataclass(frozen=True)
class StoreCollections:
    """One handle per collection, built once and shared by every request."""

    food: Collection
    menu: Collection
    table: Collection
    order: Collection
    order_item: Collection
    invoice: Collection
    user: Collection

    @classmethod
    def from_database(cls, database: Database) -> StoreCollections:
        return cls(
            food=database[FOOD],
            menu=database[MENU],
            table=database[TABLE],
            order=database[ORDER],
            order_item=database[ORDER_ITEM],
            invoice=database[INVOICE],
            user=database[USER],
        )


@lru_cache(maxsize=1)
def get_collections() -> StoreCollections:
    return StoreCollections.from_database(get_database())
