from __future__ import annotations

from pymongo import ASCENDING

from rbo.infrastructure.db.collections import StoreCollections


def ensure_indexes(collections: StoreCollections) -> None:
    collections.food.create_index([("food_id", ASCENDING)], unique=True)
    collections.food.create_index([("menu_id", ASCENDING)])
    collections.menu.create_index([("menu_id", ASCENDING)], unique=True)
    collections.table.create_index([("table_id", ASCENDING)], unique=True)
    collections.order.create_index([("order_id", ASCENDING)], unique=True)
    collections.order_item.create_index([("order_item_id", ASCENDING)], unique=True)
    collections.order_item.create_index([("order_id", ASCENDING)])
    collections.invoice.create_index([("invoice_id", ASCENDING)], unique=True)
    collections.user.create_index([("user_id", ASCENDING)], unique=True)
    collections.user.create_index([("email", ASCENDING)], unique=True)
    collections.user.create_index([("phone", ASCENDING)], unique=True)
