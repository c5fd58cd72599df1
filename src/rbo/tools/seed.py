from __future__ import annotations

from datetime import datetime, timezone

from rbo.infrastructure.db.client import get_database
from rbo.infrastructure.db.collections import StoreCollections
from rbo.infrastructure.db.indexes import ensure_indexes

DEMO_MENU_ID = "men_demo000001"


def main() -> None:
    collections = StoreCollections.from_database(get_database(timeout_seconds=2.0))
    ensure_indexes(collections)
    now = datetime.now(timezone.utc)

    collections.menu.update_one(
        {"menu_id": DEMO_MENU_ID},
        {
            "$set": {"name": "House Menu", "category": "dinner", "updated_at": now},
            "$setOnInsert": {
                "menu_id": DEMO_MENU_ID,
                "start_date": None,
                "end_date": None,
                "created_at": now,
            },
        },
        upsert=True,
    )

    foods = [
        {"food_id": "fod_demo000001", "name": "Margherita Pizza", "price": 14.5},
        {"food_id": "fod_demo000002", "name": "Chicken Alfredo", "price": 16.9},
        {"food_id": "fod_demo000003", "name": "Caesar Salad", "price": 9.9},
        {"food_id": "fod_demo000004", "name": "Tiramisu", "price": 8.5},
    ]
    for food in foods:
        collections.food.update_one(
            {"food_id": food["food_id"]},
            {
                "$set": {
                    "name": food["name"],
                    "price": food["price"],
                    "food_image": f"https://images.example.com/{food['food_id']}.jpg",
                    "menu_id": DEMO_MENU_ID,
                    "updated_at": now,
                },
                "$setOnInsert": {"food_id": food["food_id"], "created_at": now},
            },
            upsert=True,
        )

    for table_number, guests in ((1, 2), (2, 4), (3, 6)):
        table_id = f"tbl_demo{table_number:06d}"
        collections.table.update_one(
            {"table_id": table_id},
            {
                "$set": {
                    "table_number": table_number,
                    "number_of_guests": guests,
                    "updated_at": now,
                },
                "$setOnInsert": {"table_id": table_id, "created_at": now},
            },
            upsert=True,
        )

    print("seed complete")


if __name__ == "__main__":
    main()
