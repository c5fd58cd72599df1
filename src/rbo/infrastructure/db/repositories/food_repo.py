from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pymongo.collection import Collection

from rbo.application.ports.repositories import FoodRepository, PageData
from rbo.domain.catalog.entities import Food
from rbo.domain.common.clock import as_utc
from rbo.domain.common.ids import FoodId, MenuId
from rbo.infrastructure.db.aggregations.pagination import list_page
from rbo.infrastructure.db.errors import translate_store_errors
from rbo.infrastructure.db.repositories.documents import NO_ID, find_one, insert_one, set_fields


class MongoFoodRepository(FoodRepository):
    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def add(self, food: Food) -> None:
        insert_one(self._collection, self._to_document(food))

    def get(self, food_id: FoodId) -> Food | None:
        document = find_one(self._collection, "food_id", str(food_id))
        if document is None:
            return None
        return self._to_domain(document)

    def get_many(self, food_ids: Iterable[FoodId]) -> dict[FoodId, Food]:
        wanted = sorted({str(food_id) for food_id in food_ids})
        if not wanted:
            return {}
        with translate_store_errors("get food"):
            documents = list(self._collection.find({"food_id": {"$in": wanted}}, NO_ID))
        foods = [self._to_domain(document) for document in documents]
        return {food.food_id: food for food in foods}

    def update(self, food: Food, fields: Iterable[str]) -> None:
        set_fields(self._collection, "food_id", self._to_document(food), fields)

    def list_page(self, page: int, page_size: int) -> PageData[Food]:
        result = list_page(self._collection, {}, page, page_size)
        return PageData(
            items=[self._to_domain(document) for document in result.items],
            total_count=result.total_count,
        )

    def _to_document(self, food: Food) -> dict[str, Any]:
        return {
            "food_id": str(food.food_id),
            "name": food.name,
            "price": food.price,
            "food_image": food.food_image,
            "menu_id": str(food.menu_id),
            "created_at": food.created_at,
            "updated_at": food.updated_at,
        }

    def _to_domain(self, document: Mapping[str, Any]) -> Food:
        return Food(
            food_id=FoodId(document["food_id"]),
            name=document["name"],
            price=float(document["price"]),
            food_image=document["food_image"],
            menu_id=MenuId(document["menu_id"]),
            created_at=as_utc(document["created_at"]),
            updated_at=as_utc(document["updated_at"]),
        )
