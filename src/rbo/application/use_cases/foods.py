from __future__ import annotations

from datetime import datetime, timezone

from rbo.application.dto.requests import CreateFoodRequest, UpdateFoodRequest
from rbo.application.dto.responses import FoodPageResponse, FoodResponse
from rbo.application.errors import FoodNotFoundError, InvalidInputError, MenuNotFoundError
from rbo.application.mappers.catalog_mapper import to_food_response
from rbo.application.ports.repositories import FoodRepository, MenuRepository
from rbo.application.use_cases.paging import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, ensure_valid_page
from rbo.application.use_cases.patching import apply_patch, patched_fields, present_fields
from rbo.domain.catalog.entities import create_food
from rbo.domain.common.ids import FoodId, MenuId, new_identifier
from rbo.domain.common.money import normalize_amount


class CreateFood:
    def __init__(self, food_repository: FoodRepository, menu_repository: MenuRepository) -> None:
        self._food_repository = food_repository
        self._menu_repository = menu_repository

    def execute(self, request_dto: CreateFoodRequest) -> FoodResponse:
        try:
            food = create_food(
                food_id=FoodId(new_identifier("fod")),
                name=request_dto.name,
                price=request_dto.price,
                food_image=request_dto.food_image,
                menu_id=MenuId(request_dto.menu_id),
                now=datetime.now(timezone.utc),
            )
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc

        if self._menu_repository.get(food.menu_id) is None:
            raise MenuNotFoundError(f"menu {food.menu_id} not found")

        self._food_repository.add(food)
        return to_food_response(food)


class GetFood:
    def __init__(self, food_repository: FoodRepository) -> None:
        self._food_repository = food_repository

    def execute(self, food_id: FoodId) -> FoodResponse:
        food = self._food_repository.get(food_id)
        if food is None:
            raise FoodNotFoundError(f"food {food_id} not found")
        return to_food_response(food)


class ListFoods:
    def __init__(self, food_repository: FoodRepository) -> None:
        self._food_repository = food_repository

    def execute(
        self,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> FoodPageResponse:
        ensure_valid_page(page, page_size)
        result = self._food_repository.list_page(page=page, page_size=page_size)
        return FoodPageResponse(
            total_count=result.total_count,
            food_items=[to_food_response(food) for food in result.items],
        )


class UpdateFood:
    def __init__(self, food_repository: FoodRepository, menu_repository: MenuRepository) -> None:
        self._food_repository = food_repository
        self._menu_repository = menu_repository

    def execute(self, food_id: FoodId, request_dto: UpdateFoodRequest) -> FoodResponse:
        food = self._food_repository.get(food_id)
        if food is None:
            raise FoodNotFoundError(f"food {food_id} not found")

        changes = present_fields(request_dto)
        if "price" in changes:
            try:
                changes["price"] = normalize_amount(changes["price"])
            except ValueError as exc:
                raise InvalidInputError(str(exc)) from exc
        if "menu_id" in changes:
            menu_id = MenuId(changes["menu_id"])
            if self._menu_repository.get(menu_id) is None:
                raise MenuNotFoundError(f"menu {menu_id} not found")
            changes["menu_id"] = menu_id

        updated = apply_patch(food, changes, datetime.now(timezone.utc))
        self._food_repository.update(updated, fields=patched_fields(changes))
        return to_food_response(updated)
