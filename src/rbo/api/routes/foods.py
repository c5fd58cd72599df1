from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from rbo.api.dependencies import StoreCollections, get_collections
from rbo.application.dto.requests import CreateFoodRequest, UpdateFoodRequest
from rbo.application.dto.responses import FoodPageResponse, FoodResponse
from rbo.application.use_cases.foods import CreateFood, GetFood, ListFoods, UpdateFood
from rbo.application.use_cases.paging import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from rbo.domain.common.ids import FoodId
from rbo.infrastructure.db.repositories.food_repo import MongoFoodRepository
from rbo.infrastructure.db.repositories.menu_repo import MongoMenuRepository

router = APIRouter()


def _create_food_use_case(collections: StoreCollections) -> CreateFood:
    return CreateFood(
        food_repository=MongoFoodRepository(collections.food),
        menu_repository=MongoMenuRepository(collections.menu),
    )


def _update_food_use_case(collections: StoreCollections) -> UpdateFood:
    return UpdateFood(
        food_repository=MongoFoodRepository(collections.food),
        menu_repository=MongoMenuRepository(collections.menu),
    )


@router.post("/v1/foods", response_model=FoodResponse, status_code=status.HTTP_201_CREATED)
def create_food(
    request_dto: CreateFoodRequest,
    collections: StoreCollections = Depends(get_collections),
) -> FoodResponse:
    return _create_food_use_case(collections).execute(request_dto=request_dto)


@router.get("/v1/foods", response_model=FoodPageResponse)
def list_foods(
    page: int = Query(default=DEFAULT_PAGE),
    record_per_page: int = Query(default=DEFAULT_PAGE_SIZE, alias="recordPerPage"),
    collections: StoreCollections = Depends(get_collections),
) -> FoodPageResponse:
    use_case = ListFoods(food_repository=MongoFoodRepository(collections.food))
    return use_case.execute(page=page, page_size=record_per_page)


@router.get("/v1/foods/{food_id}", response_model=FoodResponse)
def get_food(
    food_id: str,
    collections: StoreCollections = Depends(get_collections),
) -> FoodResponse:
    use_case = GetFood(food_repository=MongoFoodRepository(collections.food))
    return use_case.execute(food_id=FoodId(food_id))


@router.patch("/v1/foods/{food_id}", response_model=FoodResponse)
def update_food(
    food_id: str,
    request_dto: UpdateFoodRequest,
    collections: StoreCollections = Depends(get_collections),
) -> FoodResponse:
    return _update_food_use_case(collections).execute(
        food_id=FoodId(food_id),
        request_dto=request_dto,
    )
