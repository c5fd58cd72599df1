from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from rbo.application.dto.requests import (
    CreateFoodRequest,
    CreateMenuRequest,
    UpdateFoodRequest,
    UpdateMenuRequest,
)
from rbo.application.errors import FoodNotFoundError, InvalidPageError, MenuNotFoundError
from rbo.application.use_cases.foods import CreateFood, ListFoods, UpdateFood
from rbo.application.use_cases.menus import CreateMenu, InvalidMenuWindowError, UpdateMenu
from rbo.domain.common.ids import FoodId, MenuId
from rbo.infrastructure.db.repositories.food_repo import MongoFoodRepository
from rbo.infrastructure.db.repositories.menu_repo import MongoMenuRepository


def _menu(store, name: str = "Lunch") -> str:
    use_case = CreateMenu(MongoMenuRepository(store.menu))
    return use_case.execute(CreateMenuRequest(name=name, category="mains")).menu_id


def _create_food(store) -> CreateFood:
    return CreateFood(MongoFoodRepository(store.food), MongoMenuRepository(store.menu))


def _update_food(store) -> UpdateFood:
    return UpdateFood(MongoFoodRepository(store.food), MongoMenuRepository(store.menu))


def test_create_food_normalizes_price(store) -> None:
    menu_id = _menu(store)

    food = _create_food(store).execute(
        CreateFoodRequest(name="Green Curry", price=11.995, food_image="curry.jpg", menu_id=menu_id)
    )

    assert food.price == 12.0
    stored = store.food.find_one({"food_id": food.food_id})
    assert stored["price"] == 12.0
    assert stored["menu_id"] == menu_id


def test_create_food_requires_existing_menu(store) -> None:
    with pytest.raises(MenuNotFoundError):
        _create_food(store).execute(
            CreateFoodRequest(name="Green Curry", price=11.0, food_image="c.jpg", menu_id="men_x")
        )
    assert store.food.count_documents({}) == 0


def test_update_food_writes_menu_id_and_only_patched_fields(store) -> None:
    first_menu = _menu(store, "Lunch")
    second_menu = _menu(store, "Dinner")
    food = _create_food(store).execute(
        CreateFoodRequest(name="Green Curry", price=11.0, food_image="c.jpg", menu_id=first_menu)
    )

    updated = _update_food(store).execute(
        FoodId(food.food_id),
        UpdateFoodRequest(menu_id=second_menu, price=9.499),
    )

    assert updated.menu_id == second_menu
    assert updated.price == 9.5
    assert updated.name == "Green Curry"
    stored = store.food.find_one({"food_id": food.food_id}, {"_id": 0})
    assert stored["menu_id"] == second_menu
    assert stored["price"] == 9.5
    assert "menu" not in stored


def test_update_food_rejects_unknown_menu(store) -> None:
    menu_id = _menu(store)
    food = _create_food(store).execute(
        CreateFoodRequest(name="Green Curry", price=11.0, food_image="c.jpg", menu_id=menu_id)
    )

    with pytest.raises(MenuNotFoundError):
        _update_food(store).execute(FoodId(food.food_id), UpdateFoodRequest(menu_id="men_x"))

    assert store.food.find_one({"food_id": food.food_id})["menu_id"] == menu_id


def test_update_unknown_food(store) -> None:
    with pytest.raises(FoodNotFoundError):
        _update_food(store).execute(FoodId("fod_missing"), UpdateFoodRequest(name="Soup"))
    assert store.food.count_documents({}) == 0


def test_list_foods_pages(store) -> None:
    menu_id = _menu(store)
    create = _create_food(store)
    for index in range(7):
        create.execute(
            CreateFoodRequest(
                name=f"Dish {index}",
                price=float(index + 1),
                food_image=f"{index}.jpg",
                menu_id=menu_id,
            )
        )

    page = ListFoods(MongoFoodRepository(store.food)).execute(page=2, page_size=3)

    assert page.total_count == 7
    assert [food.name for food in page.food_items] == ["Dish 3", "Dish 4", "Dish 5"]


def test_list_foods_rejects_page_below_one(store) -> None:
    with pytest.raises(InvalidPageError):
        ListFoods(MongoFoodRepository(store.food)).execute(page=0, page_size=10)


def test_menu_window_must_be_upcoming(store) -> None:
    menu_id = MenuId(_menu(store))
    use_case = UpdateMenu(MongoMenuRepository(store.menu))
    now = datetime.now(timezone.utc)

    with pytest.raises(InvalidMenuWindowError):
        use_case.execute(
            menu_id,
            UpdateMenuRequest(start_date=now - timedelta(days=1), end_date=now + timedelta(days=1)),
        )

    updated = use_case.execute(
        menu_id,
        UpdateMenuRequest(start_date=now + timedelta(days=1), end_date=now + timedelta(days=8)),
    )
    assert updated.start_date is not None
    assert updated.end_date is not None
    assert updated.end_date > updated.start_date
