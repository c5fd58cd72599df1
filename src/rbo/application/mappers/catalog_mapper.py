from __future__ import annotations

from rbo.application.dto.responses import FoodResponse, MenuResponse
from rbo.domain.catalog.entities import Food, Menu


def to_food_response(food: Food) -> FoodResponse:
    return FoodResponse(
        food_id=str(food.food_id),
        name=food.name,
        price=food.price,
        food_image=food.food_image,
        menu_id=str(food.menu_id),
        created_at=food.created_at,
        updated_at=food.updated_at,
    )


def to_menu_response(menu: Menu) -> MenuResponse:
    return MenuResponse(
        menu_id=str(menu.menu_id),
        name=menu.name,
        category=menu.category,
        start_date=menu.start_date,
        end_date=menu.end_date,
        created_at=menu.created_at,
        updated_at=menu.updated_at,
    )
