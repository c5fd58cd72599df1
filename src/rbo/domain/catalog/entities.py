from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from rbo.domain.common.ids import FoodId, MenuId
from rbo.domain.common.money import is_normalized, normalize_amount


@dataclass(frozen=True)
class Food:
    food_id: FoodId
    name: str
    price: float
    food_image: str
    menu_id: MenuId
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("name must be non-empty")
        if not self.food_image.strip():
            raise ValueError("food_image must be non-empty")
        if self.price < 0:
            raise ValueError("price must be >= 0")
        if not is_normalized(self.price):
            raise ValueError("price must be normalized to 2 decimal places")


@dataclass(frozen=True)
class Menu:
    menu_id: MenuId
    name: str
    category: str
    start_date: datetime | None
    end_date: datetime | None
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("name must be non-empty")
        if not self.category.strip():
            raise ValueError("category must be non-empty")
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.end_date <= self.start_date
        ):
            raise ValueError("end_date must be after start_date")


def create_food(
    food_id: FoodId,
    name: str,
    price: float,
    food_image: str,
    menu_id: MenuId,
    now: datetime,
) -> Food:
    return Food(
        food_id=food_id,
        name=name,
        price=normalize_amount(price),
        food_image=food_image,
        menu_id=menu_id,
        created_at=now,
        updated_at=now,
    )


def is_upcoming_window(start: datetime, end: datetime, now: datetime) -> bool:
    return start > now and end > start
