from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class FoodResponse(BaseModel):
    food_id: str
    name: str
    price: float
    food_image: str
    menu_id: str
    created_at: datetime
    updated_at: datetime


class FoodPageResponse(BaseModel):
    total_count: int
    food_items: list[FoodResponse] = Field(default_factory=list)


class MenuResponse(BaseModel):
    menu_id: str
    name: str
    category: str
    start_date: datetime | None = None
    end_date: datetime | None = None
    created_at: datetime
    updated_at: datetime


class TableResponse(BaseModel):
    table_id: str
    table_number: int
    number_of_guests: int
    created_at: datetime
    updated_at: datetime


class OrderResponse(BaseModel):
    order_id: str
    table_id: str | None = None
    order_date: datetime
    created_at: datetime
    updated_at: datetime


class OrderItemResponse(BaseModel):
    order_item_id: str
    order_id: str
    food_id: str
    quantity: int
    unit_price: float
    created_at: datetime
    updated_at: datetime


class PlaceOrderResponse(BaseModel):
    order_id: str
    order_item_ids: list[str] = Field(default_factory=list)


class BillingLineResponse(BaseModel):
    order_item_id: str | None = None
    order_id: str
    table_id: str | None = None
    table_number: int | None = None
    food_name: str | None = None
    food_image: str | None = None
    price: float
    quantity: int
    amount: float


class BillingViewResponse(BaseModel):
    order_id: str
    table_id: str | None = None
    table_number: int | None = None
    payment_due: float
    total_count: int
    order_items: list[BillingLineResponse] = Field(default_factory=list)


class InvoiceResponse(BaseModel):
    invoice_id: str
    order_id: str
    payment_method: str | None = None
    payment_status: str
    payment_due_date: datetime
    created_at: datetime
    updated_at: datetime


class InvoiceViewResponse(BaseModel):
    invoice_id: str
    payment_method: str
    order_id: str
    payment_status: str
    payment_due: float
    table_number: int | None = None
    payment_due_date: datetime
    order_details: list[BillingLineResponse] = Field(default_factory=list)


class UserResponse(BaseModel):
    user_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    avatar: str | None = None
    created_at: datetime
    updated_at: datetime


class UserPageResponse(BaseModel):
    total_count: int
    user_items: list[UserResponse] = Field(default_factory=list)
