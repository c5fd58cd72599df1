from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from rbo.domain.invoice.entities import PaymentMethod, PaymentStatus


class RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class CreateFoodRequest(RequestModel):
    name: str = Field(min_length=2, max_length=100)
    price: float
    food_image: str
    menu_id: str


class UpdateFoodRequest(RequestModel):
    name: str | None = Field(default=None, min_length=2, max_length=100)
    price: float | None = None
    food_image: str | None = None
    menu_id: str | None = None


class CreateMenuRequest(RequestModel):
    name: str
    category: str
    start_date: datetime | None = None
    end_date: datetime | None = None


class UpdateMenuRequest(RequestModel):
    name: str | None = None
    category: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class CreateTableRequest(RequestModel):
    table_number: int
    number_of_guests: int


class UpdateTableRequest(RequestModel):
    table_number: int | None = None
    number_of_guests: int | None = None


class CreateOrderRequest(RequestModel):
    table_id: str | None = None


class UpdateOrderRequest(RequestModel):
    table_id: str | None = None


class PlaceOrderItemRequest(RequestModel):
    food_id: str
    quantity: int
    unit_price: float


class PlaceOrderRequest(RequestModel):
    table_id: str | None = None
    order_items: list[PlaceOrderItemRequest] = Field(min_length=1)


class UpdateOrderItemRequest(RequestModel):
    unit_price: float | None = None
    quantity: int | None = None
    food_id: str | None = None


class CreateInvoiceRequest(RequestModel):
    order_id: str
    payment_method: PaymentMethod | None = None
    payment_status: PaymentStatus | None = None


class UpdateInvoiceRequest(RequestModel):
    payment_method: PaymentMethod | None = None
    payment_status: PaymentStatus | None = None


class SignUpRequest(RequestModel):
    first_name: str = Field(min_length=2, max_length=100)
    last_name: str = Field(min_length=2, max_length=100)
    email: str
    phone: str
    password: str = Field(min_length=6, max_length=72)
    avatar: str | None = None
