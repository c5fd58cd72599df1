from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

from rbo.domain.billing.views import BillingView
from rbo.domain.catalog.entities import Food, Menu
from rbo.domain.common.ids import (
    FoodId,
    InvoiceId,
    MenuId,
    OrderId,
    OrderItemId,
    TableId,
    UserId,
)
from rbo.domain.invoice.entities import Invoice
from rbo.domain.order.entities import Order, OrderItem
from rbo.domain.table.entities import Table
from rbo.domain.user.entities import User

T = TypeVar("T")


@dataclass(frozen=True)
class PageData(Generic[T]):
    items: list[T] = field(default_factory=list)
    total_count: int = 0


class FoodRepository(Protocol):
    def add(self, food: Food) -> None: ...

    def get(self, food_id: FoodId) -> Food | None: ...

    def get_many(self, food_ids: Iterable[FoodId]) -> dict[FoodId, Food]: ...

    def update(self, food: Food, fields: Iterable[str]) -> None: ...

    def list_page(self, page: int, page_size: int) -> PageData[Food]: ...


class MenuRepository(Protocol):
    def add(self, menu: Menu) -> None: ...

    def get(self, menu_id: MenuId) -> Menu | None: ...

    def update(self, menu: Menu, fields: Iterable[str]) -> None: ...

    def list_all(self) -> list[Menu]: ...


class TableRepository(Protocol):
    def add(self, table: Table) -> None: ...

    def get(self, table_id: TableId) -> Table | None: ...

    def update(self, table: Table, fields: Iterable[str]) -> None: ...

    def list_all(self) -> list[Table]: ...


class OrderRepository(Protocol):
    def add(self, order: Order) -> None: ...

    def get(self, order_id: OrderId) -> Order | None: ...

    def update(self, order: Order, fields: Iterable[str]) -> None: ...

    def list_all(self) -> list[Order]: ...


class OrderItemRepository(Protocol):
    def add_many(self, items: list[OrderItem]) -> None: ...

    def get(self, order_item_id: OrderItemId) -> OrderItem | None: ...

    def update(self, item: OrderItem, fields: Iterable[str]) -> None: ...

    def list_all(self) -> list[OrderItem]: ...


class InvoiceRepository(Protocol):
    def add(self, invoice: Invoice) -> None: ...

    def get(self, invoice_id: InvoiceId) -> Invoice | None: ...

    def update(self, invoice: Invoice, fields: Iterable[str]) -> None: ...

    def list_all(self) -> list[Invoice]: ...


class UserRepository(Protocol):
    def add(self, user: User) -> None: ...

    def get(self, user_id: UserId) -> User | None: ...

    def count_with_identity(self, email: str, phone: str) -> int: ...

    def list_page(self, page: int, page_size: int) -> PageData[User]: ...


class BillingQuery(Protocol):
    def compute_billing(self, order_id: OrderId) -> list[BillingView]: ...


class StoreError(Exception):
    pass


class PipelineError(StoreError):
    pass


class StoreTimeoutError(StoreError):
    pass


class DuplicateRecordError(StoreError):
    pass
