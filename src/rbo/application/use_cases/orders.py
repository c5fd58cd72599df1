from __future__ import annotations

from datetime import datetime, timezone

from rbo.application.dto.requests import CreateOrderRequest, UpdateOrderRequest
from rbo.application.dto.responses import OrderResponse
from rbo.application.errors import OrderNotFoundError, TableNotFoundError
from rbo.application.mappers.order_mapper import to_order_response
from rbo.application.ports.repositories import OrderRepository, TableRepository
from rbo.application.use_cases.patching import apply_patch, patched_fields, present_fields
from rbo.domain.common.ids import OrderId, TableId, new_identifier
from rbo.domain.order.entities import create_order


class CreateOrder:
    def __init__(
        self,
        order_repository: OrderRepository,
        table_repository: TableRepository,
    ) -> None:
        self._order_repository = order_repository
        self._table_repository = table_repository

    def execute(self, request_dto: CreateOrderRequest) -> OrderResponse:
        table_id = TableId(request_dto.table_id) if request_dto.table_id else None
        if table_id is not None and self._table_repository.get(table_id) is None:
            raise TableNotFoundError(f"table {table_id} not found")

        order = create_order(
            order_id=OrderId(new_identifier("ord")),
            table_id=table_id,
            now=datetime.now(timezone.utc),
        )
        self._order_repository.add(order)
        return to_order_response(order)


class GetOrder:
    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self, order_id: OrderId) -> OrderResponse:
        order = self._order_repository.get(order_id)
        if order is None:
            raise OrderNotFoundError(f"order {order_id} not found")
        return to_order_response(order)


class ListOrders:
    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self) -> list[OrderResponse]:
        return [to_order_response(order) for order in self._order_repository.list_all()]


class UpdateOrder:
    def __init__(
        self,
        order_repository: OrderRepository,
        table_repository: TableRepository,
    ) -> None:
        self._order_repository = order_repository
        self._table_repository = table_repository

    def execute(self, order_id: OrderId, request_dto: UpdateOrderRequest) -> OrderResponse:
        order = self._order_repository.get(order_id)
        if order is None:
            raise OrderNotFoundError(f"order {order_id} not found")

        changes = present_fields(request_dto)
        if "table_id" in changes:
            table_id = TableId(changes["table_id"])
            if self._table_repository.get(table_id) is None:
                raise TableNotFoundError(f"table {table_id} not found")
            changes["table_id"] = table_id

        updated = apply_patch(order, changes, datetime.now(timezone.utc))
        self._order_repository.update(updated, fields=patched_fields(changes))
        return to_order_response(updated)
