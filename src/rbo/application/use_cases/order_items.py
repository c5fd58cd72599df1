from __future__ import annotations

from datetime import datetime, timezone

from rbo.application.dto.requests import UpdateOrderItemRequest
from rbo.application.dto.responses import OrderItemResponse
from rbo.application.errors import FoodNotFoundError, InvalidInputError, OrderItemNotFoundError
from rbo.application.mappers.order_mapper import to_order_item_response
from rbo.application.ports.repositories import FoodRepository, OrderItemRepository
from rbo.application.use_cases.patching import apply_patch, patched_fields, present_fields
from rbo.domain.common.ids import FoodId, OrderItemId
from rbo.domain.common.money import normalize_amount


class GetOrderItem:
    def __init__(self, order_item_repository: OrderItemRepository) -> None:
        self._order_item_repository = order_item_repository

    def execute(self, order_item_id: OrderItemId) -> OrderItemResponse:
        item = self._order_item_repository.get(order_item_id)
        if item is None:
            raise OrderItemNotFoundError(f"order item {order_item_id} not found")
        return to_order_item_response(item)


class ListOrderItems:
    def __init__(self, order_item_repository: OrderItemRepository) -> None:
        self._order_item_repository = order_item_repository

    def execute(self) -> list[OrderItemResponse]:
        return [to_order_item_response(item) for item in self._order_item_repository.list_all()]


class UpdateOrderItem:
    """Corrects the price, quantity or food of a single placed order item."""

    def __init__(
        self,
        order_item_repository: OrderItemRepository,
        food_repository: FoodRepository,
    ) -> None:
        self._order_item_repository = order_item_repository
        self._food_repository = food_repository

    def execute(
        self,
        order_item_id: OrderItemId,
        request_dto: UpdateOrderItemRequest,
    ) -> OrderItemResponse:
        item = self._order_item_repository.get(order_item_id)
        if item is None:
            raise OrderItemNotFoundError(f"order item {order_item_id} not found")

        changes = present_fields(request_dto)
        if "unit_price" in changes:
            try:
                changes["unit_price"] = normalize_amount(changes["unit_price"])
            except ValueError as exc:
                raise InvalidInputError(str(exc)) from exc
        if "food_id" in changes:
            food_id = FoodId(changes["food_id"])
            if self._food_repository.get(food_id) is None:
                raise FoodNotFoundError(f"food {food_id} not found")
            changes["food_id"] = food_id

        updated = apply_patch(item, changes, datetime.now(timezone.utc))
        self._order_item_repository.update(updated, fields=patched_fields(changes))
        return to_order_item_response(updated)
