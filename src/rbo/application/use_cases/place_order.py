from __future__ import annotations

import logging
from datetime import datetime, timezone

from rbo.application.dto.requests import PlaceOrderRequest
from rbo.application.dto.responses import PlaceOrderResponse
from rbo.application.errors import FoodNotFoundError, InvalidInputError, TableNotFoundError
from rbo.application.mappers.event_envelope import serialize_order_placed_event
from rbo.application.metrics.back_office import record_order_placed, record_order_rejected
from rbo.application.ports.publisher import EventPublisher
from rbo.application.ports.repositories import (
    FoodRepository,
    OrderItemRepository,
    OrderRepository,
    TableRepository,
)
from rbo.application.use_cases.context import TraceContext
from rbo.application.use_cases.publishing import DEFAULT_EVENTS_CHANNEL, publish_best_effort
from rbo.domain.common.ids import FoodId, OrderId, OrderItemId, TableId, new_identifier
from rbo.domain.order.entities import OrderItem, create_order, create_order_item

logger = logging.getLogger(__name__)


class InvalidOrderItemError(InvalidInputError):
    pass


class PlaceOrder:
    """Creates an order and its batch of order items.

    Every requested item is validated, and every food and table reference is
    resolved, before the first write. A rejected request leaves no order and
    no order item behind.
    """

    def __init__(
        self,
        food_repository: FoodRepository,
        table_repository: TableRepository,
        order_repository: OrderRepository,
        order_item_repository: OrderItemRepository,
        publisher: EventPublisher,
        events_channel: str = DEFAULT_EVENTS_CHANNEL,
    ) -> None:
        self._food_repository = food_repository
        self._table_repository = table_repository
        self._order_repository = order_repository
        self._order_item_repository = order_item_repository
        self._publisher = publisher
        self._events_channel = events_channel

    def execute(
        self,
        request_dto: PlaceOrderRequest,
        trace_ctx: TraceContext,
    ) -> PlaceOrderResponse:
        now = datetime.now(timezone.utc)
        table_id = TableId(request_dto.table_id) if request_dto.table_id else None
        order = create_order(
            order_id=OrderId(new_identifier("ord")),
            table_id=table_id,
            now=now,
        )

        order_items: list[OrderItem] = []
        for position, request_item in enumerate(request_dto.order_items):
            try:
                order_items.append(
                    create_order_item(
                        order_item_id=OrderItemId(new_identifier("oit")),
                        order_id=order.order_id,
                        food_id=FoodId(request_item.food_id),
                        quantity=request_item.quantity,
                        unit_price=request_item.unit_price,
                        now=now,
                    )
                )
            except ValueError as exc:
                record_order_rejected("invalid_item")
                raise InvalidOrderItemError(f"order item {position}: {exc}") from exc

        if table_id is not None and self._table_repository.get(table_id) is None:
            record_order_rejected("table_not_found")
            raise TableNotFoundError(f"table {table_id} not found")

        requested_food_ids = list(dict.fromkeys(item.food_id for item in order_items))
        known_foods = self._food_repository.get_many(requested_food_ids)
        missing = [food_id for food_id in requested_food_ids if food_id not in known_foods]
        if missing:
            record_order_rejected("food_not_found")
            raise FoodNotFoundError(f"food not found: {', '.join(missing)}")

        self._order_repository.add(order)
        self._order_item_repository.add_many(order_items)

        record_order_placed(item_count=len(order_items))
        logger.info(
            "order_placed",
            extra={"order_id": str(order.order_id), "item_count": len(order_items)},
        )
        message = serialize_order_placed_event(
            occurred_at=now,
            order=order,
            items=order_items,
            trace_id=trace_ctx.trace_id,
            request_id=trace_ctx.request_id,
            caller_id=trace_ctx.caller_id,
        )
        publish_best_effort(self._publisher, self._events_channel, message)

        return PlaceOrderResponse(
            order_id=str(order.order_id),
            order_item_ids=[str(item.order_item_id) for item in order_items],
        )
