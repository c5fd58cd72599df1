from __future__ import annotations

from fastapi import APIRouter, Depends, status

from rbo.api.dependencies import (
    StoreCollections,
    get_collections,
    get_publisher,
    trace_context,
)
from rbo.application.dto.requests import PlaceOrderRequest, UpdateOrderItemRequest
from rbo.application.dto.responses import OrderItemResponse, PlaceOrderResponse
from rbo.application.ports.publisher import EventPublisher
from rbo.application.use_cases.context import TraceContext
from rbo.application.use_cases.order_items import GetOrderItem, ListOrderItems, UpdateOrderItem
from rbo.application.use_cases.place_order import PlaceOrder
from rbo.domain.common.ids import OrderItemId
from rbo.infrastructure.db.repositories.food_repo import MongoFoodRepository
from rbo.infrastructure.db.repositories.order_item_repo import MongoOrderItemRepository
from rbo.infrastructure.db.repositories.order_repo import MongoOrderRepository
from rbo.infrastructure.db.repositories.table_repo import MongoTableRepository
from rbo.infrastructure.messaging.redis_publisher import events_channel

router = APIRouter()


def _place_order_use_case(
    collections: StoreCollections,
    publisher: EventPublisher,
) -> PlaceOrder:
    return PlaceOrder(
        food_repository=MongoFoodRepository(collections.food),
        table_repository=MongoTableRepository(collections.table),
        order_repository=MongoOrderRepository(collections.order),
        order_item_repository=MongoOrderItemRepository(collections.order_item),
        publisher=publisher,
        events_channel=events_channel(),
    )


def _update_order_item_use_case(collections: StoreCollections) -> UpdateOrderItem:
    return UpdateOrderItem(
        order_item_repository=MongoOrderItemRepository(collections.order_item),
        food_repository=MongoFoodRepository(collections.food),
    )


@router.post(
    "/v1/order-items",
    response_model=PlaceOrderResponse,
    status_code=status.HTTP_201_CREATED,
)
def place_order(
    request_dto: PlaceOrderRequest,
    collections: StoreCollections = Depends(get_collections),
    publisher: EventPublisher = Depends(get_publisher),
    trace_ctx: TraceContext = Depends(trace_context),
) -> PlaceOrderResponse:
    use_case = _place_order_use_case(collections, publisher)
    return use_case.execute(request_dto=request_dto, trace_ctx=trace_ctx)


@router.get("/v1/order-items", response_model=list[OrderItemResponse])
def list_order_items(
    collections: StoreCollections = Depends(get_collections),
) -> list[OrderItemResponse]:
    return ListOrderItems(MongoOrderItemRepository(collections.order_item)).execute()


@router.get("/v1/order-items/{order_item_id}", response_model=OrderItemResponse)
def get_order_item(
    order_item_id: str,
    collections: StoreCollections = Depends(get_collections),
) -> OrderItemResponse:
    use_case = GetOrderItem(MongoOrderItemRepository(collections.order_item))
    return use_case.execute(order_item_id=OrderItemId(order_item_id))


@router.patch("/v1/order-items/{order_item_id}", response_model=OrderItemResponse)
def update_order_item(
    order_item_id: str,
    request_dto: UpdateOrderItemRequest,
    collections: StoreCollections = Depends(get_collections),
) -> OrderItemResponse:
    return _update_order_item_use_case(collections).execute(
        order_item_id=OrderItemId(order_item_id),
        request_dto=request_dto,
    )
