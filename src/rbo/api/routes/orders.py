from __future__ import annotations

from fastapi import APIRouter, Depends, status

from rbo.api.dependencies import StoreCollections, get_collections
from rbo.application.dto.requests import CreateOrderRequest, UpdateOrderRequest
from rbo.application.dto.responses import BillingViewResponse, OrderResponse
from rbo.application.use_cases.order_billing import GetOrderBilling
from rbo.application.use_cases.orders import CreateOrder, GetOrder, ListOrders, UpdateOrder
from rbo.domain.common.ids import OrderId
from rbo.infrastructure.db.aggregations.billing import MongoBillingQuery
from rbo.infrastructure.db.repositories.order_repo import MongoOrderRepository
from rbo.infrastructure.db.repositories.table_repo import MongoTableRepository

router = APIRouter()


def _create_order_use_case(collections: StoreCollections) -> CreateOrder:
    return CreateOrder(
        order_repository=MongoOrderRepository(collections.order),
        table_repository=MongoTableRepository(collections.table),
    )


def _update_order_use_case(collections: StoreCollections) -> UpdateOrder:
    return UpdateOrder(
        order_repository=MongoOrderRepository(collections.order),
        table_repository=MongoTableRepository(collections.table),
    )


def _order_billing_use_case(collections: StoreCollections) -> GetOrderBilling:
    return GetOrderBilling(billing_query=MongoBillingQuery(collections.order_item))


@router.post("/v1/orders", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    request_dto: CreateOrderRequest,
    collections: StoreCollections = Depends(get_collections),
) -> OrderResponse:
    return _create_order_use_case(collections).execute(request_dto=request_dto)


@router.get("/v1/orders", response_model=list[OrderResponse])
def list_orders(collections: StoreCollections = Depends(get_collections)) -> list[OrderResponse]:
    return ListOrders(MongoOrderRepository(collections.order)).execute()


@router.get("/v1/orders/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: str,
    collections: StoreCollections = Depends(get_collections),
) -> OrderResponse:
    return GetOrder(MongoOrderRepository(collections.order)).execute(order_id=OrderId(order_id))


@router.patch("/v1/orders/{order_id}", response_model=OrderResponse)
def update_order(
    order_id: str,
    request_dto: UpdateOrderRequest,
    collections: StoreCollections = Depends(get_collections),
) -> OrderResponse:
    return _update_order_use_case(collections).execute(
        order_id=OrderId(order_id),
        request_dto=request_dto,
    )


@router.get("/v1/orders/{order_id}/billing", response_model=list[BillingViewResponse])
def get_order_billing(
    order_id: str,
    collections: StoreCollections = Depends(get_collections),
) -> list[BillingViewResponse]:
    return _order_billing_use_case(collections).execute(order_id=OrderId(order_id))
