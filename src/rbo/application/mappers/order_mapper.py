from __future__ import annotations

from rbo.application.dto.responses import (
    BillingLineResponse,
    BillingViewResponse,
    OrderItemResponse,
    OrderResponse,
)
from rbo.domain.billing.views import BillingLine, BillingView
from rbo.domain.order.entities import Order, OrderItem


def to_order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        order_id=str(order.order_id),
        table_id=str(order.table_id) if order.table_id else None,
        order_date=order.order_date,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def to_order_item_response(item: OrderItem) -> OrderItemResponse:
    return OrderItemResponse(
        order_item_id=str(item.order_item_id),
        order_id=str(item.order_id),
        food_id=str(item.food_id),
        quantity=item.quantity,
        unit_price=item.unit_price,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


def to_billing_line_response(line: BillingLine) -> BillingLineResponse:
    return BillingLineResponse(
        order_item_id=str(line.order_item_id) if line.order_item_id else None,
        order_id=str(line.order_id),
        table_id=str(line.table_id) if line.table_id else None,
        table_number=line.table_number,
        food_name=line.food_name,
        food_image=line.food_image,
        price=line.price,
        quantity=line.quantity,
        amount=line.amount,
    )


def to_billing_view_response(view: BillingView) -> BillingViewResponse:
    return BillingViewResponse(
        order_id=str(view.order_id),
        table_id=str(view.table_id) if view.table_id else None,
        table_number=view.table_number,
        payment_due=view.payment_due,
        total_count=view.total_count,
        order_items=[to_billing_line_response(line) for line in view.order_items],
    )
