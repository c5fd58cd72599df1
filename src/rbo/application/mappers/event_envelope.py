from __future__ import annotations

import json
from datetime import datetime
from typing import Any
from uuid import uuid4

from rbo.domain.invoice.entities import Invoice
from rbo.domain.order.entities import Order, OrderItem


def _serialize_event(
    *,
    event_type: str,
    occurred_at: datetime,
    payload: dict[str, Any],
    trace_id: str | None,
    request_id: str | None,
    caller_id: str | None,
) -> str:
    envelope = {
        "event_id": str(uuid4()),
        "event_type": event_type,
        "occurred_at": occurred_at.isoformat(),
        "request_id": request_id,
        "trace_id": trace_id,
        "caller_id": caller_id,
        "payload": payload,
    }
    return json.dumps(envelope, separators=(",", ":"), ensure_ascii=False)


def serialize_order_placed_event(
    *,
    occurred_at: datetime,
    order: Order,
    items: list[OrderItem],
    trace_id: str | None,
    request_id: str | None,
    caller_id: str | None,
) -> str:
    return _serialize_event(
        event_type="order.placed",
        occurred_at=occurred_at,
        trace_id=trace_id,
        request_id=request_id,
        caller_id=caller_id,
        payload={
            "order_id": str(order.order_id),
            "table_id": str(order.table_id) if order.table_id else None,
            "order_date": order.order_date.isoformat(),
            "order_items": [
                {
                    "order_item_id": str(item.order_item_id),
                    "food_id": str(item.food_id),
                    "quantity": item.quantity,
                    "unit_price": item.unit_price,
                }
                for item in items
            ],
        },
    )


def serialize_invoice_created_event(
    *,
    occurred_at: datetime,
    invoice: Invoice,
    trace_id: str | None,
    request_id: str | None,
    caller_id: str | None,
) -> str:
    return _serialize_event(
        event_type="invoice.created",
        occurred_at=occurred_at,
        trace_id=trace_id,
        request_id=request_id,
        caller_id=caller_id,
        payload={
            "invoice_id": str(invoice.invoice_id),
            "order_id": str(invoice.order_id),
            "payment_status": invoice.payment_status.value,
            "payment_due_date": invoice.payment_due_date.isoformat(),
        },
    )
