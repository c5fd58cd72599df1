from __future__ import annotations

import json
import sys
from datetime import timedelta
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from rbo.application.dto.requests import (
    CreateInvoiceRequest,
    CreateOrderRequest,
    UpdateInvoiceRequest,
)
from rbo.application.errors import OrderNotFoundError
from rbo.application.use_cases.context import TraceContext
from rbo.application.use_cases.invoices import CreateInvoice, ListInvoices, UpdateInvoice
from rbo.application.use_cases.orders import CreateOrder
from rbo.domain.common.ids import InvoiceId
from rbo.domain.invoice.entities import PaymentMethod, PaymentStatus
from rbo.infrastructure.db.repositories.invoice_repo import MongoInvoiceRepository
from rbo.infrastructure.db.repositories.order_repo import MongoOrderRepository
from rbo.infrastructure.db.repositories.table_repo import MongoTableRepository


class RecordingPublisher:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def publish(self, channel: str, message: str) -> None:
        self.messages.append(message)


def _create_invoice(store, publisher=None) -> CreateInvoice:
    return CreateInvoice(
        invoice_repository=MongoInvoiceRepository(store.invoice),
        order_repository=MongoOrderRepository(store.order),
        publisher=publisher or RecordingPublisher(),
    )


def _new_order(store):
    use_case = CreateOrder(
        order_repository=MongoOrderRepository(store.order),
        table_repository=MongoTableRepository(store.table),
    )
    return use_case.execute(request_dto=CreateOrderRequest())


def _trace() -> TraceContext:
    return TraceContext(trace_id=None, request_id="req-1")


def test_invoice_without_status_is_stored_as_pending(store) -> None:
    order = _new_order(store)
    publisher = RecordingPublisher()

    created = _create_invoice(store, publisher).execute(
        request_dto=CreateInvoiceRequest(order_id=order.order_id),
        trace_ctx=_trace(),
    )

    assert created.payment_status == "PENDING"
    assert created.payment_method is None
    expected_due = order.created_at + timedelta(days=1)
    assert abs(created.payment_due_date - expected_due) < timedelta(seconds=1)

    stored = store.invoice.find_one({"invoice_id": created.invoice_id})
    assert stored["payment_status"] == "PENDING"
    reread = MongoInvoiceRepository(store.invoice).get(InvoiceId(created.invoice_id))
    assert reread is not None
    assert reread.payment_status is PaymentStatus.PENDING

    envelope = json.loads(publisher.messages[0])
    assert envelope["event_type"] == "invoice.created"
    assert envelope["payload"]["invoice_id"] == created.invoice_id


def test_invoice_for_unknown_order_is_rejected(store) -> None:
    with pytest.raises(OrderNotFoundError):
        _create_invoice(store).execute(
            request_dto=CreateInvoiceRequest(order_id="ord_missing"),
            trace_ctx=_trace(),
        )

    assert store.invoice.count_documents({}) == 0


def test_update_keeps_status_when_only_method_changes(store) -> None:
    order = _new_order(store)
    created = _create_invoice(store).execute(
        request_dto=CreateInvoiceRequest(
            order_id=order.order_id,
            payment_status=PaymentStatus.PAID,
        ),
        trace_ctx=_trace(),
    )

    updated = UpdateInvoice(MongoInvoiceRepository(store.invoice)).execute(
        invoice_id=InvoiceId(created.invoice_id),
        request_dto=UpdateInvoiceRequest(payment_method=PaymentMethod.CASH),
    )

    assert updated.payment_method == "CASH"
    assert updated.payment_status == "PAID"
    listed = ListInvoices(MongoInvoiceRepository(store.invoice)).execute()
    assert [(item.payment_method, item.payment_status) for item in listed] == [("CASH", "PAID")]
