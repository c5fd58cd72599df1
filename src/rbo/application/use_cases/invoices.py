from __future__ import annotations

import logging
from datetime import datetime, timezone

from rbo.application.dto.requests import CreateInvoiceRequest, UpdateInvoiceRequest
from rbo.application.dto.responses import InvoiceResponse
from rbo.application.errors import InvoiceNotFoundError, OrderNotFoundError
from rbo.application.mappers.event_envelope import serialize_invoice_created_event
from rbo.application.mappers.invoice_mapper import to_invoice_response
from rbo.application.metrics.back_office import record_invoice_created
from rbo.application.ports.publisher import EventPublisher
from rbo.application.ports.repositories import InvoiceRepository, OrderRepository
from rbo.application.use_cases.context import TraceContext
from rbo.application.use_cases.publishing import DEFAULT_EVENTS_CHANNEL, publish_best_effort
from rbo.domain.common.ids import InvoiceId, OrderId, new_identifier
from rbo.domain.invoice.entities import create_invoice

logger = logging.getLogger(__name__)


class CreateInvoice:
    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        order_repository: OrderRepository,
        publisher: EventPublisher,
        events_channel: str = DEFAULT_EVENTS_CHANNEL,
    ) -> None:
        self._invoice_repository = invoice_repository
        self._order_repository = order_repository
        self._publisher = publisher
        self._events_channel = events_channel

    def execute(
        self,
        request_dto: CreateInvoiceRequest,
        trace_ctx: TraceContext,
    ) -> InvoiceResponse:
        order_id = OrderId(request_dto.order_id)
        order = self._order_repository.get(order_id)
        if order is None:
            raise OrderNotFoundError(f"order {order_id} not found")

        now = datetime.now(timezone.utc)
        invoice = create_invoice(
            invoice_id=InvoiceId(new_identifier("inv")),
            order=order,
            payment_method=request_dto.payment_method,
            payment_status=request_dto.payment_status,
            now=now,
        )
        self._invoice_repository.add(invoice)

        record_invoice_created(invoice.payment_status.value)
        logger.info(
            "invoice_created",
            extra={"invoice_id": str(invoice.invoice_id), "order_id": str(order_id)},
        )
        message = serialize_invoice_created_event(
            occurred_at=now,
            invoice=invoice,
            trace_id=trace_ctx.trace_id,
            request_id=trace_ctx.request_id,
            caller_id=trace_ctx.caller_id,
        )
        publish_best_effort(self._publisher, self._events_channel, message)
        return to_invoice_response(invoice)


class ListInvoices:
    def __init__(self, invoice_repository: InvoiceRepository) -> None:
        self._invoice_repository = invoice_repository

    def execute(self) -> list[InvoiceResponse]:
        return [to_invoice_response(invoice) for invoice in self._invoice_repository.list_all()]


class UpdateInvoice:
    def __init__(self, invoice_repository: InvoiceRepository) -> None:
        self._invoice_repository = invoice_repository

    def execute(self, invoice_id: InvoiceId, request_dto: UpdateInvoiceRequest) -> InvoiceResponse:
        invoice = self._invoice_repository.get(invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(f"invoice {invoice_id} not found")

        updated = invoice.revise(
            now=datetime.now(timezone.utc),
            payment_method=request_dto.payment_method,
            payment_status=request_dto.payment_status,
        )
        fields = ["updated_at"]
        if request_dto.payment_method is not None:
            fields.append("payment_method")
        if request_dto.payment_status is not None:
            fields.append("payment_status")
        self._invoice_repository.update(updated, fields=fields)
        return to_invoice_response(updated)
