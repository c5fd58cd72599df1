from __future__ import annotations

from fastapi import APIRouter, Depends, status

from rbo.api.dependencies import (
    StoreCollections,
    get_collections,
    get_publisher,
    trace_context,
)
from rbo.application.dto.requests import CreateInvoiceRequest, UpdateInvoiceRequest
from rbo.application.dto.responses import InvoiceResponse, InvoiceViewResponse
from rbo.application.ports.publisher import EventPublisher
from rbo.application.use_cases.context import TraceContext
from rbo.application.use_cases.invoice_view import ComposeInvoiceView
from rbo.application.use_cases.invoices import CreateInvoice, ListInvoices, UpdateInvoice
from rbo.domain.common.ids import InvoiceId
from rbo.infrastructure.db.aggregations.billing import MongoBillingQuery
from rbo.infrastructure.db.repositories.invoice_repo import MongoInvoiceRepository
from rbo.infrastructure.db.repositories.order_repo import MongoOrderRepository
from rbo.infrastructure.messaging.redis_publisher import events_channel

router = APIRouter()


def _create_invoice_use_case(
    collections: StoreCollections,
    publisher: EventPublisher,
) -> CreateInvoice:
    return CreateInvoice(
        invoice_repository=MongoInvoiceRepository(collections.invoice),
        order_repository=MongoOrderRepository(collections.order),
        publisher=publisher,
        events_channel=events_channel(),
    )


def _invoice_view_use_case(collections: StoreCollections) -> ComposeInvoiceView:
    return ComposeInvoiceView(
        invoice_repository=MongoInvoiceRepository(collections.invoice),
        billing_query=MongoBillingQuery(collections.order_item),
    )


@router.post("/v1/invoices", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(
    request_dto: CreateInvoiceRequest,
    collections: StoreCollections = Depends(get_collections),
    publisher: EventPublisher = Depends(get_publisher),
    trace_ctx: TraceContext = Depends(trace_context),
) -> InvoiceResponse:
    use_case = _create_invoice_use_case(collections, publisher)
    return use_case.execute(request_dto=request_dto, trace_ctx=trace_ctx)


@router.get("/v1/invoices", response_model=list[InvoiceResponse])
def list_invoices(
    collections: StoreCollections = Depends(get_collections),
) -> list[InvoiceResponse]:
    return ListInvoices(MongoInvoiceRepository(collections.invoice)).execute()


@router.get("/v1/invoices/{invoice_id}", response_model=InvoiceViewResponse)
def get_invoice(
    invoice_id: str,
    collections: StoreCollections = Depends(get_collections),
) -> InvoiceViewResponse:
    return _invoice_view_use_case(collections).execute(invoice_id=InvoiceId(invoice_id))


@router.patch("/v1/invoices/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(
    invoice_id: str,
    request_dto: UpdateInvoiceRequest,
    collections: StoreCollections = Depends(get_collections),
) -> InvoiceResponse:
    use_case = UpdateInvoice(MongoInvoiceRepository(collections.invoice))
    return use_case.execute(invoice_id=InvoiceId(invoice_id), request_dto=request_dto)
