from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pymongo.collection import Collection

from rbo.application.ports.repositories import InvoiceRepository
from rbo.domain.common.clock import as_utc
from rbo.domain.common.ids import InvoiceId, OrderId
from rbo.domain.invoice.entities import Invoice, PaymentMethod, PaymentStatus
from rbo.infrastructure.db.repositories.documents import (
    find_all,
    find_one,
    insert_one,
    set_fields,
)


class MongoInvoiceRepository(InvoiceRepository):
    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def add(self, invoice: Invoice) -> None:
        insert_one(self._collection, self._to_document(invoice))

    def get(self, invoice_id: InvoiceId) -> Invoice | None:
        document = find_one(self._collection, "invoice_id", str(invoice_id))
        if document is None:
            return None
        return self._to_domain(document)

    def update(self, invoice: Invoice, fields: Iterable[str]) -> None:
        set_fields(self._collection, "invoice_id", self._to_document(invoice), fields)

    def list_all(self) -> list[Invoice]:
        return [self._to_domain(document) for document in find_all(self._collection)]

    def _to_document(self, invoice: Invoice) -> dict[str, Any]:
        return {
            "invoice_id": str(invoice.invoice_id),
            "order_id": str(invoice.order_id),
            "payment_method": invoice.payment_method.value if invoice.payment_method else None,
            "payment_status": invoice.payment_status.value,
            "payment_due_date": invoice.payment_due_date,
            "created_at": invoice.created_at,
            "updated_at": invoice.updated_at,
        }

    def _to_domain(self, document: Mapping[str, Any]) -> Invoice:
        payment_method = document.get("payment_method")
        return Invoice(
            invoice_id=InvoiceId(document["invoice_id"]),
            order_id=OrderId(document["order_id"]),
            payment_method=PaymentMethod(payment_method) if payment_method else None,
            payment_status=PaymentStatus(document["payment_status"]),
            payment_due_date=as_utc(document["payment_due_date"]),
            created_at=as_utc(document["created_at"]),
            updated_at=as_utc(document["updated_at"]),
        )
