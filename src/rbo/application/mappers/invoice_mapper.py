from __future__ import annotations

from rbo.application.dto.responses import InvoiceResponse
from rbo.domain.invoice.entities import Invoice


def to_invoice_response(invoice: Invoice) -> InvoiceResponse:
    return InvoiceResponse(
        invoice_id=str(invoice.invoice_id),
        order_id=str(invoice.order_id),
        payment_method=invoice.payment_method.value if invoice.payment_method else None,
        payment_status=invoice.payment_status.value,
        payment_due_date=invoice.payment_due_date,
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
    )
