from __future__ import annotations

import logging

from rbo.application.dto.responses import InvoiceViewResponse
from rbo.application.errors import EmptyBillingError, InvoiceNotFoundError
from rbo.application.mappers.order_mapper import to_billing_line_response
from rbo.application.metrics.back_office import record_billing_computed
from rbo.application.ports.repositories import BillingQuery, InvoiceRepository, PipelineError
from rbo.domain.common.ids import InvoiceId

# Kept as a literal string for clients that predate the nullable field.
MISSING_PAYMENT_METHOD = "null"

logger = logging.getLogger(__name__)


class ComposeInvoiceView:
    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        billing_query: BillingQuery,
    ) -> None:
        self._invoice_repository = invoice_repository
        self._billing_query = billing_query

    def execute(self, invoice_id: InvoiceId) -> InvoiceViewResponse:
        invoice = self._invoice_repository.get(invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(f"invoice {invoice_id} not found")

        try:
            views = self._billing_query.compute_billing(invoice.order_id)
        except PipelineError:
            record_billing_computed("failed")
            raise

        if not views:
            record_billing_computed("empty")
            logger.warning(
                "billing_empty",
                extra={"invoice_id": str(invoice_id), "order_id": str(invoice.order_id)},
            )
            raise EmptyBillingError(
                f"invoice {invoice_id} references order {invoice.order_id} with no order items"
            )

        billing = views[0]
        record_billing_computed("ok", item_counts=[billing.total_count])
        return InvoiceViewResponse(
            invoice_id=str(invoice.invoice_id),
            payment_method=(
                invoice.payment_method.value
                if invoice.payment_method is not None
                else MISSING_PAYMENT_METHOD
            ),
            order_id=str(invoice.order_id),
            payment_status=invoice.payment_status.value,
            payment_due=billing.payment_due,
            table_number=billing.table_number,
            payment_due_date=invoice.payment_due_date,
            order_details=[to_billing_line_response(line) for line in billing.order_items],
        )
