from __future__ import annotations

from rbo.application.dto.responses import BillingViewResponse
from rbo.application.mappers.order_mapper import to_billing_view_response
from rbo.application.metrics.back_office import record_billing_computed
from rbo.application.ports.repositories import BillingQuery, PipelineError
from rbo.domain.common.ids import OrderId


class GetOrderBilling:
    def __init__(self, billing_query: BillingQuery) -> None:
        self._billing_query = billing_query

    def execute(self, order_id: OrderId) -> list[BillingViewResponse]:
        try:
            views = self._billing_query.compute_billing(order_id)
        except PipelineError:
            record_billing_computed("failed")
            raise

        record_billing_computed(
            "ok" if views else "empty",
            item_counts=[view.total_count for view in views],
        )
        return [to_billing_view_response(view) for view in views]
