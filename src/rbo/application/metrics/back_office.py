from __future__ import annotations

from prometheus_client import Counter, Histogram

ORDERS_PLACED_TOTAL = Counter(
    "rbo_orders_placed_total",
    "Total number of orders placed through the order-item batch endpoint.",
)

ORDER_ITEMS_PLACED_TOTAL = Counter(
    "rbo_order_items_placed_total",
    "Total number of order items inserted by order placement.",
)

ORDER_PLACEMENT_REJECTED_TOTAL = Counter(
    "rbo_order_placement_rejected_total",
    "Total number of order placements rejected before any write.",
    ["reason"],
)

BILLING_COMPUTATIONS_TOTAL = Counter(
    "rbo_billing_computations_total",
    "Total number of billing aggregations by outcome.",
    ["outcome"],
)

BILLING_ORDER_ITEMS = Histogram(
    "rbo_billing_order_items",
    "Number of line items aggregated per billing view.",
    buckets=(1, 2, 5, 10, 20, 50, 100),
)

INVOICES_CREATED_TOTAL = Counter(
    "rbo_invoices_created_total",
    "Total number of invoices created by initial payment status.",
    ["payment_status"],
)


def record_order_placed(item_count: int) -> None:
    ORDERS_PLACED_TOTAL.inc()
    ORDER_ITEMS_PLACED_TOTAL.inc(item_count)


def record_order_rejected(reason: str) -> None:
    ORDER_PLACEMENT_REJECTED_TOTAL.labels(reason=reason).inc()


def record_billing_computed(outcome: str, item_counts: list[int] | None = None) -> None:
    BILLING_COMPUTATIONS_TOTAL.labels(outcome=outcome).inc()
    for count in item_counts or []:
        BILLING_ORDER_ITEMS.observe(count)


def record_invoice_created(payment_status: str) -> None:
    INVOICES_CREATED_TOTAL.labels(payment_status=payment_status).inc()
