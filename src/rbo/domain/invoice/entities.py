from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum

from rbo.domain.common.ids import InvoiceId, OrderId
from rbo.domain.order.entities import Order

PAYMENT_TERM = timedelta(days=1)


class PaymentMethod(str, Enum):
    CARD = "CARD"
    CASH = "CASH"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"


@dataclass(frozen=True)
class Invoice:
    invoice_id: InvoiceId
    order_id: OrderId
    payment_method: PaymentMethod | None
    payment_status: PaymentStatus
    payment_due_date: datetime
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if self.payment_status is None:
            raise ValueError("payment_status must be set")

    def revise(
        self,
        now: datetime,
        payment_method: PaymentMethod | None = None,
        payment_status: PaymentStatus | None = None,
    ) -> Invoice:
        return replace(
            self,
            payment_method=payment_method or self.payment_method,
            payment_status=payment_status or self.payment_status,
            updated_at=now,
        )


def create_invoice(
    invoice_id: InvoiceId,
    order: Order,
    payment_method: PaymentMethod | None,
    payment_status: PaymentStatus | None,
    now: datetime,
) -> Invoice:
    return Invoice(
        invoice_id=invoice_id,
        order_id=order.order_id,
        payment_method=payment_method,
        payment_status=payment_status or PaymentStatus.PENDING,
        payment_due_date=order.created_at + PAYMENT_TERM,
        created_at=now,
        updated_at=now,
    )
