from __future__ import annotations

from typing import NewType
from uuid import uuid4

FoodId = NewType("FoodId", str)
MenuId = NewType("MenuId", str)
TableId = NewType("TableId", str)
OrderId = NewType("OrderId", str)
OrderItemId = NewType("OrderItemId", str)
InvoiceId = NewType("InvoiceId", str)
UserId = NewType("UserId", str)


def new_identifier(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"
