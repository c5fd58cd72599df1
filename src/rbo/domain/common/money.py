from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

PRICE_PRECISION = 2


def normalize_amount(amount: float, precision: int = PRICE_PRECISION) -> float:
    """Round ``amount`` to ``precision`` decimal places, ties away from zero.

    The float is read through its shortest ``repr`` so that a literal such as
    ``2.345`` rounds as written (to ``2.35``) instead of as its binary
    approximation. ``Decimal`` keeps the scaled intermediate exact for any
    finite float.
    """
    if precision < 0:
        raise ValueError("precision must be >= 0")
    value = float(amount)
    if not math.isfinite(value):
        raise ValueError("amount must be a finite number")

    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-precision)
    with localcontext() as context:
        context.prec = max(context.prec, exact.adjusted() + precision + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def is_normalized(amount: float, precision: int = PRICE_PRECISION) -> bool:
    return math.isfinite(amount) and normalize_amount(amount, precision) == amount
