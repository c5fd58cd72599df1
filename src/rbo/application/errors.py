from __future__ import annotations


class InvalidInputError(Exception):
    """Malformed or missing input, rejected before any store interaction."""


class InvalidPageError(InvalidInputError):
    pass


class NotFoundError(Exception):
    pass


class FoodNotFoundError(NotFoundError):
    pass


class MenuNotFoundError(NotFoundError):
    pass


class TableNotFoundError(NotFoundError):
    pass


class OrderNotFoundError(NotFoundError):
    pass


class OrderItemNotFoundError(NotFoundError):
    pass


class InvoiceNotFoundError(NotFoundError):
    pass


class UserNotFoundError(NotFoundError):
    pass


class ConflictError(Exception):
    pass


class EmptyBillingError(Exception):
    """An invoice points at an order that has no line items."""
