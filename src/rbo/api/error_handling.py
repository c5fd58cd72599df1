from __future__ import annotations

from typing import Any, cast

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rbo.api.middleware.request_id import get_request_id
from rbo.application.errors import (
    ConflictError,
    EmptyBillingError,
    FoodNotFoundError,
    InvalidInputError,
    InvalidPageError,
    InvoiceNotFoundError,
    MenuNotFoundError,
    NotFoundError,
    OrderItemNotFoundError,
    OrderNotFoundError,
    TableNotFoundError,
    UserNotFoundError,
)
from rbo.application.ports.repositories import (
    DuplicateRecordError,
    PipelineError,
    StoreError,
    StoreTimeoutError,
)
from rbo.application.use_cases.menus import InvalidMenuWindowError
from rbo.application.use_cases.place_order import InvalidOrderItemError
from rbo.application.use_cases.users import DuplicateUserError


def _error_response(
    *,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            },
            "requestId": get_request_id(),
        },
    )


def _exception_handler(status_code: int, code: str):
    async def handler(_: Request, exc: Exception) -> JSONResponse:
        details = getattr(exc, "details", None)
        return _error_response(
            status_code=status_code,
            code=code,
            message=str(exc),
            details=details if isinstance(details, dict) else None,
        )

    return handler


async def _http_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    http_exc = cast(StarletteHTTPException, exc)
    message = str(http_exc.detail) if http_exc.detail else "request failed"
    code = "HTTP_ERROR"
    if http_exc.status_code == 404:
        code = "NOT_FOUND"
    elif http_exc.status_code == 400:
        code = "BAD_REQUEST"
    elif http_exc.status_code == 405:
        code = "METHOD_NOT_ALLOWED"
    return _error_response(
        status_code=http_exc.status_code,
        code=code,
        message=message,
    )


async def _validation_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    validation_exc = cast(RequestValidationError, exc)
    return _error_response(
        status_code=400,
        code="INVALID_REQUEST",
        message="request validation failed",
        details={"errors": validation_exc.errors()},
    )


def register_exception_handlers(app: FastAPI) -> None:
    # Starlette resolves handlers along the exception's MRO, so subclasses win over bases.
    mappings: list[tuple[type[Exception], int, str]] = [
        (FoodNotFoundError, 404, "FOOD_NOT_FOUND"),
        (MenuNotFoundError, 404, "MENU_NOT_FOUND"),
        (TableNotFoundError, 404, "TABLE_NOT_FOUND"),
        (OrderNotFoundError, 404, "ORDER_NOT_FOUND"),
        (OrderItemNotFoundError, 404, "ORDER_ITEM_NOT_FOUND"),
        (InvoiceNotFoundError, 404, "INVOICE_NOT_FOUND"),
        (UserNotFoundError, 404, "USER_NOT_FOUND"),
        (NotFoundError, 404, "NOT_FOUND"),
        (InvalidOrderItemError, 400, "INVALID_ORDER_ITEM"),
        (InvalidMenuWindowError, 400, "INVALID_MENU_WINDOW"),
        (InvalidPageError, 400, "INVALID_PAGE"),
        (InvalidInputError, 400, "INVALID_INPUT"),
        (EmptyBillingError, 409, "EMPTY_BILLING"),
        (DuplicateUserError, 409, "DUPLICATE_USER"),
        (ConflictError, 409, "CONFLICT"),
        (DuplicateRecordError, 409, "CONFLICT"),
        (PipelineError, 502, "BILLING_PIPELINE_FAILED"),
        (StoreTimeoutError, 504, "STORE_TIMEOUT"),
        (StoreError, 503, "STORE_UNAVAILABLE"),
    ]

    for exc_cls, status_code, code in mappings:
        app.add_exception_handler(exc_cls, _exception_handler(status_code, code))

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
