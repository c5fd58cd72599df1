from __future__ import annotations

import os

import pymongo
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

DEFAULT_STORE_TIMEOUT_SECONDS = 100.0


def store_timeout_seconds() -> float:
    return float(os.getenv("STORE_TIMEOUT_SECONDS", DEFAULT_STORE_TIMEOUT_SECONDS))


class StoreBudgetMiddleware(BaseHTTPMiddleware):
    """Bounds every store call made while handling one request by a shared deadline."""

    def __init__(self, app, timeout_seconds: float | None = None) -> None:
        super().__init__(app)
        self._timeout_seconds = timeout_seconds

    async def dispatch(self, request: Request, call_next):
        timeout_seconds = self._timeout_seconds or store_timeout_seconds()
        with pymongo.timeout(timeout_seconds):
            return await call_next(request)
