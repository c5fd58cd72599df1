from __future__ import annotations

import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from rbo.api.error_handling import register_exception_handlers
from rbo.api.middleware.identity import IdentityMiddleware
from rbo.api.middleware.request_id import RequestIDMiddleware
from rbo.api.middleware.store_budget import StoreBudgetMiddleware
from rbo.api.routes.foods import router as foods_router
from rbo.api.routes.health import router as health_router
from rbo.api.routes.invoices import router as invoices_router
from rbo.api.routes.menus import router as menus_router
from rbo.api.routes.metrics import router as metrics_router
from rbo.api.routes.order_items import router as order_items_router
from rbo.api.routes.orders import router as orders_router
from rbo.api.routes.tables import router as tables_router
from rbo.api.routes.users import router as users_router
from rbo.infrastructure.cache.redis_client import close_redis_clients
from rbo.infrastructure.db.client import close_clients
from rbo.infrastructure.db.collections import get_collections
from rbo.infrastructure.db.indexes import ensure_indexes
from rbo.infrastructure.observability.logging_config import configure_logging
from rbo.infrastructure.observability.otel import configure_otel

logger = logging.getLogger("rbo.api.access")
startup_logger = logging.getLogger("rbo.api.startup")

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)


def _cors_allow_origins() -> list[str]:
    env = os.getenv("APP_ENV", "dev").lower()

    if env in {"dev", "test"}:
        return ["*"]

    default_value = "https://backoffice.example.com"
    raw_value = os.getenv("CORS_ALLOW_ORIGINS", default_value)
    return [origin.strip() for origin in raw_value.split(",") if origin.strip()]


def _route_path(request: Request) -> str:
    # Label metrics by route template so ids do not blow up cardinality.
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        method = request.method
        try:
            response = await call_next(request)
        except Exception:
            path = _route_path(request)
            duration_ms = (time.perf_counter() - started) * 1000
            REQUEST_COUNT.labels(method=method, path=path, status_code="500").inc()
            REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000)
            logger.exception(
                "request_error",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": 500,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            raise

        path = _route_path(request)
        duration_ms = (time.perf_counter() - started) * 1000
        REQUEST_COUNT.labels(method=method, path=path, status_code=str(response.status_code)).inc()
        REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000)
        logger.info(
            "request_complete",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response


def _ensure_store_indexes() -> None:
    if not os.getenv("MONGODB_URI"):
        startup_logger.warning("store_indexes_skipped")
        return
    ensure_indexes(get_collections())
    startup_logger.info("store_indexes_ready")


@asynccontextmanager
async def lifespan(app: FastAPI):
    _ensure_store_indexes()
    try:
        yield
    finally:
        get_collections.cache_clear()
        close_clients()
        close_redis_clients()


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="Restaurant Back Office", version="0.1.0", lifespan=lifespan)
    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(menus_router)
    app.include_router(foods_router)
    app.include_router(tables_router)
    app.include_router(orders_router)
    app.include_router(order_items_router)
    app.include_router(invoices_router)
    app.include_router(users_router)

    app.add_middleware(StoreBudgetMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(IdentityMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_allow_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    configure_otel(app)
    return app


app = create_app()
