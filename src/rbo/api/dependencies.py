from __future__ import annotations

from rbo.api.middleware.identity import get_caller_id
from rbo.api.middleware.request_id import get_request_id
from rbo.application.ports.publisher import EventPublisher
from rbo.application.use_cases.context import TraceContext
from rbo.infrastructure.db.collections import StoreCollections, get_collections
from rbo.infrastructure.messaging.redis_publisher import RedisEventPublisher
from rbo.infrastructure.observability.otel import current_trace_id

__all__ = ["StoreCollections", "get_collections", "get_publisher", "trace_context"]


def get_publisher() -> EventPublisher:
    return RedisEventPublisher()


def trace_context() -> TraceContext:
    return TraceContext(
        trace_id=current_trace_id(),
        request_id=get_request_id(),
        caller_id=get_caller_id(),
    )
