from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

USER_ID_HEADER = "X-User-Id"
USER_EMAIL_HEADER = "X-User-Email"
USER_FIRST_NAME_HEADER = "X-User-First-Name"
USER_LAST_NAME_HEADER = "X-User-Last-Name"


@dataclass(frozen=True)
class CallerIdentity:
    """Identity asserted by the authenticating proxy in front of this service."""

    user_id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None


caller_context: ContextVar[CallerIdentity | None] = ContextVar("caller", default=None)


def get_caller_id() -> str | None:
    caller = caller_context.get()
    return caller.user_id if caller is not None else None


class IdentityMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        user_id = request.headers.get(USER_ID_HEADER)
        caller = None
        if user_id:
            caller = CallerIdentity(
                user_id=user_id,
                email=request.headers.get(USER_EMAIL_HEADER),
                first_name=request.headers.get(USER_FIRST_NAME_HEADER),
                last_name=request.headers.get(USER_LAST_NAME_HEADER),
            )
        token = caller_context.set(caller)
        try:
            return await call_next(request)
        finally:
            caller_context.reset(token)
