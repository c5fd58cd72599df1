from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel

from rbo.application.errors import InvalidInputError

T = TypeVar("T")


def present_fields(request_dto: BaseModel) -> dict[str, Any]:
    """Fields the caller actually sent with a non-null value."""
    return {
        key: value
        for key, value in request_dto.model_dump(exclude_unset=True).items()
        if value is not None
    }


def apply_patch(entity: T, changes: dict[str, Any], now: datetime) -> T:
    try:
        return replace(entity, **changes, updated_at=now)  # type: ignore[type-var]
    except ValueError as exc:
        raise InvalidInputError(str(exc)) from exc


def patched_fields(changes: dict[str, Any]) -> list[str]:
    return [*changes, "updated_at"]
