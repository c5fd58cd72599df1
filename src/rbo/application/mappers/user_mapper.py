from __future__ import annotations

from rbo.application.dto.responses import UserResponse
from rbo.domain.user.entities import User


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        user_id=str(user.user_id),
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        phone=user.phone,
        avatar=user.avatar,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
