from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from rbo.domain.common.ids import UserId


@dataclass(frozen=True)
class User:
    user_id: UserId
    first_name: str
    last_name: str
    email: str
    phone: str
    password_hash: str
    avatar: str | None
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if not (2 <= len(self.first_name.strip()) <= 100):
            raise ValueError("first_name must be between 2 and 100 characters")
        if not (2 <= len(self.last_name.strip()) <= 100):
            raise ValueError("last_name must be between 2 and 100 characters")
        local, _, domain = self.email.partition("@")
        if not local or "." not in domain:
            raise ValueError("email must be a valid address")
        if not self.phone.strip():
            raise ValueError("phone must be non-empty")
        if not self.password_hash:
            raise ValueError("password_hash must be set")
