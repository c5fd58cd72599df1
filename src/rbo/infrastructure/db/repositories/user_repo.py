from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pymongo.collection import Collection

from rbo.application.ports.repositories import PageData, UserRepository
from rbo.domain.common.clock import as_utc
from rbo.domain.common.ids import UserId
from rbo.domain.user.entities import User
from rbo.infrastructure.db.aggregations.pagination import list_page
from rbo.infrastructure.db.errors import translate_store_errors
from rbo.infrastructure.db.repositories.documents import find_one, insert_one


class MongoUserRepository(UserRepository):
    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def add(self, user: User) -> None:
        insert_one(self._collection, self._to_document(user))

    def get(self, user_id: UserId) -> User | None:
        document = find_one(self._collection, "user_id", str(user_id))
        if document is None:
            return None
        return self._to_domain(document)

    def count_with_identity(self, email: str, phone: str) -> int:
        with translate_store_errors("count user"):
            return self._collection.count_documents({"$or": [{"email": email}, {"phone": phone}]})

    def list_page(self, page: int, page_size: int) -> PageData[User]:
        result = list_page(self._collection, {}, page, page_size)
        return PageData(
            items=[self._to_domain(document) for document in result.items],
            total_count=result.total_count,
        )

    def _to_document(self, user: User) -> dict[str, Any]:
        return {
            "user_id": str(user.user_id),
            "first_name": user.first_name,
            "last_name": user.last_name,
            "email": user.email,
            "phone": user.phone,
            "password": user.password_hash,
            "avatar": user.avatar,
            "created_at": user.created_at,
            "updated_at": user.updated_at,
        }

    def _to_domain(self, document: Mapping[str, Any]) -> User:
        return User(
            user_id=UserId(document["user_id"]),
            first_name=document["first_name"],
            last_name=document["last_name"],
            email=document["email"],
            phone=document["phone"],
            password_hash=document["password"],
            avatar=document.get("avatar"),
            created_at=as_utc(document["created_at"]),
            updated_at=as_utc(document["updated_at"]),
        )
