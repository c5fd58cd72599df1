from __future__ import annotations

from datetime import datetime, timezone

from rbo.application.dto.requests import SignUpRequest
from rbo.application.dto.responses import UserPageResponse, UserResponse
from rbo.application.errors import ConflictError, InvalidInputError, UserNotFoundError
from rbo.application.mappers.user_mapper import to_user_response
from rbo.application.ports.repositories import DuplicateRecordError, UserRepository
from rbo.application.ports.security import PasswordHasher
from rbo.application.use_cases.paging import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, ensure_valid_page
from rbo.domain.common.ids import UserId, new_identifier
from rbo.domain.user.entities import User


class DuplicateUserError(ConflictError):
    pass


class SignUp:
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self._user_repository = user_repository
        self._password_hasher = password_hasher

    def execute(self, request_dto: SignUpRequest) -> UserResponse:
        email = request_dto.email.lower()
        if self._user_repository.count_with_identity(email=email, phone=request_dto.phone) > 0:
            raise DuplicateUserError("this email or phone number already exists")

        now = datetime.now(timezone.utc)
        try:
            user = User(
                user_id=UserId(new_identifier("usr")),
                first_name=request_dto.first_name,
                last_name=request_dto.last_name,
                email=email,
                phone=request_dto.phone,
                password_hash=self._password_hasher.hash(request_dto.password),
                avatar=request_dto.avatar,
                created_at=now,
                updated_at=now,
            )
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc

        try:
            self._user_repository.add(user)
        except DuplicateRecordError as exc:
            raise DuplicateUserError("this email or phone number already exists") from exc
        return to_user_response(user)


class GetUser:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(self, user_id: UserId) -> UserResponse:
        user = self._user_repository.get(user_id)
        if user is None:
            raise UserNotFoundError(f"user {user_id} not found")
        return to_user_response(user)


class ListUsers:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(
        self,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> UserPageResponse:
        ensure_valid_page(page, page_size)
        result = self._user_repository.list_page(page=page, page_size=page_size)
        return UserPageResponse(
            total_count=result.total_count,
            user_items=[to_user_response(user) for user in result.items],
        )
