from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from rbo.api.dependencies import StoreCollections, get_collections
from rbo.application.dto.requests import SignUpRequest
from rbo.application.dto.responses import UserPageResponse, UserResponse
from rbo.application.use_cases.paging import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from rbo.application.use_cases.users import GetUser, ListUsers, SignUp
from rbo.domain.common.ids import UserId
from rbo.infrastructure.db.repositories.user_repo import MongoUserRepository
from rbo.infrastructure.security.password_hasher import BcryptPasswordHasher

router = APIRouter()


def _sign_up_use_case(collections: StoreCollections) -> SignUp:
    return SignUp(
        user_repository=MongoUserRepository(collections.user),
        password_hasher=BcryptPasswordHasher(),
    )


@router.post(
    "/v1/users/signup",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def sign_up(
    request_dto: SignUpRequest,
    collections: StoreCollections = Depends(get_collections),
) -> UserResponse:
    return _sign_up_use_case(collections).execute(request_dto=request_dto)


@router.get("/v1/users", response_model=UserPageResponse)
def list_users(
    page: int = Query(default=DEFAULT_PAGE),
    record_per_page: int = Query(default=DEFAULT_PAGE_SIZE, alias="recordPerPage"),
    collections: StoreCollections = Depends(get_collections),
) -> UserPageResponse:
    use_case = ListUsers(MongoUserRepository(collections.user))
    return use_case.execute(page=page, page_size=record_per_page)


@router.get("/v1/users/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    collections: StoreCollections = Depends(get_collections),
) -> UserResponse:
    return GetUser(MongoUserRepository(collections.user)).execute(user_id=UserId(user_id))
