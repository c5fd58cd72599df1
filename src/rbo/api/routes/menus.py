from __future__ import annotations

from fastapi import APIRouter, Depends, status

from rbo.api.dependencies import StoreCollections, get_collections
from rbo.application.dto.requests import CreateMenuRequest, UpdateMenuRequest
from rbo.application.dto.responses import MenuResponse
from rbo.application.use_cases.menus import CreateMenu, GetMenu, ListMenus, UpdateMenu
from rbo.domain.common.ids import MenuId
from rbo.infrastructure.db.repositories.menu_repo import MongoMenuRepository

router = APIRouter()


def _menu_repository(collections: StoreCollections) -> MongoMenuRepository:
    return MongoMenuRepository(collections.menu)


@router.post("/v1/menus", response_model=MenuResponse, status_code=status.HTTP_201_CREATED)
def create_menu(
    request_dto: CreateMenuRequest,
    collections: StoreCollections = Depends(get_collections),
) -> MenuResponse:
    return CreateMenu(_menu_repository(collections)).execute(request_dto=request_dto)


@router.get("/v1/menus", response_model=list[MenuResponse])
def list_menus(collections: StoreCollections = Depends(get_collections)) -> list[MenuResponse]:
    return ListMenus(_menu_repository(collections)).execute()


@router.get("/v1/menus/{menu_id}", response_model=MenuResponse)
def get_menu(
    menu_id: str,
    collections: StoreCollections = Depends(get_collections),
) -> MenuResponse:
    return GetMenu(_menu_repository(collections)).execute(menu_id=MenuId(menu_id))


@router.patch("/v1/menus/{menu_id}", response_model=MenuResponse)
def update_menu(
    menu_id: str,
    request_dto: UpdateMenuRequest,
    collections: StoreCollections = Depends(get_collections),
) -> MenuResponse:
    return UpdateMenu(_menu_repository(collections)).execute(
        menu_id=MenuId(menu_id),
        request_dto=request_dto,
    )
