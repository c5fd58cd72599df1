from __future__ import annotations

from datetime import datetime, timezone

from rbo.application.dto.requests import CreateMenuRequest, UpdateMenuRequest
from rbo.application.dto.responses import MenuResponse
from rbo.application.errors import InvalidInputError, MenuNotFoundError
from rbo.application.mappers.catalog_mapper import to_menu_response
from rbo.application.ports.repositories import MenuRepository
from rbo.application.use_cases.patching import apply_patch, patched_fields, present_fields
from rbo.domain.catalog.entities import Menu, is_upcoming_window
from rbo.domain.common.clock import as_utc, as_utc_or_none
from rbo.domain.common.ids import MenuId, new_identifier


class InvalidMenuWindowError(InvalidInputError):
    pass


class CreateMenu:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self, request_dto: CreateMenuRequest) -> MenuResponse:
        now = datetime.now(timezone.utc)
        try:
            menu = Menu(
                menu_id=MenuId(new_identifier("men")),
                name=request_dto.name,
                category=request_dto.category,
                start_date=as_utc_or_none(request_dto.start_date),
                end_date=as_utc_or_none(request_dto.end_date),
                created_at=now,
                updated_at=now,
            )
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc

        self._menu_repository.add(menu)
        return to_menu_response(menu)


class GetMenu:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self, menu_id: MenuId) -> MenuResponse:
        menu = self._menu_repository.get(menu_id)
        if menu is None:
            raise MenuNotFoundError(f"menu {menu_id} not found")
        return to_menu_response(menu)


class ListMenus:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self) -> list[MenuResponse]:
        return [to_menu_response(menu) for menu in self._menu_repository.list_all()]


class UpdateMenu:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self, menu_id: MenuId, request_dto: UpdateMenuRequest) -> MenuResponse:
        menu = self._menu_repository.get(menu_id)
        if menu is None:
            raise MenuNotFoundError(f"menu {menu_id} not found")

        now = datetime.now(timezone.utc)
        changes = present_fields(request_dto)
        for key in ("start_date", "end_date"):
            if key in changes:
                changes[key] = as_utc(changes[key])
        if "start_date" in changes and "end_date" in changes:
            if not is_upcoming_window(changes["start_date"], changes["end_date"], now):
                raise InvalidMenuWindowError(
                    "menu window must start in the future and end after it starts"
                )

        updated = apply_patch(menu, changes, now)
        self._menu_repository.update(updated, fields=patched_fields(changes))
        return to_menu_response(updated)
