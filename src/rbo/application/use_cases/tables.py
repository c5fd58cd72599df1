from __future__ import annotations

from datetime import datetime, timezone

from rbo.application.dto.requests import CreateTableRequest, UpdateTableRequest
from rbo.application.dto.responses import TableResponse
from rbo.application.errors import InvalidInputError, TableNotFoundError
from rbo.application.mappers.table_mapper import to_table_response
from rbo.application.ports.repositories import TableRepository
from rbo.application.use_cases.patching import apply_patch, patched_fields, present_fields
from rbo.domain.common.ids import TableId, new_identifier
from rbo.domain.table.entities import Table


class CreateTable:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(self, request_dto: CreateTableRequest) -> TableResponse:
        now = datetime.now(timezone.utc)
        try:
            table = Table(
                table_id=TableId(new_identifier("tbl")),
                table_number=request_dto.table_number,
                number_of_guests=request_dto.number_of_guests,
                created_at=now,
                updated_at=now,
            )
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc

        self._table_repository.add(table)
        return to_table_response(table)


class GetTable:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(self, table_id: TableId) -> TableResponse:
        table = self._table_repository.get(table_id)
        if table is None:
            raise TableNotFoundError(f"table {table_id} not found")
        return to_table_response(table)


class ListTables:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(self) -> list[TableResponse]:
        return [to_table_response(table) for table in self._table_repository.list_all()]


class UpdateTable:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(self, table_id: TableId, request_dto: UpdateTableRequest) -> TableResponse:
        table = self._table_repository.get(table_id)
        if table is None:
            raise TableNotFoundError(f"table {table_id} not found")

        changes = present_fields(request_dto)
        updated = apply_patch(table, changes, datetime.now(timezone.utc))
        self._table_repository.update(updated, fields=patched_fields(changes))
        return to_table_response(updated)
