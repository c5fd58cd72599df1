from __future__ import annotations

from fastapi import APIRouter, Depends, status

from rbo.api.dependencies import StoreCollections, get_collections
from rbo.application.dto.requests import CreateTableRequest, UpdateTableRequest
from rbo.application.dto.responses import TableResponse
from rbo.application.use_cases.tables import CreateTable, GetTable, ListTables, UpdateTable
from rbo.domain.common.ids import TableId
from rbo.infrastructure.db.repositories.table_repo import MongoTableRepository

router = APIRouter()


def _table_repository(collections: StoreCollections) -> MongoTableRepository:
    return MongoTableRepository(collections.table)


@router.post("/v1/tables", response_model=TableResponse, status_code=status.HTTP_201_CREATED)
def create_table(
    request_dto: CreateTableRequest,
    collections: StoreCollections = Depends(get_collections),
) -> TableResponse:
    return CreateTable(_table_repository(collections)).execute(request_dto=request_dto)


@router.get("/v1/tables", response_model=list[TableResponse])
def list_tables(collections: StoreCollections = Depends(get_collections)) -> list[TableResponse]:
    return ListTables(_table_repository(collections)).execute()


@router.get("/v1/tables/{table_id}", response_model=TableResponse)
def get_table(
    table_id: str,
    collections: StoreCollections = Depends(get_collections),
) -> TableResponse:
    return GetTable(_table_repository(collections)).execute(table_id=TableId(table_id))


@router.patch("/v1/tables/{table_id}", response_model=TableResponse)
def update_table(
    table_id: str,
    request_dto: UpdateTableRequest,
    collections: StoreCollections = Depends(get_collections),
) -> TableResponse:
    return UpdateTable(_table_repository(collections)).execute(
        table_id=TableId(table_id),
        request_dto=request_dto,
    )
