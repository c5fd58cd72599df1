from __future__ import annotations

from rbo.application.dto.responses import TableResponse
from rbo.domain.table.entities import Table


def to_table_response(table: Table) -> TableResponse:
    return TableResponse(
        table_id=str(table.table_id),
        table_number=table.table_number,
        number_of_guests=table.number_of_guests,
        created_at=table.created_at,
        updated_at=table.updated_at,
    )
