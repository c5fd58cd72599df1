from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from rbo.domain.common.ids import TableId


@dataclass(frozen=True)
class Table:
    table_id: TableId
    table_number: int
    number_of_guests: int
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if self.table_number < 1:
            raise ValueError("table_number must be >= 1")
        if self.number_of_guests < 1:
            raise ValueError("number_of_guests must be >= 1")
