from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pymongo.collection import Collection

from rbo.application.ports.repositories import PageData
from rbo.infrastructure.db.errors import translate_store_errors


def page_pipeline(
    filter_: Mapping[str, Any],
    page: int,
    page_size: int,
) -> list[dict[str, Any]]:
    start_index = (page - 1) * page_size
    return [
        {"$match": dict(filter_)},
        {"$sort": {"_id": 1}},
        {
            "$group": {
                "_id": None,
                "total_count": {"$sum": 1},
                "data": {"$push": "$$ROOT"},
            }
        },
        {
            "$project": {
                "_id": 0,
                "total_count": 1,
                "items": {"$slice": ["$data", start_index, page_size]},
            }
        },
    ]


def list_page(
    collection: Collection,
    filter_: Mapping[str, Any],
    page: int,
    page_size: int,
) -> PageData[dict[str, Any]]:
    """Return one page of raw documents plus the count of everything the filter matched.

    Pages are 1-based. A filter matching nothing yields an empty page with a
    zero count rather than no result at all.
    """
    with translate_store_errors(f"list {collection.name}", pipeline=True):
        rows = list(collection.aggregate(page_pipeline(filter_, page, page_size)))

    if not rows:
        return PageData(items=[], total_count=0)

    row = rows[0]
    items = []
    for document in row.get("items", []):
        document = dict(document)
        document.pop("_id", None)
        items.append(document)
    return PageData(items=items, total_count=int(row.get("total_count", 0)))
