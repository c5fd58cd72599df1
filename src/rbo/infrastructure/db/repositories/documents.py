from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pymongo.collection import Collection

from rbo.infrastructure.db.errors import translate_store_errors

NO_ID = {"_id": 0}


def set_fields(
    collection: Collection,
    key: str,
    document: Mapping[str, Any],
    fields: Iterable[str],
) -> None:
    """Write only ``fields`` of ``document`` (plus ``updated_at``) to the record keyed by ``key``."""
    changes = {name: document[name] for name in fields if name in document}
    changes["updated_at"] = document["updated_at"]
    with translate_store_errors(f"update {collection.name}"):
        collection.update_one({key: document[key]}, {"$set": changes}, upsert=True)


def find_one(collection: Collection, key: str, value: str) -> dict[str, Any] | None:
    with translate_store_errors(f"get {collection.name}"):
        return collection.find_one({key: value}, NO_ID)


def find_all(collection: Collection) -> list[dict[str, Any]]:
    with translate_store_errors(f"list {collection.name}"):
        return list(collection.find({}, NO_ID).sort("created_at", 1))


def insert_one(collection: Collection, document: Mapping[str, Any]) -> None:
    with translate_store_errors(f"insert {collection.name}"):
        collection.insert_one(dict(document))
