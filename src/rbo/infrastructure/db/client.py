from __future__ import annotations

import os
from functools import lru_cache

from pymongo import MongoClient
from pymongo.database import Database

DEFAULT_DATABASE = "rbo"

_OPEN_CLIENTS: list[MongoClient] = []


def _mongodb_uri() -> str:
    uri = os.getenv("MONGODB_URI")
    if not uri:
        raise RuntimeError("MONGODB_URI is not set")
    return uri


def database_name() -> str:
    return os.getenv("MONGODB_DATABASE", DEFAULT_DATABASE)


@lru_cache(maxsize=8)
def _build_client(mongodb_uri: str, timeout_ms: int) -> MongoClient:
    client: MongoClient = MongoClient(
        mongodb_uri,
        tz_aware=True,
        serverSelectionTimeoutMS=timeout_ms,
        connectTimeoutMS=timeout_ms,
    )
    _OPEN_CLIENTS.append(client)
    return client


def get_client(timeout_seconds: float = 5.0) -> MongoClient:
    timeout_ms = max(1, int(timeout_seconds * 1000))
    return _build_client(_mongodb_uri(), timeout_ms)


def get_database(timeout_seconds: float = 5.0) -> Database:
    return get_client(timeout_seconds)[database_name()]


def ping_database(timeout_seconds: float = 1.0) -> bool:
    try:
        get_database(timeout_seconds).command("ping")
        return True
    except Exception:
        return False


def close_clients() -> None:
    while _OPEN_CLIENTS:
        _OPEN_CLIENTS.pop().close()
    _build_client.cache_clear()
