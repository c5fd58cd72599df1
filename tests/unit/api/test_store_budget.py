from __future__ import annotations

import dataclasses
import sys
from functools import lru_cache
from pathlib import Path

from fastapi import FastAPI
from fastapi.testclient import TestClient
from pymongo import _csot
from pymongo.errors import ExecutionTimeout

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

import rbo.api.main as main_module
from rbo.api.dependencies import get_collections
from rbo.api.main import app
from rbo.api.middleware.store_budget import StoreBudgetMiddleware


def _budget_app(timeout_seconds: float | None = None) -> FastAPI:
    budget_app = FastAPI()
    budget_app.add_middleware(StoreBudgetMiddleware, timeout_seconds=timeout_seconds)

    @budget_app.get("/budget")
    def read_budget() -> dict[str, float | None]:
        return {"timeout": _csot.get_timeout()}

    return budget_app


def test_handlers_see_the_request_budget() -> None:
    response = TestClient(_budget_app(timeout_seconds=7.0)).get("/budget")

    assert response.status_code == 200
    assert response.json() == {"timeout": 7.0}
    assert _csot.get_timeout() is None


def test_budget_defaults_to_environment(monkeypatch) -> None:
    monkeypatch.setenv("STORE_TIMEOUT_SECONDS", "3")

    response = TestClient(_budget_app()).get("/budget")

    assert response.json() == {"timeout": 3.0}


def test_each_request_gets_a_fresh_budget() -> None:
    client = TestClient(_budget_app(timeout_seconds=2.5))

    first = client.get("/budget").json()["timeout"]
    second = client.get("/budget").json()["timeout"]

    assert first == second == 2.5


class _TimedOutCollection:
    name = "food"

    def find_one(self, *args, **kwargs):
        raise ExecutionTimeout("operation exceeded time limit", code=50)


def test_exceeded_budget_is_a_store_timeout(store) -> None:
    app.dependency_overrides[get_collections] = lambda: dataclasses.replace(
        store, food=_TimedOutCollection()
    )
    try:
        response = TestClient(app).get(
            "/v1/foods/fod_any", headers={"X-Request-Id": "req-budget-1"}
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 504
    body = response.json()
    assert body["error"]["code"] == "STORE_TIMEOUT"
    assert body["requestId"] == "req-budget-1"


def test_startup_creates_store_indexes(store, monkeypatch) -> None:
    @lru_cache(maxsize=1)
    def startup_collections():
        return store

    monkeypatch.setenv("MONGODB_URI", "mongodb://unused.invalid:27017")
    monkeypatch.setattr(main_module, "get_collections", startup_collections)

    with TestClient(app) as client:
        client.get("/health/live")

    user_indexes = store.user.index_information()
    unique_keys = {
        tuple(key for key, _ in index["key"])
        for index in user_indexes.values()
        if index.get("unique")
    }
    assert {("email",), ("phone",), ("user_id",)} <= unique_keys


def test_startup_without_store_uri_skips_indexes(store, monkeypatch) -> None:
    @lru_cache(maxsize=1)
    def startup_collections():
        return store

    store.user.insert_one({"user_id": "usr_existing"})
    monkeypatch.delenv("MONGODB_URI", raising=False)
    monkeypatch.setattr(main_module, "get_collections", startup_collections)

    with TestClient(app) as client:
        assert client.get("/health/live").status_code == 200

    indexed_keys = {
        tuple(key for key, _ in index["key"]) for index in store.user.index_information().values()
    }
    assert ("email",) not in indexed_keys
