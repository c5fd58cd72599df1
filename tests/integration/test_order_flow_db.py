from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from rbo.api.main import app
from rbo.application.ports.repositories import DuplicateRecordError
from rbo.domain.common.ids import OrderId
from rbo.infrastructure.db.aggregations.billing import MongoBillingQuery
from rbo.infrastructure.db.repositories.documents import insert_one

SEEDED_TABLE = "tbl_demo000002"
SEEDED_FOODS = ("fod_demo000001", "fod_demo000003")


def test_order_flow_is_billed_and_invoiced() -> None:
    with TestClient(app) as client:
        placed = client.post(
            "/v1/order-items",
            json={
                "table_id": SEEDED_TABLE,
                "order_items": [
                    {"food_id": SEEDED_FOODS[0], "quantity": 2, "unit_price": 14.5},
                    {"food_id": SEEDED_FOODS[1], "quantity": 1, "unit_price": 9.9},
                ],
            },
        )
        assert placed.status_code == 201
        order_id = placed.json()["order_id"]

        billing = client.get(f"/v1/orders/{order_id}/billing")
        assert billing.status_code == 200
        assert billing.json()[0]["payment_due"] == 38.9
        assert billing.json()[0]["table_number"] == 2

        invoice = client.post("/v1/invoices", json={"order_id": order_id, "payment_method": "CARD"})
        assert invoice.status_code == 201

        view = client.get(f"/v1/invoices/{invoice.json()['invoice_id']}")
        assert view.status_code == 200
        assert view.json()["payment_method"] == "CARD"
        assert view.json()["payment_status"] == "PENDING"
        assert view.json()["payment_due"] == 38.9


def test_rejected_placement_leaves_no_rows(live_store) -> None:
    orders_before = live_store.order.count_documents({})
    items_before = live_store.order_item.count_documents({})

    client = TestClient(app)
    response = client.post(
        "/v1/order-items",
        json={
            "order_items": [
                {"food_id": SEEDED_FOODS[0], "quantity": 1, "unit_price": 14.5},
                {"food_id": "fod_missing", "quantity": 1, "unit_price": 1.0},
            ],
        },
    )

    assert response.status_code == 404
    assert live_store.order.count_documents({}) == orders_before
    assert live_store.order_item.count_documents({}) == items_before


def test_billing_pipeline_runs_on_server(live_store) -> None:
    assert MongoBillingQuery(live_store.order_item).compute_billing(OrderId("ord_none")) == []


def test_unique_email_index_is_enforced(live_store) -> None:
    insert_one(live_store.user, {"user_id": "usr_a", "email": "dup@example.com", "phone": "1"})
    with pytest.raises(DuplicateRecordError):
        insert_one(live_store.user, {"user_id": "usr_b", "email": "dup@example.com", "phone": "2"})
