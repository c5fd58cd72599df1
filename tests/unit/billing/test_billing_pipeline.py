from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from rbo.application.ports.repositories import PipelineError
from rbo.domain.common.ids import OrderId
from rbo.infrastructure.db.aggregations.billing import MongoBillingQuery, billing_pipeline

NOW = datetime(2026, 3, 1, 18, 30, tzinfo=timezone.utc)


def _seed_order(store, order_items: list[dict]) -> None:
    store.food.insert_many(
        [
            {"food_id": "fod_1", "name": "Pad Thai", "price": 5.0, "food_image": "pad.jpg"},
            {"food_id": "fod_2", "name": "Spring Rolls", "price": 3.33, "food_image": "roll.jpg"},
        ]
    )
    store.table.insert_one({"table_id": "tbl_1", "table_number": 4, "number_of_guests": 2})
    store.order.insert_one(
        {"order_id": "ord_1", "table_id": "tbl_1", "order_date": NOW, "created_at": NOW}
    )
    store.order_item.insert_many(order_items)


def _item(order_item_id: str, food_id: str, quantity: int, unit_price: float) -> dict:
    return {
        "order_item_id": order_item_id,
        "order_id": "ord_1",
        "food_id": food_id,
        "quantity": quantity,
        "unit_price": unit_price,
        "created_at": NOW,
        "updated_at": NOW,
    }


def test_billing_pipeline_starts_with_order_match() -> None:
    pipeline = billing_pipeline(OrderId("ord_1"))

    assert pipeline[0] == {"$match": {"order_id": "ord_1"}}
    group = next(stage["$group"] for stage in pipeline if "$group" in stage)
    assert group["payment_due"] == {"$sum": "$amount"}


def test_compute_billing_groups_items_per_order_and_table(store) -> None:
    _seed_order(store, [_item("oit_1", "fod_1", 2, 5.0), _item("oit_2", "fod_2", 1, 3.33)])

    views = MongoBillingQuery(store.order_item).compute_billing(OrderId("ord_1"))

    assert len(views) == 1
    view = views[0]
    assert view.order_id == "ord_1"
    assert view.table_id == "tbl_1"
    assert view.table_number == 4
    assert view.payment_due == 13.33
    assert view.total_count == 2

    lines = sorted(view.order_items, key=lambda line: line.order_item_id or "")
    assert [line.food_name for line in lines] == ["Pad Thai", "Spring Rolls"]
    assert [line.price for line in lines] == [5.0, 3.33]
    assert [line.quantity for line in lines] == [2, 1]
    assert [line.amount for line in lines] == [10.0, 3.33]
    assert lines[0].food_image == "pad.jpg"


def test_payment_due_equals_sum_of_line_amounts(store) -> None:
    _seed_order(
        store,
        [
            _item("oit_1", "fod_1", 3, 1.1),
            _item("oit_2", "fod_2", 7, 0.7),
            _item("oit_3", "fod_1", 1, 12.99),
        ],
    )

    view = MongoBillingQuery(store.order_item).compute_billing(OrderId("ord_1"))[0]

    assert view.payment_due == pytest.approx(3 * 1.1 + 7 * 0.7 + 12.99, abs=0.005)
    assert view.payment_due == round(sum(line.amount for line in view.order_items), 2)


def test_missing_food_still_yields_a_line(store) -> None:
    _seed_order(store, [_item("oit_1", "fod_1", 1, 5.0), _item("oit_2", "fod_gone", 2, 4.0)])

    view = MongoBillingQuery(store.order_item).compute_billing(OrderId("ord_1"))[0]

    assert view.total_count == 2
    assert view.payment_due == 13.0
    orphan = next(line for line in view.order_items if line.order_item_id == "oit_2")
    assert orphan.food_name is None
    assert orphan.food_image is None
    assert orphan.amount == 8.0


def test_order_without_items_has_no_billing(store) -> None:
    _seed_order(store, [_item("oit_other", "fod_1", 1, 5.0) | {"order_id": "ord_other"}])

    assert MongoBillingQuery(store.order_item).compute_billing(OrderId("ord_1")) == []


class _BrokenRowsCollection:
    name = "orderItem"

    def aggregate(self, pipeline):
        return iter([{"payment_due": 1.0, "total_count": 1, "order_items": []}])


def test_malformed_rows_raise_pipeline_error() -> None:
    with pytest.raises(PipelineError):
        MongoBillingQuery(_BrokenRowsCollection()).compute_billing(OrderId("ord_1"))


def test_order_without_table_keeps_its_lines(store) -> None:
    store.food.insert_one({"food_id": "fod_1", "name": "Pad Thai", "price": 0.25, "food_image": None})
    store.order.insert_one(
        {"order_id": "ord_1", "table_id": None, "order_date": NOW, "created_at": NOW}
    )
    store.order_item.insert_many([_item("oit_1", "fod_1", 2, 0.25)])

    views = MongoBillingQuery(store.order_item).compute_billing(OrderId("ord_1"))

    assert len(views) == 1
    view = views[0]
    assert view.table_id is None
    assert view.table_number is None
    assert view.payment_due == 0.5
    assert view.total_count == 1
    assert view.order_items[0].amount == 0.5
