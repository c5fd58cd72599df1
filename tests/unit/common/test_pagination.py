from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from rbo.infrastructure.db.aggregations.pagination import list_page, page_pipeline


def test_page_pipeline_slices_from_page_offset() -> None:
    pipeline = page_pipeline({"menu_id": "men_1"}, page=3, page_size=4)

    assert pipeline[0] == {"$match": {"menu_id": "men_1"}}
    assert pipeline[-1]["$project"]["items"] == {"$slice": ["$data", 8, 4]}


def test_list_page_returns_requested_window_and_total(store) -> None:
    store.food.insert_many([{"n": n} for n in range(12)])

    result = list_page(store.food, {}, page=2, page_size=5)

    assert result.total_count == 12
    assert [item["n"] for item in result.items] == [5, 6, 7, 8, 9]
    assert all("_id" not in item for item in result.items)


def test_list_page_past_the_end_is_empty_but_counted(store) -> None:
    store.food.insert_many([{"n": n} for n in range(3)])

    result = list_page(store.food, {}, page=4, page_size=5)

    assert result.total_count == 3
    assert result.items == []


def test_list_page_with_no_matches(store) -> None:
    result = list_page(store.food, {"menu_id": "men_missing"}, page=1, page_size=10)

    assert result.total_count == 0
    assert result.items == []
