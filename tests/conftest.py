from __future__ import annotations

import sys
from pathlib import Path

import mongomock
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from rbo.infrastructure.db.collections import StoreCollections


@pytest.fixture
def store() -> StoreCollections:
    client = mongomock.MongoClient(tz_aware=True)
    return StoreCollections.from_database(client["rbo_test"])
