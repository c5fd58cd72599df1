from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Iterator

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from rbo.infrastructure.db import client as db_client
from rbo.infrastructure.db.collections import StoreCollections, get_collections

PROJECT_DIR = Path(__file__).resolve().parents[2]
TEST_DATABASE = "rbo_integration"


def pytest_collection_modifyitems(config, items) -> None:
    if os.getenv("MONGODB_URI"):
        return
    skip = pytest.mark.skip(reason="MONGODB_URI is not set")
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(skip)


@pytest.fixture(scope="session", autouse=True)
def integration_environment() -> Iterator[None]:
    if not os.getenv("MONGODB_URI"):
        yield
        return

    os.environ["MONGODB_DATABASE"] = TEST_DATABASE
    os.environ.setdefault("OTEL_SERVICE_NAME", "rbo-backend-test")
    os.environ.setdefault("OTEL_EXPORTER_OTLP_ENDPOINT", "")

    get_collections.cache_clear()
    db_client.close_clients()
    db_client.get_client().drop_database(TEST_DATABASE)

    env = os.environ.copy()
    env["PYTHONPATH"] = f"{PROJECT_DIR / 'src'}{os.pathsep}{env.get('PYTHONPATH', '')}".rstrip(
        os.pathsep
    )
    subprocess.run(
        [sys.executable, "-m", "rbo.tools.seed"],
        cwd=PROJECT_DIR,
        env=env,
        check=True,
    )
    yield
    db_client.get_client().drop_database(TEST_DATABASE)
    get_collections.cache_clear()
    db_client.close_clients()


@pytest.fixture
def live_store() -> StoreCollections:
    return StoreCollections.from_database(db_client.get_database())
