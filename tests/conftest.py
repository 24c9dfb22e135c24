"""Shared fixtures."""

from pathlib import Path
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from order_api.core.config import Settings
from order_api.main import create_application
from order_api.store.document_store import DocumentStore


@pytest.fixture
def orders_path(tmp_path: Path) -> Path:
    return tmp_path / "orders.json"


@pytest.fixture
def store(orders_path: Path) -> DocumentStore:
    return DocumentStore(orders_path, fsync=False)


@pytest.fixture
def make_settings(orders_path: Path):
    """Settings isolated from the developer's environment and .env file."""

    def _make(**overrides: Any) -> Settings:
        values: Dict[str, Any] = {
            "ORDERS_FILE": str(orders_path),
            "FSYNC_WRITES": False,
            "ADMIN_TOKEN": "",
            "REQUIRE_AUTH": False,
            "LOG_JSON": False,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def make_client(make_settings):
    def _make(**overrides: Any) -> TestClient:
        return TestClient(create_application(make_settings(**overrides)))

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def valid_payload() -> Dict[str, Any]:
    return {
        "productId": "p1",
        "productName": "Jacket",
        "name": "A",
        "phone": "01700000000",
        "address": "X",
        "qty": 2,
        "unitPrice": 500,
        "area": "Dhaka",
    }
