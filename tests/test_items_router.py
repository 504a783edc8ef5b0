"""
HTTP-level tests for the items endpoints.

The repository is replaced through FastAPI dependency overrides.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from core.airtable import AirTableError
from items import dependencies
from items.repository import ItemNotFoundError, ItemRepository, ItemValidationError
from items.schemas import Item, ItemStatistics
from main import app


@pytest.fixture
def repo():
    return MagicMock(spec=ItemRepository)


@pytest.fixture
def client(repo):
    app.dependency_overrides[dependencies.get_item_repository] = lambda: repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_items_passes_include_deleted(client, repo, active_record, deleted_record):
    repo.get_rows = AsyncMock(return_value=[active_record, deleted_record])

    resp = client.get("/items", params={"include_deleted": "true"})

    assert resp.status_code == 200
    assert resp.json()["count"] == 2
    assert resp.json()["items"][0]["record_id"] == active_record.id
    repo.get_rows.assert_awaited_once_with(True)


def test_statistics(client, repo):
    repo.get_item_statistics = AsyncMock(return_value=ItemStatistics(active_count=3, deleted_count=1))

    resp = client.get("/items/statistics")

    assert resp.json() == {"active_count": 3, "deleted_count": 1}


def test_get_item_not_found_is_404(client, repo):
    repo.get_row_by_id = AsyncMock(side_effect=ItemNotFoundError("Item 'x' not found."))

    resp = client.get("/items/x")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Item 'x' not found."


def test_create_item_validation_is_400(client, repo):
    repo.post_item = AsyncMock(side_effect=ItemValidationError("Invalid phone number: '780-3-4555'"))

    resp = client.post("/items", json={"name": "Jordan", "phone_number": "780-3-4555"})

    assert resp.status_code == 400
    assert "780-3-4555" in resp.json()["detail"]


def test_create_item_returns_created(client, repo):
    repo.post_item = AsyncMock(return_value=Item(id="abcdefghij", name="Test", phone_number="(780) 246-8060"))

    resp = client.post("/items", json={"name": "Test", "phone_number": "780.246.8060"})

    assert resp.status_code == 201
    assert resp.json()["id"] == "abcdefghij"
    sent = repo.post_item.await_args.args[0]
    assert sent.phone_number == "780.246.8060"


def test_delete_upstream_failure_is_502(client, repo):
    repo.delete_item = AsyncMock(side_effect=AirTableError("AirTable delete failed", status_code=400))

    resp = client.delete("/items/atItem2")

    assert resp.status_code == 502


def test_delete_item(client, repo):
    repo.delete_item = AsyncMock(return_value=None)

    resp = client.delete("/items/atItem2")

    assert resp.json() == {"id": "atItem2", "deleted": True}


def test_get_item(client, repo, active_record):
    repo.get_row_by_id = AsyncMock(return_value=active_record)

    resp = client.get(f"/items/{active_record.item.id}")

    assert resp.status_code == 200
    assert resp.json()["record_id"] == active_record.id
    assert resp.json()["phone_number"] == "780-246-8060"
    repo.get_row_by_id.assert_awaited_once_with(active_record.item.id)


def test_create_item_upstream_failure_is_502(client, repo):
    repo.post_item = AsyncMock(side_effect=AirTableError("AirTable create failed: 502", status_code=502))

    resp = client.post("/items", json={"name": "Test", "phone_number": "780.246.8060"})

    assert resp.status_code == 502
    assert "create failed" in resp.json()["detail"]


def test_delete_missing_item_is_404(client, repo):
    repo.delete_item = AsyncMock(side_effect=ItemNotFoundError("Item 'nope' not found."))

    resp = client.delete("/items/nope")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Item 'nope' not found."


def test_unconfigured_airtable_is_503(monkeypatch):
    monkeypatch.delenv("AIRTABLE_BASE_ID", raising=False)
    app.dependency_overrides.clear()

    resp = TestClient(app).get("/items")

    assert resp.status_code == 503
    assert "AIRTABLE_BASE_ID" in resp.json()["detail"]
