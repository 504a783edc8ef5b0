from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from core.airtable import AirTableClient
from items.schemas import AirTableRecord, AirTableResponse, Item


def _record(record_id: str, item_id: str, *, is_deleted: bool, age: timedelta = timedelta(0)) -> AirTableRecord:
    return AirTableRecord(
        id=record_id,
        item=Item(
            id=item_id,
            name="atDeletedItem" if is_deleted else "atActiveItem",
            phone_number="780-246-8060",
            is_deleted=is_deleted,
            last_updated=datetime.now(timezone.utc) - age,
        ),
    )


def _envelope(*records: AirTableRecord, offset: str | None = None) -> str:
    return AirTableResponse(records=list(records), offset=offset).model_dump_json(by_alias=True)


@pytest.fixture
def envelope():
    """Serialize records the way AirTable returns a list page."""
    return _envelope


@pytest.fixture
def deleted_record() -> AirTableRecord:
    return _record("rec1", "atItem", is_deleted=True)


@pytest.fixture
def active_record() -> AirTableRecord:
    return _record("rec2", "atItem2", is_deleted=False)


@pytest.fixture
def old_record() -> AirTableRecord:
    return _record("rec3", "atItem3", is_deleted=False, age=timedelta(hours=4))


@pytest.fixture
def airtable_client() -> MagicMock:
    """AirTableClient double; each test sets the return values it needs."""
    client = MagicMock(spec=AirTableClient)
    client.get_string = AsyncMock()
    client.post = AsyncMock()
    client.patch = AsyncMock()
    return client
