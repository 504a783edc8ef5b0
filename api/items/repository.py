"""
Item persistence on top of one AirTable table.

Items are never removed; deleting flips `IsDeleted` and every read except
`get_item_statistics` and `get_rows(include_deleted=True)` hides them.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from core import settings
from core.airtable import AirTableClient, AirTableError

from .schemas import AirTablePostItem, AirTableRecord, AirTableResponse, Item, ItemStatistics
from .validation import ItemValidationError, generate_item_id, normalize_phone_number, require_field

logger = logging.getLogger(__name__)

__all__ = ["ItemNotFoundError", "ItemRepository", "ItemValidationError"]


class ItemNotFoundError(KeyError):
    def __str__(self) -> str:
        # KeyError repr-quotes its message by default.
        return str(self.args[0]) if self.args else "Item not found."


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _formula_literal(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


class ItemRepository:
    def __init__(self, client: AirTableClient, *, stats_window: timedelta | None = None) -> None:
        self.client = client
        if stats_window is None:
            stats_window = timedelta(minutes=settings.item_stats_window_minutes())
        self.stats_window = stats_window

    async def get_rows(
        self,
        include_deleted: bool = False,
        params: dict[str, Any] | None = None,
    ) -> list[AirTableRecord]:
        """
        Fetch every record of the table, following AirTable's `offset` paging.

        Soft-deleted records are dropped unless `include_deleted` is set.
        """
        query: dict[str, Any] = dict(params or {})
        records: list[AirTableRecord] = []
        while True:
            raw = await self.client.get_string("", params=query or None)
            page = AirTableResponse.model_validate_json(raw)
            records.extend(page.records)
            if not page.offset:
                break
            query["offset"] = page.offset

        if include_deleted:
            return records
        return [record for record in records if not record.item.is_deleted]

    async def get_row_by_id(self, item_id: str) -> AirTableRecord:
        rows = await self.get_rows(params={"filterByFormula": f"{{Id}}={_formula_literal(item_id)}"})
        if not rows:
            raise ItemNotFoundError(f"Item {item_id!r} not found.")
        return rows[0]

    async def get_item_statistics(self) -> ItemStatistics:
        since = _utc_now() - self.stats_window
        stats = ItemStatistics()
        for record in await self.get_rows(True):
            last_updated = record.item.last_updated
            if last_updated is None or last_updated < since:
                continue
            if record.item.is_deleted:
                stats.deleted_count += 1
            else:
                stats.active_count += 1
        return stats

    async def delete_item(self, item_id: str) -> None:
        row = await self.get_row_by_id(item_id)
        resp = await self.client.patch(f"/{row.id}", {"fields": {"IsDeleted": True}})
        if not resp.is_success:
            raise AirTableError(
                f"AirTable delete failed for item {item_id!r}: {resp.status_code} {resp.text[:500]}",
                status_code=resp.status_code,
            )
        logger.info("item_deleted item_id=%s record_id=%s", item_id, row.id)

    async def post_item(self, item: Item) -> Item:
        name = require_field(item.name, "Name")
        phone_number = require_field(item.phone_number, "PhoneNumber")

        created = Item(
            id=generate_item_id(),
            name=name,
            phone_number=normalize_phone_number(phone_number),
            is_deleted=False,
        )
        payload = AirTablePostItem(fields=created).model_dump(
            by_alias=True,
            exclude={"fields": {"last_updated"}},
        )

        resp = await self.client.post("", payload)
        if not resp.is_success:
            raise AirTableError(
                f"AirTable create failed: {resp.status_code} {resp.text[:500]}",
                status_code=resp.status_code,
            )
        logger.info("item_created item_id=%s", created.id)
        return created
