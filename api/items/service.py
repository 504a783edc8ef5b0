"""
Item business logic exposed to the HTTP layer.

Repository errors are translated into HTTP errors here:
- ItemNotFoundError   -> 404
- ItemValidationError -> 400
- AirTableError       -> 502
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.airtable import AirTableError

from . import schemas
from .repository import ItemNotFoundError, ItemRepository, ItemValidationError

logger = logging.getLogger(__name__)


def _upstream_error(exc: AirTableError) -> HTTPException:
    logger.warning("airtable_failed status=%s error=%s", exc.status_code, exc)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))


def _record_to_dict(record: schemas.AirTableRecord) -> dict:
    return {"record_id": record.id, **record.item.model_dump()}


async def list_items(repo: ItemRepository, *, include_deleted: bool = False) -> list[dict]:
    try:
        rows = await repo.get_rows(include_deleted)
    except AirTableError as exc:
        raise _upstream_error(exc) from exc
    return [_record_to_dict(row) for row in rows]


async def get_item(repo: ItemRepository, item_id: str) -> dict:
    try:
        row = await repo.get_row_by_id(item_id)
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except AirTableError as exc:
        raise _upstream_error(exc) from exc
    return _record_to_dict(row)


async def item_statistics(repo: ItemRepository) -> dict:
    try:
        stats = await repo.get_item_statistics()
    except AirTableError as exc:
        raise _upstream_error(exc) from exc
    return stats.model_dump()


async def create_item(repo: ItemRepository, payload: schemas.CreateItemRequest) -> dict:
    try:
        created = await repo.post_item(schemas.Item(name=payload.name, phone_number=payload.phone_number))
    except ItemValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except AirTableError as exc:
        raise _upstream_error(exc) from exc
    return created.model_dump()


async def delete_item(repo: ItemRepository, item_id: str) -> dict:
    try:
        await repo.delete_item(item_id)
    except ItemNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except AirTableError as exc:
        raise _upstream_error(exc) from exc
    return {"id": item_id, "deleted": True}
