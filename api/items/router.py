"""
Item API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from . import dependencies, schemas, service
from .repository import ItemRepository

router = APIRouter()


@router.get("/items")
async def list_items(
    include_deleted: bool = Query(default=False),
    repo: ItemRepository = Depends(dependencies.get_item_repository),
) -> dict:
    rows = await service.list_items(repo, include_deleted=include_deleted)
    return {"items": rows, "count": len(rows)}


# Registered before /items/{item_id} so "statistics" is not read as an id.
@router.get("/items/statistics")
async def get_item_statistics(
    repo: ItemRepository = Depends(dependencies.get_item_repository),
) -> dict:
    return await service.item_statistics(repo)


@router.get("/items/{item_id}")
async def get_item(
    item_id: str,
    repo: ItemRepository = Depends(dependencies.get_item_repository),
) -> dict:
    return await service.get_item(repo, item_id)


@router.post("/items", status_code=201)
async def create_item(
    request: schemas.CreateItemRequest,
    repo: ItemRepository = Depends(dependencies.get_item_repository),
) -> dict:
    return await service.create_item(repo, request)


@router.delete("/items/{item_id}")
async def delete_item(
    item_id: str,
    repo: ItemRepository = Depends(dependencies.get_item_repository),
) -> dict:
    return await service.delete_item(repo, item_id)
