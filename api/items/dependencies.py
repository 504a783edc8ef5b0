"""
Item dependencies for FastAPI routes.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from core.airtable import AirTableClient, AirTableError

from .repository import ItemRepository


def get_airtable_client() -> AirTableClient:
    try:
        return AirTableClient()
    except AirTableError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"AirTable is not configured: {exc}",
        ) from exc


def get_item_repository() -> ItemRepository:
    return ItemRepository(get_airtable_client())
