"""
Item schemas: AirTable record envelopes and API request/response models.

AirTable field names are PascalCase; Python attributes are snake_case.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Item(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", alias="Id")
    name: str = Field(default="", alias="Name")
    phone_number: str = Field(default="", alias="PhoneNumber")
    is_deleted: bool = Field(default=False, alias="IsDeleted")
    last_updated: datetime | None = Field(default=None, alias="LastUpdated")

    @field_validator("last_updated")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class AirTableRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    item: Item = Field(default_factory=Item, alias="fields")
    created_time: datetime | None = Field(default=None, alias="createdTime")


class AirTableResponse(BaseModel):
    records: list[AirTableRecord] = Field(default_factory=list)
    # Pagination cursor; absent on the last page.
    offset: str | None = None


class AirTablePostItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fields: Item


class ItemStatistics(BaseModel):
    active_count: int = 0
    deleted_count: int = 0


class CreateItemRequest(BaseModel):
    name: str = Field(..., max_length=200)
    phone_number: str = Field(..., max_length=32)
