"""
AirTable HTTP client.

Used endpoints (relative to `<base_url>/<base_id>/<table>`):
- GET   ""             -> {"records": [{"id": "rec...", "fields": {...}}], "offset": "..."}
- POST  ""             -> body {"fields": {...}}
- PATCH "/<record id>" -> body {"fields": {...}}
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from . import settings


# AirTable failures are explicit and separable from other runtime errors.
class AirTableError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _require(value: str, name: str) -> str:
    value = (value or "").strip()
    if not value:
        raise AirTableError(f"{name} is empty.")
    return value


class AirTableClient:
    """
    One table of one AirTable base.

    Each call opens its own short-lived `httpx.AsyncClient`; no retries.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        base_id: str | None = None,
        table: str | None = None,
        api_key: str | None = None,
        timeout_s: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        base_url = _require(base_url if base_url is not None else settings.airtable_base_url(), "AIRTABLE_BASE_URL")
        base_id = _require(base_id if base_id is not None else settings.airtable_base_id(), "AIRTABLE_BASE_ID")
        table = _require(table if table is not None else settings.airtable_table(), "AIRTABLE_TABLE")

        self.table_url = f"{base_url.rstrip('/')}/{quote(base_id, safe='')}/{quote(table, safe='')}"
        self.api_key = api_key if api_key is not None else settings.airtable_api_key()
        self.timeout_s = timeout_s if timeout_s is not None else settings.airtable_timeout_s()
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                base_url=self.table_url,
                headers=self._headers(),
                timeout=self.timeout_s,
                transport=self._transport,
            ) as client:
                return await client.request(method, path, params=params, json=body)
        except httpx.HTTPError as exc:
            raise AirTableError(f"AirTable {method} request failed: {exc}") from exc

    async def get_string(self, path: str = "", params: dict[str, Any] | None = None) -> str:
        resp = await self._request("GET", path, params=params)
        if not resp.is_success:
            # Avoid dumping huge bodies; include a small snippet.
            body = resp.text[:500]
            raise AirTableError(
                f"AirTable list request failed: {resp.status_code} {body}",
                status_code=resp.status_code,
            )
        return resp.text

    async def post(self, path: str, body: dict[str, Any]) -> httpx.Response:
        return await self._request("POST", path, body=body)

    async def patch(self, path: str, body: dict[str, Any]) -> httpx.Response:
        return await self._request("PATCH", path, body=body)
