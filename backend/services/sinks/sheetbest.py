"""Sheet.best spreadsheet API sink."""

import httpx
from typing import Any, Optional

from .base import SinkError, WaitlistSink
from models.waitlist import WaitlistEntry


class SheetBestSink(WaitlistSink):
    name = "sheetbest"

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def append(self, entry: WaitlistEntry) -> None:
        try:
            async with self._client() as client:
                resp = await client.post(self.url, json=entry.model_dump())
        except httpx.HTTPError as e:
            raise SinkError(f"Sheet.best unreachable: {e}") from e

        if not resp.is_success:
            raise SinkError(f"Sheet.best rejected entry: {resp.status_code}")

    async def list_entries(self) -> list[dict[str, Any]]:
        try:
            async with self._client() as client:
                resp = await client.get(self.url)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise SinkError(f"Sheet.best read failed: {e}") from e

        if not isinstance(data, list):
            raise SinkError("Sheet.best returned unexpected payload")
        return data
