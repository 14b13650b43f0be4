"""Local append-only text file sink."""

import csv
from pathlib import Path
from threading import Lock
from typing import Any

from starlette.concurrency import run_in_threadpool

from .base import FIELDS, SinkError, WaitlistSink
from models.waitlist import WaitlistEntry

DELIMITER = "|"


class FileSink(WaitlistSink):
    """
    One ``|``-delimited row per entry.

    Values are quoted by the csv module when they contain the delimiter,
    quotes or line breaks, so every entry reads back exactly as written.
    """

    name = "file"

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = Lock()

    def _append_sync(self, entry: WaitlistEntry) -> None:
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8", newline="") as f:
                csv.writer(f, delimiter=DELIMITER).writerow(entry.as_row())

    def _read_sync(self) -> list[list[str]]:
        with self._lock:
            with self.path.open("r", encoding="utf-8", newline="") as f:
                return list(csv.reader(f, delimiter=DELIMITER))

    async def append(self, entry: WaitlistEntry) -> None:
        try:
            await run_in_threadpool(self._append_sync, entry)
        except OSError as e:
            raise SinkError(f"Waitlist file write failed: {e}") from e

    async def list_entries(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            rows = await run_in_threadpool(self._read_sync)
        except (OSError, csv.Error) as e:
            raise SinkError(f"Waitlist file read failed: {e}") from e

        return [dict(zip(FIELDS, row)) for row in rows if len(row) == len(FIELDS)]
