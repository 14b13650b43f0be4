"""Base class for waitlist sinks."""

from abc import ABC, abstractmethod
from typing import Any

from models.waitlist import WaitlistEntry

FIELDS = ("timestamp", "name", "company", "email")


class SinkError(Exception):
    """The sink could not store or return entries."""


class WaitlistSink(ABC):
    """
    Base interface for every waitlist system of record.

    Each sink:
    - Stores one entry per call, verbatim
    - Raises SinkError on any failure of the backing system
    - Reads all stored rows back as plain dicts
    """

    name: str = "base"

    @abstractmethod
    async def append(self, entry: WaitlistEntry) -> None:
        pass

    @abstractmethod
    async def list_entries(self) -> list[dict[str, Any]]:
        pass
