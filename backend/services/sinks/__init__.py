"""Waitlist sinks registry."""

from .base import SinkError, WaitlistSink
from .sheetbest import SheetBestSink
from .file import FileSink
from .google_sheets import GoogleSheetsSink

SINKS = {
    SheetBestSink.name: SheetBestSink,
    FileSink.name: FileSink,
    GoogleSheetsSink.name: GoogleSheetsSink,
}

__all__ = [
    "SinkError",
    "WaitlistSink",
    "SheetBestSink",
    "FileSink",
    "GoogleSheetsSink",
    "SINKS",
]
