"""Waitlist intake: validation and hand-off to the active sink."""

from datetime import datetime, timezone
from typing import Optional

from config import settings
from logging_setup import get_logger
from models.waitlist import WaitlistEntry
from .sinks import FileSink, GoogleSheetsSink, SheetBestSink, SINKS, WaitlistSink

logger = get_logger("waitlist")

INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
INCOMPLETE_PROFILE = "INCOMPLETE_PROFILE"
SYSTEM_FAILURE = "SYSTEM_FAILURE"
ACCESS_GRANTED = "ACCESS_GRANTED"


class WaitlistError(Exception):
    """Submission rejected before reaching the sink."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code


def mask_email(email: str) -> str:
    if '@' not in email:
        return "***@***"
    local, domain = email.split('@', 1)
    if len(local) <= 2:
        return f"{local[:1]}***@{domain}"
    return f"{local[0]}***{local[-1]}@{domain}"


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def validate_submission(
    name: Optional[str],
    company: Optional[str],
    email: Optional[str],
) -> None:
    """Email is checked first, then the profile fields."""
    if not email or '@' not in email:
        raise WaitlistError(INVALID_CREDENTIALS)
    if not name or not company:
        raise WaitlistError(INCOMPLETE_PROFILE)


async def submit_waitlist(
    name: Optional[str],
    company: Optional[str],
    email: Optional[str],
    sink: WaitlistSink,
) -> WaitlistEntry:
    """Validate and forward one entry. SinkError propagates to the caller."""
    validate_submission(name, company, email)

    entry = WaitlistEntry(
        timestamp=_utc_timestamp(),
        name=name,
        company=company,
        email=email,
    )
    await sink.append(entry)
    logger.info("waitlist entry stored via %s: %s", sink.name, mask_email(email))
    return entry


def create_sink(kind: str) -> WaitlistSink:
    if kind not in SINKS:
        raise ValueError(f"Unknown waitlist sink: {kind!r} (expected one of {sorted(SINKS)})")

    if kind == SheetBestSink.name:
        return SheetBestSink(settings.SHEET_BEST_URL, timeout=settings.SINK_TIMEOUT_SECONDS)
    if kind == GoogleSheetsSink.name:
        return GoogleSheetsSink(
            settings.GOOGLE_SHEET_ID,
            range_name=settings.GOOGLE_SHEET_RANGE,
            credentials_file=settings.GOOGLE_CREDENTIALS_FILE,
        )
    return FileSink(settings.WAITLIST_FILE)


_sink: Optional[WaitlistSink] = None


def get_waitlist_sink() -> WaitlistSink:
    """FastAPI dependency returning the configured sink."""
    global _sink
    if _sink is None:
        _sink = create_sink(settings.WAITLIST_SINK)
    return _sink
