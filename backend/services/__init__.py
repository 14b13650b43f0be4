from .waitlist import (
    WaitlistError,
    submit_waitlist,
    get_waitlist_sink,
    create_sink,
    mask_email,
)
from .sinks import SinkError, WaitlistSink

__all__ = [
    "WaitlistError",
    "submit_waitlist",
    "get_waitlist_sink",
    "create_sink",
    "mask_email",
    "SinkError",
    "WaitlistSink",
]
