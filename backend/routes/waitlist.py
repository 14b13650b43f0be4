"""Waitlist signup endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from logging_setup import get_logger
from models import ErrorResponse, WaitlistRequest, WaitlistResponse, WaitlistListResponse
from services import (
    SinkError,
    WaitlistError,
    WaitlistSink,
    get_waitlist_sink,
    submit_waitlist,
)
from services.waitlist import ACCESS_GRANTED, SYSTEM_FAILURE

router = APIRouter(
    prefix="/waitlist",
    tags=["Waitlist"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
logger = get_logger("waitlist")


@router.post("", response_model=WaitlistResponse, status_code=201)
async def join_waitlist(
    body: WaitlistRequest,
    sink: WaitlistSink = Depends(get_waitlist_sink),
):
    try:
        entry = await submit_waitlist(body.name, body.company, body.email, sink)
    except WaitlistError as e:
        logger.info("waitlist rejected: %s", e.code)
        raise HTTPException(400, {"error": e.code})
    except SinkError as e:
        logger.error("waitlist sink %s failed: %s", sink.name, e)
        raise HTTPException(500, {"error": SYSTEM_FAILURE, "details": str(e)})

    return WaitlistResponse(success=True, message=ACCESS_GRANTED, timestamp=entry.timestamp)


@router.get("", response_model=WaitlistListResponse)
async def list_waitlist(sink: WaitlistSink = Depends(get_waitlist_sink)):
    try:
        rows = await sink.list_entries()
    except SinkError as e:
        logger.error("waitlist read from %s failed: %s", sink.name, e)
        raise HTTPException(500, {"error": "Failed to fetch data"})

    return WaitlistListResponse(count=len(rows), data=rows)
