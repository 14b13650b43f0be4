from pydantic import BaseModel
from typing import Any, Optional
from datetime import datetime


class WaitlistResponse(BaseModel):
    success: bool
    message: str
    timestamp: str


class WaitlistListResponse(BaseModel):
    count: int
    data: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
    retry_after: Optional[int] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: datetime
    sink: str
