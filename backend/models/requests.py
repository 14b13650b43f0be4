from pydantic import BaseModel
from typing import Optional


class AnalyzeRequest(BaseModel):
    input: Optional[str] = None


class WaitlistRequest(BaseModel):
    name: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
