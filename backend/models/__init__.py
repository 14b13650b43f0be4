from .requests import AnalyzeRequest, WaitlistRequest
from .responses import WaitlistResponse, WaitlistListResponse, ErrorResponse, HealthResponse
from .findings import Finding, Severity, AnalysisResult
from .waitlist import WaitlistEntry

__all__ = [
    "AnalyzeRequest", "WaitlistRequest",
    "WaitlistResponse", "WaitlistListResponse", "ErrorResponse", "HealthResponse",
    "Finding", "Severity", "AnalysisResult",
    "WaitlistEntry",
]
