"""Analysis engine package."""

from .analyzer import AresEngine, ANALYSIS_STEPS, RAW_OUTPUT
from .signatures import SIGNATURES, Signature

__all__ = [
    "AresEngine",
    "ANALYSIS_STEPS",
    "RAW_OUTPUT",
    "SIGNATURES",
    "Signature",
]
