"""Data models for analysis findings."""

from pydantic import BaseModel
from typing import Optional
from enum import Enum


class Severity(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Finding(BaseModel):
    """A single reported issue with its remediation guidance."""
    id: str
    title: str
    severity: Severity
    description: str
    affected_component: str
    remediation_explanation: str
    remediation_script: Optional[str] = None

    class Config:
        use_enum_values = True


class AnalysisResult(BaseModel):
    steps: list[str]
    findings: list[Finding]
    raw_output: str
