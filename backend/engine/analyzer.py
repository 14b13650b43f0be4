"""ARES analysis engine."""

from models.findings import AnalysisResult, Finding
from logging_setup import get_logger
from .prompts import ARES_SYSTEM_PROMPT, build_analysis_prompt
from .signatures import SIGNATURES, Signature, general_info

logger = get_logger("engine")

ANALYSIS_STEPS: tuple[str, ...] = (
    "Identifying input signature...",
    "Matching against Known Vulnerability Database (KVDB)...",
    "Analyzing configuration attributes...",
    "Correlating findings with MITRE ATT&CK (Defensive)...",
    "Generating hardening strategies...",
)

RAW_OUTPUT = "Analysis completed successfully."


class AresEngine:
    """
    Defensive analysis engine.

    Flow:
    1. Record the artifact in the conversation history
    2. Run each keyword signature, in order, against the input
    3. Fall back to a generic low-severity finding when nothing matched

    The steps list is the fixed progress script the dashboard replays; it
    does not depend on the input.
    """

    def __init__(self, signatures: tuple[Signature, ...] = SIGNATURES):
        self.signatures = signatures
        self.history: list[str] = [ARES_SYSTEM_PROMPT]

    async def analyze(self, text: str) -> AnalysisResult:
        self.history.append(build_analysis_prompt(text))

        findings: list[Finding] = []
        for signature in self.signatures:
            if signature.matches(text):
                logger.debug("signature matched: %s", signature.name)
                findings.append(signature.build())

        if not findings:
            findings.append(general_info())

        logger.info("analysis complete: %d finding(s) from %d chars", len(findings), len(text))

        return AnalysisResult(
            steps=list(ANALYSIS_STEPS),
            findings=findings,
            raw_output=RAW_OUTPUT,
        )
