"""Analysis endpoint."""

from typing import Optional

from fastapi import APIRouter, HTTPException

from engine import AresEngine
from logging_setup import get_logger
from models import AnalyzeRequest, AnalysisResult, ErrorResponse

router = APIRouter(
    tags=["Analysis"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
logger = get_logger("analyze")


@router.post("/analyse", response_model=AnalysisResult, response_model_exclude_none=True, include_in_schema=False)
@router.post("/analyze", response_model=AnalysisResult, response_model_exclude_none=True)
async def analyze(body: Optional[AnalyzeRequest] = None):
    """
    Run the ARES engine over free-text input.

    Both spellings are served; the dashboard posts to /analyze.
    """
    if body is None or not body.input:
        raise HTTPException(400, {"error": "No input provided"})

    engine = AresEngine()
    try:
        return await engine.analyze(body.input)
    except Exception as e:
        logger.exception("analysis error: %s", type(e).__name__)
        raise HTTPException(500, {"error": "Analysis failed"})
