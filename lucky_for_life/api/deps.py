"""Dependency injection for FastAPI."""

from fastapi import HTTPException

from lucky_for_life.analysis.analyzer import LotteryAnalyzer
from lucky_for_life.services import analysis_service


def get_analyzer() -> LotteryAnalyzer:
    """Return the current analysis run for request scope."""
    try:
        return analysis_service.get_analyzer()
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"History file not found: {e.filename}")
