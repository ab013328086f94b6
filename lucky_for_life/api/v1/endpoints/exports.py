"""Export API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from lucky_for_life.analysis.analyzer import LotteryAnalyzer
from lucky_for_life.api.deps import get_analyzer
from lucky_for_life.config import settings
from lucky_for_life.services.export_service import EXPORT_FORMATS, export_analysis

router = APIRouter()


@router.post("/{fmt}")
def export(fmt: str, analyzer: LotteryAnalyzer = Depends(get_analyzer)) -> dict:
    """Write a one-shot export of the current run to the export directory."""
    if fmt not in EXPORT_FORMATS:
        raise HTTPException(status_code=400, detail=f"Invalid format. Valid: {list(EXPORT_FORMATS)}")
    path = export_analysis(analyzer, fmt, settings.EXPORT_DIR)
    return {"format": fmt, "path": str(path)}
