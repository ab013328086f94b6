"""Statistics API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from lucky_for_life.analysis.analyzer import LotteryAnalyzer
from lucky_for_life.analysis.pattern_detector import COMBINATION_SIZES
from lucky_for_life.api.deps import get_analyzer
from lucky_for_life.schemas.statistics import (
    AnalysisSummary,
    ChiSquareResult,
    CombinationPattern,
    NumberInfo,
)
from lucky_for_life.services import analysis_service

router = APIRouter()

POOLS = ("main", "special")


@router.get("/summary", response_model=AnalysisSummary)
def summary(analyzer: LotteryAnalyzer = Depends(get_analyzer)):
    """Drawing count, date range, chi-square and pattern tallies."""
    return analyzer.summary()


@router.get("/numbers", response_model=list[NumberInfo])
def numbers(
    pool: str = Query("main", description="main (1-48) or special (1-18)"),
    analyzer: LotteryAnalyzer = Depends(get_analyzer),
):
    if pool not in POOLS:
        raise HTTPException(status_code=400, detail=f"Invalid pool. Valid: {POOLS}")
    return analysis_service.numbers_report(analyzer, pool)


@router.get("/top", response_model=list[NumberInfo])
def top_numbers(
    count: int = Query(10, ge=1, le=48),
    recent: bool = Query(False, description="Rank by the recent window instead of all time"),
    analyzer: LotteryAnalyzer = Depends(get_analyzer),
):
    return analyzer.top_numbers(count, recent=recent)


@router.get("/overdue", response_model=list[NumberInfo])
def overdue_numbers(
    count: int = Query(10, ge=1, le=48),
    analyzer: LotteryAnalyzer = Depends(get_analyzer),
):
    """Numbers whose current gap exceeds the configured multiple of their average gap."""
    return analyzer.overdue_numbers(count)


@router.get("/patterns/{kind}", response_model=list[CombinationPattern])
def patterns(
    kind: str,
    count: int = Query(5, ge=1, le=100),
    analyzer: LotteryAnalyzer = Depends(get_analyzer),
):
    if kind not in COMBINATION_SIZES:
        raise HTTPException(status_code=400, detail=f"Invalid kind. Valid: {list(COMBINATION_SIZES)}")
    return analyzer.top_patterns(kind, count)


@router.get("/chi-square")
def chi_square(analyzer: LotteryAnalyzer = Depends(get_analyzer)) -> dict:
    result: ChiSquareResult = analyzer.chi_square
    return {
        **result.model_dump(),
        "verdict": analysis_service.randomness_verdict(result.randomness_score),
    }


@router.post("/reload", response_model=AnalysisSummary)
def reload():
    """Re-read the history file and recompute every statistic."""
    try:
        analyzer = analysis_service.reload_analyzer()
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"History file not found: {e.filename}")
    return analyzer.summary()
