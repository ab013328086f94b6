"""Cosmic correlation API endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from lucky_for_life.analysis.analyzer import LotteryAnalyzer
from lucky_for_life.api.deps import get_analyzer
from lucky_for_life.schemas.cosmic import CorrelationResult, CosmicConditions, CosmicData, CosmicPick
from lucky_for_life.services import analysis_service

router = APIRouter()


@router.get("/correlations", response_model=list[CorrelationResult])
def correlations(analyzer: LotteryAnalyzer = Depends(get_analyzer)):
    return analyzer.correlations.results


@router.get("/report")
def report(analyzer: LotteryAnalyzer = Depends(get_analyzer)) -> dict:
    """Correlation results grouped by factor."""
    return analysis_service.cosmic_report(analyzer)


@router.get("/day/{day}", response_model=CosmicData)
def cosmic_day(day: date, analyzer: LotteryAnalyzer = Depends(get_analyzer)):
    """Astronomical and mock environmental values for one calendar day."""
    return analyzer.correlations.cosmic_for(day)


@router.get("/conditions", response_model=CosmicConditions)
def conditions(
    day: date | None = Query(None, description="Defaults to today"),
    analyzer: LotteryAnalyzer = Depends(get_analyzer),
):
    return analyzer.correlations.current_conditions(day or date.today())


@router.get("/pick", response_model=CosmicPick)
def pick(
    day: date | None = Query(None, description="Defaults to today"),
    analyzer: LotteryAnalyzer = Depends(get_analyzer),
):
    """Five numbers derived from the day's cosmic conditions (entertainment only)."""
    day = day or date.today()
    return CosmicPick(date=day, numbers=analyzer.cosmic_pick(day))
