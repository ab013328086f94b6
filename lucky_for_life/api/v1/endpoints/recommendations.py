"""Recommendation API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from lucky_for_life.analysis.analyzer import LotteryAnalyzer
from lucky_for_life.analysis.recommender import STRATEGIES
from lucky_for_life.api.deps import get_analyzer
from lucky_for_life.schemas.statistics import RecommendedSet, ScoredNumber

router = APIRouter()


def _validate_strategy(strategy: str):
    if strategy not in STRATEGIES:
        raise HTTPException(status_code=400, detail=f"Invalid strategy. Valid: {list(STRATEGIES)}")


@router.get("", response_model=list[RecommendedSet])
def recommendations(
    count: int = Query(5, ge=1, le=len(STRATEGIES)),
    analyzer: LotteryAnalyzer = Depends(get_analyzer),
):
    """One recommended set per strategy, in the standard strategy order."""
    return analyzer.recommendations(count)


@router.get("/{strategy}", response_model=RecommendedSet)
def recommendation(strategy: str, analyzer: LotteryAnalyzer = Depends(get_analyzer)):
    _validate_strategy(strategy)
    return analyzer.recommend(strategy)


@router.get("/{strategy}/scores", response_model=list[ScoredNumber])
def scores(strategy: str, analyzer: LotteryAnalyzer = Depends(get_analyzer)):
    """Every main number with its score under the strategy, best first."""
    _validate_strategy(strategy)
    return analyzer.score_numbers(strategy)
