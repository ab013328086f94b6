"""Lucky for Life analysis run.

One LotteryAnalyzer owns all state of a single analysis: the drawing store,
both number pools, the pattern tallies, the chi-square result and the cosmic
correlation engine. Nothing is shared between runs; build a new analyzer to
re-analyze.
"""

import math
import threading
from datetime import date

from loguru import logger

from lucky_for_life.analysis.correlation import CorrelationEngine
from lucky_for_life.analysis.drawing_store import DrawingStore
from lucky_for_life.analysis.number_stats import chi_square_report, main_tracker, special_tracker
from lucky_for_life.analysis.pattern_detector import PatternDetector
from lucky_for_life.analysis.recommender import RecommendationScorer, cosmic_pick
from lucky_for_life.config import AnalysisConfig
from lucky_for_life.schemas.cosmic import CorrelationResult
from lucky_for_life.schemas.drawing import Drawing, MAIN_MAX, PICK_COUNT
from lucky_for_life.schemas.statistics import (
    AnalysisSummary,
    CombinationPattern,
    FrequencyDistribution,
    GapSummary,
    NumberInfo,
    RecommendedSet,
    ScoredNumber,
)


class LotteryAnalyzer:
    """Accumulate-then-query statistics over a drawing history."""

    def __init__(self, drawings: list[Drawing], config: AnalysisConfig | None = None):
        self.config = config or AnalysisConfig()
        self.store = DrawingStore(drawings)
        self.main = main_tracker()
        self.special = special_tracker()
        self.patterns = PatternDetector()
        self.correlations = CorrelationEngine(self.store)

        self._accumulate()
        self.chi_square = chi_square_report(self.main, self.special, self.config.confidence_level)
        self.scorer = RecommendationScorer(
            self.main, self.special, self.patterns, self.chi_square.randomness_score
        )
        logger.debug(
            "Analyzed {} drawings: chi2={:.3f} randomness={:.1f}",
            len(self.store), self.chi_square.total, self.chi_square.randomness_score,
        )

    def _accumulate(self) -> None:
        total = len(self.store)
        recent_from = total - self.config.recent_window

        for idx, drawing in enumerate(self.store):
            recent = idx >= recent_from
            for num in drawing.numbers:
                self.main.record_appearance(num, idx, drawing.draw_date, recent)
            self.special.record_appearance(drawing.special_number, idx, drawing.draw_date, recent)

            self.patterns.record_combinations(drawing.numbers, idx)
            self.patterns.record_patterns(drawing)

        self.main.finalize(total)
        self.special.finalize(total)

    # --- Queries ---

    @property
    def randomness_score(self) -> float:
        return self.chi_square.randomness_score

    def top_numbers(self, count: int, recent: bool = False) -> list[NumberInfo]:
        attr = "recent_frequency" if recent else "total_frequency"
        return sorted(self.main, key=lambda i: (-getattr(i, attr), i.number))[:max(count, 0)]

    def overdue_numbers(self, count: int) -> list[NumberInfo]:
        multiplier = self.config.min_gap_multiplier
        overdue = [
            i for i in self.main
            if i.average_gap > 0 and i.current_gap > i.average_gap * multiplier
        ]
        overdue.sort(key=lambda i: (-i.overdue_ratio, i.number))
        return overdue[:max(count, 0)]

    def top_patterns(self, kind: str = "pairs", count: int = 5) -> list[CombinationPattern]:
        return self.patterns.top(kind, count)

    def score_numbers(self, strategy: str) -> list[ScoredNumber]:
        return self.scorer.score(strategy)

    def recommend(self, strategy: str) -> RecommendedSet:
        return self.scorer.select_set(strategy)

    def recommendations(self, count: int = 5) -> list[RecommendedSet]:
        return self.scorer.recommendations(count)

    # --- Cosmic ---

    def run_correlations(self, cancel: threading.Event | None = None) -> list[CorrelationResult]:
        """Enrich every touched year with cosmic data, then correlate."""
        self.correlations.enrich(cancel)
        return self.correlations.analyze()

    def cosmic_pick(self, today: date | None = None) -> list[int]:
        return cosmic_pick(self.correlations, today or date.today())

    # --- Summaries ---

    def frequency_distribution(self) -> FrequencyDistribution:
        expected = len(self.store) * PICK_COUNT / MAIN_MAX
        sq = sum((i.total_frequency - expected) ** 2 for i in self.main)
        std = math.sqrt(sq / MAIN_MAX)
        outside = sum(1 for i in self.main if abs(i.total_frequency - expected) > 2 * std)
        return FrequencyDistribution(
            expected_frequency=expected,
            standard_deviation=std,
            coefficient_of_variation=std / expected * 100 if expected > 0 else 0.0,
            outside_two_sigma=outside,
        )

    def gap_summary(self) -> GapSummary:
        gaps = [g for i in self.main for g in i.gaps_since_drawn]
        return GapSummary(
            average_gap_count=len(gaps) / MAIN_MAX,
            min_gap=min(gaps) if gaps else None,
            max_gap=max(gaps) if gaps else None,
        )

    def summary(self) -> AnalysisSummary:
        return AnalysisSummary(
            total_drawings=len(self.store),
            first_date=self.store.first_date,
            last_date=self.store.last_date,
            recent_window=self.config.recent_window,
            chi_square=self.chi_square,
            frequency_distribution=self.frequency_distribution(),
            gap_summary=self.gap_summary(),
            patterns=self.patterns.stats,
        )
