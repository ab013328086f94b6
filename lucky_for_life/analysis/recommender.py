"""Strategy-based number scoring and recommended sets."""

import math
from datetime import date

from lucky_for_life.analysis.correlation import CorrelationEngine
from lucky_for_life.analysis.number_stats import NumberStatsTracker
from lucky_for_life.analysis.pattern_detector import PatternDetector
from lucky_for_life.schemas.drawing import MAIN_MAX, PICK_COUNT
from lucky_for_life.schemas.statistics import RecommendedSet, ScoredNumber

STRATEGIES = ("balanced", "hot", "overdue", "pattern", "frequency")

STRATEGY_WEIGHTS = {
    "balanced": 0.95,
    "hot": 0.85,
    "overdue": 0.80,
    "pattern": 0.75,
    "frequency": 0.90,
}
UNKNOWN_STRATEGY_WEIGHT = 0.70

EXPLANATIONS = {
    "balanced": "Combines hot numbers, overdue numbers, and frequency analysis for a well-rounded selection",
    "hot": "Focuses on numbers that have appeared frequently in recent drawings",
    "overdue": "Selects numbers that haven't appeared for longer than their average gap",
    "pattern": "Based on numbers that frequently appear together in winning combinations",
    "frequency": "Selects the most frequently drawn numbers throughout the entire history",
}

BALANCED_HOT_MIN = 3
BALANCED_OVERDUE_RATIO = 1.3
STRONG_PAIR_SCORE = 50


def _ranked(scored: list[ScoredNumber]) -> list[ScoredNumber]:
    # highest score first, ascending number among ties
    return sorted(scored, key=lambda s: (-s.score, s.number))


class RecommendationScorer:
    """Score the main pool under a strategy and assemble recommended sets."""

    def __init__(
        self,
        main: NumberStatsTracker,
        special: NumberStatsTracker,
        patterns: PatternDetector,
        randomness_score: float,
    ):
        self.main = main
        self.special = special
        self.patterns = patterns
        self.randomness_score = randomness_score

    def score(self, strategy: str) -> list[ScoredNumber]:
        total = self.main.total_drawings
        pair_weights = self.patterns.pair_weights() if strategy == "pattern" else None
        scored = []

        for info in self.main:
            score = 0.0
            factors: list[str] = []

            if strategy == "balanced":
                if total:
                    score += info.total_frequency / total * 100
                if info.recent_frequency > BALANCED_HOT_MIN:
                    score += info.recent_frequency * 10
                    factors.append(f"Hot-{info.recent_frequency}")
                if info.average_gap > 0 and info.current_gap > info.average_gap * BALANCED_OVERDUE_RATIO:
                    score += info.overdue_ratio * 20
                    factors.append(f"Overdue-{info.overdue_ratio:.1f}x")

            elif strategy == "hot":
                score = info.recent_frequency * 100.0
                if info.recent_frequency:
                    factors.append(f"Recent-{info.recent_frequency}")

            elif strategy == "overdue":
                if info.average_gap > 0:
                    score = info.overdue_ratio * 100
                    factors.append(f"Gap-{info.current_gap}")

            elif strategy == "pattern":
                score = float(pair_weights[info.number])
                if score > STRONG_PAIR_SCORE:
                    factors.append("StrongPairs")

            elif strategy == "frequency":
                score = float(info.total_frequency)
                factors.append(f"Freq-{info.total_frequency}")

            scored.append(ScoredNumber(number=info.number, score=score, factors=factors))

        return _ranked(scored)

    def score_special(self) -> list[ScoredNumber]:
        scored = [
            ScoredNumber(
                number=info.number,
                score=float(info.total_frequency + 5 * info.recent_frequency),
                factors=[f"Total-{info.total_frequency}", f"Recent-{info.recent_frequency}"],
            )
            for info in self.special
        ]
        return _ranked(scored)

    def confidence(self, strategy: str) -> float:
        weight = STRATEGY_WEIGHTS.get(strategy, UNKNOWN_STRATEGY_WEIGHT)
        return self.randomness_score / 100.0 * weight

    def select_set(self, strategy: str) -> RecommendedSet:
        numbers: list[int] = []
        for scored in self.score(strategy):
            if scored.number not in numbers:
                numbers.append(scored.number)
            if len(numbers) == PICK_COUNT:
                break

        return RecommendedSet(
            numbers=sorted(numbers),
            special_number=self.score_special()[0].number,
            strategy=strategy,
            confidence=self.confidence(strategy),
            explanation=EXPLANATIONS.get(strategy, "Custom strategy based on statistical analysis"),
        )

    def recommendations(self, count: int = len(STRATEGIES)) -> list[RecommendedSet]:
        return [self.select_set(s) for s in STRATEGIES[:count]]


def cosmic_pick(engine: CorrelationEngine, today: date) -> list[int]:
    """Five distinct numbers derived from the day's cosmic conditions.

    Entertainment only: the formulas have no statistical meaning, they are
    kept stable so a given day always yields the same pick.
    """
    cosmic = engine.cosmic_for(today)
    weekday = today.isoweekday() % 7  # Sunday = 0

    raw = [
        (math.floor(cosmic.moon_phase * MAIN_MAX) % MAIN_MAX) + 1,
        ((weekday * 7) % MAIN_MAX) + 1,
        ((len(cosmic.zodiac_sign) * 3) % MAIN_MAX) + 1,
        (math.floor(cosmic.solar_activity.f10_7_index) % MAIN_MAX) + 1,
        (math.floor(cosmic.weather_data.temperature) % MAIN_MAX) + 1,
    ]

    return distinct_picks(raw)


def distinct_picks(raw: list[int]) -> list[int]:
    """Replace repeats with the next free number, wrapping 48 to 1."""
    picked: list[int] = []
    for num in raw:
        while num in picked:
            num = (num % MAIN_MAX) + 1
        picked.append(num)
    return picked
