"""Pydantic schemas for statistics."""

from datetime import date

from pydantic import BaseModel, Field, computed_field


class NumberInfo(BaseModel):
    number: int
    total_frequency: int = 0
    recent_frequency: int = 0
    last_seen_index: int | None = None  # None = never drawn
    last_seen_date: date | None = None
    gaps_since_drawn: list[int] = Field(default_factory=list)
    average_gap: float = 0.0
    standard_deviation: float = 0.0
    current_gap: int = 0
    expected_frequency: float = 0.0
    chi_square_component: float = 0.0

    @property
    def overdue_ratio(self) -> float:
        return self.current_gap / self.average_gap if self.average_gap > 0 else 0.0


class CombinationPattern(BaseModel):
    numbers: tuple[int, ...]
    frequency: int = 0
    last_seen_index: int = 0

    @computed_field
    @property
    def key(self) -> str:
        return "-".join(str(n) for n in self.numbers)


class PatternStats(BaseModel):
    odd_even_distribution: dict[str, int] = Field(default_factory=dict)
    sum_range_distribution: dict[int, int] = Field(default_factory=dict)
    consecutive_count: int = 0
    decade_distribution: dict[int, int] = Field(default_factory=dict)


class ChiSquareResult(BaseModel):
    main: float
    special: float
    total: float
    main_degrees_of_freedom: int
    special_degrees_of_freedom: int
    main_critical_value: float
    special_critical_value: float
    main_randomness: float
    special_randomness: float
    randomness_score: float  # 0-100, 100 = perfectly uniform
    p_value: float  # upper tail of the combined statistic, informational


class ScoredNumber(BaseModel):
    number: int
    score: float
    factors: list[str] = Field(default_factory=list)


class RecommendedSet(BaseModel):
    numbers: list[int]
    special_number: int
    strategy: str
    confidence: float
    explanation: str


class FrequencyDistribution(BaseModel):
    expected_frequency: float
    standard_deviation: float
    coefficient_of_variation: float  # percent
    outside_two_sigma: int


class GapSummary(BaseModel):
    average_gap_count: float  # recorded gaps per main number
    min_gap: int | None
    max_gap: int | None


class AnalysisSummary(BaseModel):
    total_drawings: int
    first_date: date | None
    last_date: date | None
    recent_window: int
    chi_square: ChiSquareResult
    frequency_distribution: FrequencyDistribution
    gap_summary: GapSummary
    patterns: PatternStats
