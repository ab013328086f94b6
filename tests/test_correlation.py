import threading
from collections import Counter
from datetime import date, timedelta

import pytest

from lucky_for_life.analysis.analyzer import LotteryAnalyzer
from lucky_for_life.analysis.correlation import (
    CorrelationEngine,
    EnrichmentCancelled,
    is_mercury_retrograde,
    most_common,
    pearson_correlation,
    significance_level,
)
from lucky_for_life.analysis.drawing_store import DrawingStore
from lucky_for_life.config import AnalysisConfig
from lucky_for_life.schemas.drawing import Drawing


class CountdownEvent:
    """Reports set after a fixed number of checks."""

    def __init__(self, checks: int):
        self.remaining = checks

    def is_set(self) -> bool:
        self.remaining -= 1
        return self.remaining < 0


def test_pearson_perfect_positive():
    r, p = pearson_correlation([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
    assert r == pytest.approx(1.0)
    assert p < 1e-6


def test_pearson_perfect_negative():
    r, p = pearson_correlation([1, 2, 3, 4, 5], [10, 8, 6, 4, 2])
    assert r == pytest.approx(-1.0)
    assert p < 1e-6


def test_pearson_simplified_p_value():
    x = [1, 2, 3, 4, 5, 6]
    y = [2, 1, 4, 3, 6, 5]
    r, p = pearson_correlation(x, y)
    t = r * ((len(x) - 2) / (1 - r * r)) ** 0.5
    assert 0 < r < 1
    assert p == pytest.approx(1 - abs(t) / (abs(t) + 10))


@pytest.mark.parametrize(
    "x, y",
    [
        ([], []),
        ([1, 2, 3], [1, 2]),
        ([3, 3, 3], [1, 2, 3]),
        ([1, 2, 3], [5, 5, 5]),
        ([1, float("nan"), 3], [1, 2, 3]),
    ],
)
def test_pearson_degenerate_inputs(x, y):
    assert pearson_correlation(x, y) == (0.0, 1.0)


@pytest.mark.parametrize(
    "p, label",
    [(0.005, "High"), (0.01, "Moderate"), (0.049, "Moderate"), (0.05, "Low"), (0.09, "Low"), (0.1, "None"), (1.0, "None")],
)
def test_significance_level(p, label):
    assert significance_level(p) == label


def test_most_common_prefers_smaller_number():
    assert most_common(Counter({30: 2, 7: 2, 12: 1})) == (7, 2)
    assert most_common(Counter()) == (0, 0)


def test_enrich_covers_every_day_of_touched_years(analyzer):
    assert analyzer.correlations.enrich() == 366  # 2024 is a leap year
    assert "2024-02-29" in analyzer.correlations.cosmic_data
    assert "2024-12-31" in analyzer.correlations.cosmic_data


def test_enrich_empty_history():
    assert CorrelationEngine(DrawingStore()).enrich() == 0


def test_cancelled_before_start(analyzer):
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(EnrichmentCancelled) as exc:
        analyzer.correlations.enrich(cancel)
    assert exc.value.completed == 0
    assert analyzer.correlations.cosmic_data == {}


def test_cancel_midway_keeps_partial_cache(analyzer):
    engine = analyzer.correlations
    with pytest.raises(EnrichmentCancelled) as exc:
        engine.enrich(CountdownEvent(10))
    assert exc.value.completed == 10
    assert len(engine.cosmic_data) == 10
    assert engine.cosmic_data["2024-01-10"].date == date(2024, 1, 10)

    assert engine.enrich() == 366


def test_cosmic_for_does_not_grow_cache(analyzer):
    engine = analyzer.correlations
    engine.enrich()
    assert engine.cosmic_for(date(2024, 3, 1)) is engine.cosmic_data["2024-03-01"]

    first = engine.cosmic_for(date(2030, 5, 5))
    assert "2030-05-05" not in engine.cosmic_data
    assert len(engine.cosmic_data) == 366
    assert engine.cosmic_for(date(2030, 5, 5)) == first
    assert first.zodiac_sign == "Taurus"
    assert first.seasonal_phase == "Spring"
    assert first.day_of_week == "Sunday"


def test_analyze_results(analyzer):
    results = analyzer.run_correlations()
    factors = [(r.factor, r.sub_factor) for r in results]
    assert factors[0] == ("Moon Phase", "Average Number Value")
    assert ("Solar Activity", "Solar Wind vs High Numbers") in factors
    assert ("Weather", "Temperature vs Even/Odd Ratio") in factors

    continuous = [r for r in results if r.factor in ("Solar Activity", "Weather")]
    for r in continuous:
        assert r.sample_size == 5
        assert -1 <= r.correlation <= 1
        assert 0 <= r.p_value <= 1

    lucky = [r for r in results if r.sub_factor.endswith("Lucky Numbers")]
    assert lucky
    assert sum(r.sample_size for r in lucky) == 25
    assert all(r.significance == "Moderate" and r.p_value == 0.05 for r in lucky)

    # five drawings never give any weekday or season more than 10 hits for one number
    assert not [r for r in results if r.factor == "Temporal"]


def _mondays(start: date, weeks: int, numbers, first_index: int) -> list[Drawing]:
    return [
        Drawing(
            draw_date=start + timedelta(weeks=i),
            numbers=numbers,
            special_number=1,
            sequence_index=first_index + i,
        )
        for i in range(weeks)
    ]


def test_temporal_lucky_numbers_need_more_than_ten_hits():
    # every drawing falls on a winter Monday and contains 3
    drawings = _mondays(date(2024, 1, 1), 7, (3, 10, 20, 30, 40), 0)
    results = LotteryAnalyzer(drawings, AnalysisConfig()).run_correlations()
    assert not [r for r in results if r.factor == "Temporal"]

    drawings += _mondays(date(2024, 2, 19), 4, (3, 11, 21, 31, 41), 7)
    results = LotteryAnalyzer(drawings, AnalysisConfig()).run_correlations()
    temporal = [r for r in results if r.factor == "Temporal"]
    assert [r.sub_factor for r in temporal] == ["Monday Lucky Number", "Winter Season Lucky Number"]
    assert temporal[0].interpretation == "Number 3 appears 11 times on Monday"
    assert temporal[1].interpretation == "Number 3 appears 11 times during Winter"
    assert temporal[0].sample_size == 55
    assert temporal[0].correlation == pytest.approx(11 / 55)


def test_mercury_retrograde_bucketing(analyzer):
    cosmic = analyzer.correlations.cosmic_for(date(2024, 1, 15))
    angle = cosmic.planetary_positions["Mercury"]
    assert is_mercury_retrograde(cosmic) == (int(angle) % 120 < 20)


def test_current_conditions(analyzer):
    full = analyzer.correlations.current_conditions(date(2000, 1, 21))
    assert full.moon_phase_name == "Full Moon"
    assert "numbers above 30" in full.suggestion[1]

    new = analyzer.correlations.current_conditions(date(2000, 1, 7))
    assert new.moon_phase_name == "New Moon"
    assert new.suggestion[0].startswith("New moon periods")
