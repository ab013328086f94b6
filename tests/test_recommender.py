import math
from datetime import date

import pytest

from lucky_for_life.analysis.recommender import (
    STRATEGIES,
    STRATEGY_WEIGHTS,
    UNKNOWN_STRATEGY_WEIGHT,
    distinct_picks,
)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_scores_cover_pool_and_are_ranked(analyzer, strategy):
    scored = analyzer.score_numbers(strategy)
    assert len(scored) == 48
    assert sorted(s.number for s in scored) == list(range(1, 49))
    scores = [s.score for s in scored]
    assert scores == sorted(scores, reverse=True)


@pytest.mark.parametrize(
    "strategy, numbers",
    [
        ("hot", [3, 5, 12, 15, 23]),
        ("frequency", [2, 5, 12, 23, 34]),
        ("overdue", [1, 5, 12, 23, 34]),
        ("balanced", [2, 5, 12, 23, 34]),
    ],
)
def test_recommended_numbers(analyzer, strategy, numbers):
    recommended = analyzer.recommend(strategy)
    assert recommended.numbers == numbers
    assert recommended.special_number == 7
    assert recommended.strategy == strategy


def test_balanced_factors(analyzer):
    scored = {s.number: s for s in analyzer.score_numbers("balanced")}
    assert scored[23].score == pytest.approx(100.0)
    assert scored[23].factors == ["Overdue-2.0x"]
    assert scored[12].score == pytest.approx(40 + 4 / 3 * 20)
    assert scored[34].factors == []


def test_hot_factors(analyzer):
    scored = {s.number: s for s in analyzer.score_numbers("hot")}
    assert scored[5].score == 200
    assert scored[5].factors == ["Recent-2"]
    assert scored[2].factors == []


def test_pattern_strategy_uses_pair_weights(analyzer):
    top = analyzer.score_numbers("pattern")[0]
    assert top.number == 23
    assert top.score == 12
    assert top.factors == []


def test_confidence(analyzer):
    for strategy in STRATEGIES:
        expected = analyzer.randomness_score / 100 * STRATEGY_WEIGHTS[strategy]
        assert analyzer.recommend(strategy).confidence == pytest.approx(expected)


def test_unknown_strategy(analyzer):
    assert all(s.score == 0 for s in analyzer.score_numbers("astrology"))
    recommended = analyzer.recommend("astrology")
    assert recommended.numbers == [1, 2, 3, 4, 5]
    assert recommended.confidence == pytest.approx(analyzer.randomness_score / 100 * UNKNOWN_STRATEGY_WEIGHT)
    assert recommended.explanation == "Custom strategy based on statistical analysis"


def test_recommendations_follow_strategy_order(analyzer):
    sets = analyzer.recommendations()
    assert [s.strategy for s in sets] == list(STRATEGIES)
    assert [s.strategy for s in analyzer.recommendations(2)] == ["balanced", "hot"]
    for s in sets:
        assert len(set(s.numbers)) == 5
        assert s.numbers == sorted(s.numbers)


def test_empty_history_still_recommends(empty_analyzer):
    recommended = empty_analyzer.recommend("balanced")
    assert recommended.numbers == [1, 2, 3, 4, 5]
    assert recommended.special_number == 1
    assert recommended.confidence == pytest.approx(0.95)


def test_cosmic_pick_is_distinct_and_deterministic(analyzer):
    day = date(2024, 1, 15)
    pick = analyzer.cosmic_pick(day)
    assert len(pick) == 5
    assert len(set(pick)) == 5
    assert all(1 <= n <= 48 for n in pick)
    assert analyzer.cosmic_pick(day) == pick


def test_cosmic_pick_range_over_many_days(analyzer):
    day = date(2023, 1, 1)
    for offset in range(0, 730, 11):
        pick = analyzer.cosmic_pick(date.fromordinal(day.toordinal() + offset))
        assert len(set(pick)) == 5
        assert all(1 <= n <= 48 for n in pick)



@pytest.mark.parametrize("day", [date(2024, 1, 14), date(2024, 1, 15), date(2025, 7, 4)])
def test_cosmic_pick_formulas(analyzer, day):
    cosmic = analyzer.correlations.cosmic_for(day)
    raw = [
        math.floor(cosmic.moon_phase * 48) % 48 + 1,
        (day.isoweekday() % 7) * 7 % 48 + 1,
        len(cosmic.zodiac_sign) * 3 % 48 + 1,
        math.floor(cosmic.solar_activity.f10_7_index) % 48 + 1,
        math.floor(cosmic.weather_data.temperature) % 48 + 1,
    ]
    assert analyzer.cosmic_pick(day) == distinct_picks(raw)
    if len(set(raw)) == 5:
        assert analyzer.cosmic_pick(day) == raw


def test_cosmic_pick_fixed_terms(analyzer):
    # 2024-01-14 is a Sunday (weekday 0) in Capricorn
    pick = analyzer.cosmic_pick(date(2024, 1, 14))
    assert pick[0] == 5  # phase ~0.09 -> floor(4.3) + 1
    assert pick[1] == 1
    assert pick[2] == len("Capricorn") * 3 + 1


def test_distinct_picks_step_forward_and_wrap():
    assert distinct_picks([48, 48, 48, 1, 5]) == [48, 1, 2, 3, 5]
    assert distinct_picks([7, 7, 8, 7, 9]) == [7, 8, 9, 10, 11]
    assert distinct_picks([3, 1, 4, 15, 9]) == [3, 1, 4, 15, 9]
