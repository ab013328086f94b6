"""Per-number frequency / gap bookkeeping and chi-square randomness test."""

import math
from datetime import date

import numpy as np
from scipy import stats as sp_stats

from lucky_for_life.schemas.drawing import MAIN_MAX, PICK_COUNT, SPECIAL_MAX
from lucky_for_life.schemas.statistics import ChiSquareResult, NumberInfo

MAIN_DF = MAIN_MAX - 1
SPECIAL_DF = SPECIAL_MAX - 1


def _critical_value(confidence_level: float, df: int) -> float:
    # 95% -> 64.001 (df=47), 27.587 (df=17)
    return float(sp_stats.chi2.ppf(confidence_level, df))


def _randomness(partial: float, critical: float) -> float:
    return 100.0 * (1 - min(partial / critical, 1.0))


class NumberStatsTracker:
    """Track frequency and gap statistics for one pool of numbers.

    Appearances must be recorded once per number per drawing with
    non-decreasing drawing indices; finalize() derives the gap statistics.
    """

    def __init__(self, max_num: int, per_draw: int):
        self.max_num = max_num
        self.per_draw = per_draw
        self.total_drawings = 0
        self.numbers: dict[int, NumberInfo] = {
            n: NumberInfo(number=n) for n in range(1, max_num + 1)
        }

    def __getitem__(self, number: int) -> NumberInfo:
        return self.numbers[number]

    def __iter__(self):
        return iter(self.numbers.values())

    def record_appearance(
        self, number: int, drawing_index: int, draw_date: date, recent: bool = False
    ) -> None:
        info = self.numbers[number]
        info.total_frequency += 1
        if recent:
            info.recent_frequency += 1
        if info.last_seen_index is not None:
            info.gaps_since_drawn.append(drawing_index - info.last_seen_index)
        info.last_seen_index = drawing_index
        info.last_seen_date = draw_date

    def finalize(self, total_drawings: int) -> None:
        self.total_drawings = total_drawings
        expected = total_drawings * self.per_draw / self.max_num

        for info in self.numbers.values():
            gaps = np.asarray(info.gaps_since_drawn, dtype=np.float64)
            if gaps.size:
                info.average_gap = float(gaps.mean())
                # population std, 0 for a single gap
                info.standard_deviation = float(gaps.std())
            else:
                info.average_gap = 0.0
                info.standard_deviation = 0.0
            info.current_gap = info.last_seen_index if info.last_seen_index is not None else 0
            info.expected_frequency = expected

    def chi_square(self) -> float:
        """Sum of (observed - expected)^2 / expected; sets each component."""
        total = 0.0
        for info in self.numbers.values():
            if info.expected_frequency > 0:
                diff = info.total_frequency - info.expected_frequency
                info.chi_square_component = diff * diff / info.expected_frequency
                total += info.chi_square_component
            else:
                info.chi_square_component = 0.0
        return total


def chi_square_report(
    main: NumberStatsTracker,
    special: NumberStatsTracker,
    confidence_level: float = 0.95,
) -> ChiSquareResult:
    """Combine both pools into a chi-square result and randomness score."""
    main_chi = main.chi_square()
    special_chi = special.chi_square()
    total = main_chi + special_chi

    main_crit = _critical_value(confidence_level, MAIN_DF)
    special_crit = _critical_value(confidence_level, SPECIAL_DF)
    main_rand = _randomness(main_chi, main_crit)
    special_rand = _randomness(special_chi, special_crit)

    p_value = float(sp_stats.chi2.sf(total, MAIN_DF + SPECIAL_DF)) if total > 0 else 1.0
    if not math.isfinite(p_value):
        p_value = 1.0

    return ChiSquareResult(
        main=main_chi,
        special=special_chi,
        total=total,
        main_degrees_of_freedom=MAIN_DF,
        special_degrees_of_freedom=SPECIAL_DF,
        main_critical_value=main_crit,
        special_critical_value=special_crit,
        main_randomness=main_rand,
        special_randomness=special_rand,
        randomness_score=(main_rand + special_rand) / 2,
        p_value=p_value,
    )


def main_tracker() -> NumberStatsTracker:
    return NumberStatsTracker(MAIN_MAX, PICK_COUNT)


def special_tracker() -> NumberStatsTracker:
    return NumberStatsTracker(SPECIAL_MAX, 1)
