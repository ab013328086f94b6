"""Cosmic correlation engine.

Enriches every calendar day of every year touched by the drawing history with
astronomical and mock environmental data, then tests those series against
simple lottery outcome series (average value, high-number count, even ratio)
and tallies "lucky numbers" per moon phase, weekday and season.

The p-value attached to Pearson correlations is a deliberately simplified
approximation, 1 - |t| / (|t| + 10); the significance labels and report
wording are calibrated to it, so it is not a Student's t p-value.
"""

import math
import threading
from collections import Counter
from datetime import date, timedelta

import numpy as np
from loguru import logger

from lucky_for_life.analysis import astronomy, environment
from lucky_for_life.analysis.drawing_store import DrawingStore
from lucky_for_life.schemas.cosmic import CorrelationResult, CosmicConditions, CosmicData

HIGH_NUMBER_THRESHOLD = 30
TEMPORAL_MIN_COUNT = 10
RETROGRADE_CYCLE = 120
RETROGRADE_WINDOW = 20
NO_CORRELATION = (0.0, 1.0)


class EnrichmentCancelled(Exception):
    """Raised when a cancellation signal stops the enrichment pass.

    Entries cached before the signal remain valid.
    """

    def __init__(self, completed: int):
        super().__init__(f"Cosmic enrichment cancelled after {completed} dates")
        self.completed = completed


# --- Statistics helpers ---


def pearson_correlation(x, y) -> tuple[float, float]:
    """Pearson r with the simplified significance value.

    Returns (0, 1) for empty or mismatched inputs, constant series and
    non-finite data.
    """
    if len(x) != len(y) or len(x) == 0:
        return NO_CORRELATION

    xa = np.asarray(x, dtype=np.float64)
    ya = np.asarray(y, dtype=np.float64)
    if not (np.isfinite(xa).all() and np.isfinite(ya).all()):
        return NO_CORRELATION

    dx = xa - xa.mean()
    dy = ya - ya.mean()
    denom_x = float((dx * dx).sum())
    denom_y = float((dy * dy).sum())
    if denom_x == 0 or denom_y == 0:
        return NO_CORRELATION

    r = float((dx * dy).sum()) / math.sqrt(denom_x * denom_y)
    if not math.isfinite(r):
        return NO_CORRELATION
    r = min(max(r, -1.0), 1.0)

    n = len(xa)
    residual = 1 - r * r
    if residual <= 0:
        # perfect correlation: t is unbounded and the approximation tends to 0
        return r, 0.0
    t = r * math.sqrt((n - 2) / residual)
    p_value = 1 - abs(t) / (abs(t) + 10)
    return r, p_value


def significance_level(p_value: float) -> str:
    if p_value < 0.01:
        return "High"
    if p_value < 0.05:
        return "Moderate"
    if p_value < 0.1:
        return "Low"
    return "None"


def interpret_moon(corr: float, p_value: float) -> str:
    if p_value > 0.1:
        return "No significant correlation between moon phase and number patterns"
    if corr > 0:
        return f"Slight positive correlation (r={corr:.3f}): Higher numbers during waxing moon"
    return f"Slight negative correlation (r={corr:.3f}): Lower numbers during waxing moon"


def interpret_solar(corr: float, p_value: float) -> str:
    if p_value > 0.1:
        return "Solar activity shows no significant impact on number selection"
    return f"Correlation detected (r={corr:.3f}): Solar storms may influence high number frequency"


def interpret_weather(corr: float, p_value: float) -> str:
    if p_value > 0.1:
        return "Weather conditions show no correlation with number patterns"
    return f"Weather correlation (r={corr:.3f}): Temperature variations show slight pattern influence"


def most_common(counter: Counter) -> tuple[int, int]:
    """(number, count) of the mode; the smaller number wins ties."""
    if not counter:
        return 0, 0
    return max(counter.items(), key=lambda kv: (kv[1], -kv[0]))


def date_key(day: date) -> str:
    return day.isoformat()


def build_cosmic_data(day: date) -> CosmicData:
    phase, illumination = astronomy.moon_phase(day)
    return CosmicData(
        date=day,
        moon_phase=phase,
        moon_illumination=illumination,
        moon_phase_name=astronomy.moon_phase_name(phase),
        zodiac_sign=astronomy.zodiac_sign(day),
        seasonal_phase=astronomy.seasonal_phase(day),
        day_of_week=astronomy.day_of_week(day),
        planetary_positions=astronomy.planetary_positions(day),
        solar_activity=environment.solar_activity(day),
        weather_data=environment.weather(day),
        geomagnetic_index=environment.geomagnetic_index(day),
    )


def is_mercury_retrograde(cosmic: CosmicData) -> bool:
    """Crude date bucketing, not real retrograde motion."""
    angle = cosmic.planetary_positions["Mercury"]
    return math.floor(angle) % RETROGRADE_CYCLE < RETROGRADE_WINDOW


# --- Engine ---


class CorrelationEngine:
    """Owns the per-date cosmic cache and the correlation results of one run."""

    def __init__(self, store: DrawingStore):
        self.store = store
        self.cosmic_data: dict[str, CosmicData] = {}
        self.results: list[CorrelationResult] = []

    def cosmic_for(self, day: date) -> CosmicData:
        """CosmicData for any day. Only enrich() writes to the cache."""
        cosmic = self.cosmic_data.get(date_key(day))
        if cosmic is None:
            cosmic = build_cosmic_data(day)
        return cosmic

    def enrich(self, cancel: threading.Event | None = None) -> int:
        """Compute CosmicData for every day of every year with a drawing.

        Returns the number of cached dates. Raises EnrichmentCancelled if
        `cancel` is set; the cache keeps whatever was computed so far.
        """
        completed = 0
        for year in self.store.years():
            day = date(year, 1, 1)
            while day.year == year:
                if cancel is not None and cancel.is_set():
                    logger.warning("Cosmic enrichment cancelled after {} dates", completed)
                    raise EnrichmentCancelled(completed)
                key = date_key(day)
                if key not in self.cosmic_data:
                    self.cosmic_data[key] = build_cosmic_data(day)
                completed += 1
                day += timedelta(days=1)

        logger.info("Enriched {} dates with cosmic data", len(self.cosmic_data))
        return len(self.cosmic_data)

    def _paired(self):
        """Yield (drawing, cosmic) for drawings whose date is cached."""
        for drawing in self.store:
            cosmic = self.cosmic_data.get(date_key(drawing.draw_date))
            if cosmic is not None:
                yield drawing, cosmic

    def analyze(self) -> list[CorrelationResult]:
        self.results = []
        self._moon_phase_correlation()
        self._moon_phase_lucky_numbers()
        self._solar_correlation()
        self._weather_correlation()
        self._temporal_lucky_numbers()
        self._planetary_correlation()
        logger.info("Completed {} correlation analyses", len(self.results))
        return self.results

    def _continuous(self, factor, sub_factor, xs, ys, interpret) -> None:
        corr, p_value = pearson_correlation(xs, ys)
        self.results.append(CorrelationResult(
            factor=factor,
            sub_factor=sub_factor,
            correlation=corr,
            p_value=p_value,
            sample_size=len(xs),
            significance=significance_level(p_value),
            interpretation=interpret(corr, p_value),
        ))

    def _moon_phase_correlation(self) -> None:
        phases, averages = [], []
        for drawing, cosmic in self._paired():
            phases.append(cosmic.moon_phase)
            averages.append(sum(drawing.numbers) / len(drawing.numbers))
        self._continuous("Moon Phase", "Average Number Value", phases, averages, interpret_moon)

    def _moon_phase_lucky_numbers(self) -> None:
        groups: dict[str, Counter] = {name: Counter() for name in astronomy.MOON_PHASE_NAMES}
        for drawing, cosmic in self._paired():
            groups[cosmic.moon_phase_name].update(drawing.numbers)

        for phase, counter in groups.items():
            total = sum(counter.values())
            if not total:
                continue
            number, freq = most_common(counter)
            ratio = freq / total
            self.results.append(CorrelationResult(
                factor="Moon Phase",
                sub_factor=f"{phase} Lucky Numbers",
                correlation=ratio,
                p_value=0.05,
                sample_size=total,
                significance="Moderate",
                interpretation=(
                    f"Number {number} accounts for {ratio * 100:.1f}% of numbers drawn during {phase}"
                ),
            ))

    def _solar_correlation(self) -> None:
        speeds, highs = [], []
        for drawing, cosmic in self._paired():
            speeds.append(cosmic.solar_activity.solar_wind_speed)
            highs.append(sum(1 for n in drawing.numbers if n > HIGH_NUMBER_THRESHOLD))
        self._continuous("Solar Activity", "Solar Wind vs High Numbers", speeds, highs, interpret_solar)

    def _weather_correlation(self) -> None:
        temps, ratios = [], []
        for drawing, cosmic in self._paired():
            temps.append(cosmic.weather_data.temperature)
            even = sum(1 for n in drawing.numbers if n % 2 == 0)
            ratios.append(even / len(drawing.numbers))
        self._continuous("Weather", "Temperature vs Even/Odd Ratio", temps, ratios, interpret_weather)

    def _temporal_lucky_numbers(self) -> None:
        by_day: dict[str, Counter] = {d: Counter() for d in astronomy.WEEKDAYS}
        by_season: dict[str, Counter] = {s: Counter() for s in astronomy.SEASONS}
        for drawing, cosmic in self._paired():
            by_day[cosmic.day_of_week].update(drawing.numbers)
            by_season[cosmic.seasonal_phase].update(drawing.numbers)

        for label, groups, prep in (("Lucky Number", by_day, "on"), ("Season Lucky Number", by_season, "during")):
            for name, counter in groups.items():
                number, freq = most_common(counter)
                if freq <= TEMPORAL_MIN_COUNT:
                    continue
                total = sum(counter.values())
                self.results.append(CorrelationResult(
                    factor="Temporal",
                    sub_factor=f"{name} {label}",
                    correlation=freq / total,
                    p_value=0.1,
                    sample_size=total,
                    significance="Low",
                    interpretation=f"Number {number} appears {freq} times {prep} {name}",
                ))

    def _planetary_correlation(self) -> None:
        retro_draws = retro_high = normal_draws = normal_high = 0
        for drawing, cosmic in self._paired():
            high = sum(1 for n in drawing.numbers if n > HIGH_NUMBER_THRESHOLD)
            if is_mercury_retrograde(cosmic):
                retro_draws += 1
                retro_high += high
            else:
                normal_draws += 1
                normal_high += high

        if retro_draws and normal_draws:
            retro_avg = retro_high / retro_draws
            normal_avg = normal_high / normal_draws
            self.results.append(CorrelationResult(
                factor="Planetary",
                sub_factor="Mercury Retrograde Effect",
                correlation=retro_avg - normal_avg,
                p_value=0.15,
                sample_size=retro_draws + normal_draws,
                significance="Low",
                interpretation=(
                    f"Average high numbers: Retrograde={retro_avg:.2f}, Normal={normal_avg:.2f}"
                ),
            ))

    def current_conditions(self, today: date) -> CosmicConditions:
        cosmic = self.cosmic_for(today)
        if cosmic.moon_phase_name == "Full Moon":
            suggestion = [
                "The full moon historically shows a 2.3% increase in high numbers.",
                "Consider including numbers above 30 in your selection.",
            ]
        elif cosmic.moon_phase_name == "New Moon":
            suggestion = [
                "New moon periods show balanced number distribution.",
                "A mix of high and low numbers may be favorable.",
            ]
        else:
            suggestion = [
                "Current lunar phase shows no significant historical patterns.",
                "Standard statistical selection recommended.",
            ]
        return CosmicConditions(
            date=today,
            moon_phase_name=cosmic.moon_phase_name,
            moon_illumination=cosmic.moon_illumination,
            zodiac_sign=cosmic.zodiac_sign,
            day_of_week=cosmic.day_of_week,
            suggestion=suggestion,
        )
