"""Closed-form astronomical approximations keyed on a calendar date.

All functions are pure: the same date always yields the same values. Dates
are interpreted as midnight UTC; datetimes without tzinfo are treated as UTC.
"""

import math
from bisect import bisect_right
from datetime import date, datetime, timezone

REFERENCE_NEW_MOON = datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc)
SYNODIC_MONTH = 29.53059
J2000 = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)

ORBITAL_PERIODS = {
    "Mercury": 87.97,
    "Venus": 224.70,
    "Mars": 686.98,
    "Jupiter": 4332.59,
    "Saturn": 10759.22,
}

MOON_PHASE_NAMES = (
    "New Moon",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full Moon",
    "Waning Gibbous",
    "Last Quarter",
    "Waning Crescent",
)
_PHASE_BOUNDS = (0.0625, 0.1875, 0.3125, 0.4375, 0.5625, 0.6875, 0.8125, 0.9375)

# month -> (first day of the later sign, sign before it, sign from that day)
_ZODIAC_CUSPS = {
    1: (20, "Capricorn", "Aquarius"),
    2: (19, "Aquarius", "Pisces"),
    3: (21, "Pisces", "Aries"),
    4: (20, "Aries", "Taurus"),
    5: (21, "Taurus", "Gemini"),
    6: (21, "Gemini", "Cancer"),
    7: (23, "Cancer", "Leo"),
    8: (23, "Leo", "Virgo"),
    9: (23, "Virgo", "Libra"),
    10: (23, "Libra", "Scorpio"),
    11: (22, "Scorpio", "Sagittarius"),
    12: (22, "Sagittarius", "Capricorn"),
}

ZODIAC_SIGNS = tuple(before for _, before, _ in _ZODIAC_CUSPS.values())
SEASONS = ("Spring", "Summer", "Autumn", "Winter")
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def as_utc(when: date | datetime) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime."""
    if isinstance(when, datetime):
        if when.tzinfo is None:
            return when.replace(tzinfo=timezone.utc)
        return when.astimezone(timezone.utc)
    return datetime(when.year, when.month, when.day, tzinfo=timezone.utc)


def _days_between(start: datetime, when: date | datetime) -> float:
    return (as_utc(when) - start).total_seconds() / 86400.0


def moon_phase(when: date | datetime) -> tuple[float, float]:
    """Return (phase in [0, 1), illumination in [0, 1])."""
    cycles = _days_between(REFERENCE_NEW_MOON, when) / SYNODIC_MONTH
    phase = cycles - math.floor(cycles)
    if phase >= 1.0:  # float rounding on tiny negative cycles
        phase = 0.0
    illumination = 0.5 * (1 - math.cos(2 * math.pi * phase))
    return phase, min(max(illumination, 0.0), 1.0)


def moon_phase_name(phase: float) -> str:
    """Eight buckets centred on the principal phases; both ends are New Moon."""
    idx = bisect_right(_PHASE_BOUNDS, phase)
    return MOON_PHASE_NAMES[idx % len(MOON_PHASE_NAMES)]


def zodiac_sign(when: date | datetime) -> str:
    cusp = _ZODIAC_CUSPS.get(when.month)
    if cusp is None:
        return "Unknown"
    first_day, before, after = cusp
    return before if when.day < first_day else after


def seasonal_phase(when: date | datetime) -> str:
    """Northern hemisphere season."""
    md = (when.month, when.day)
    if (3, 20) <= md < (6, 21):
        return "Spring"
    if (6, 21) <= md < (9, 23):
        return "Summer"
    if (9, 23) <= md < (12, 21):
        return "Autumn"
    return "Winter"


def day_of_week(when: date | datetime) -> str:
    return WEEKDAYS[when.weekday()]


def planetary_positions(when: date | datetime) -> dict[str, float]:
    """Mean-motion heliocentric angle in degrees for each planet, in [0, 360)."""
    days = _days_between(J2000, when)
    positions = {}
    for planet, period in ORBITAL_PERIODS.items():
        angle = math.fmod(days * 360.0 / period, 360.0)
        if angle < 0:
            angle += 360.0
        if angle >= 360.0:
            angle = 0.0
        positions[planet] = angle
    return positions
