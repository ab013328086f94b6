"""Deterministic stand-ins for solar, weather and geomagnetic measurements.

These are sinusoids of the date's Unix timestamp (and day of year for the
seasonal temperature swing). They are not real observations; they only need
to be reproducible so that correlation runs are repeatable.
"""

import math
from datetime import date, datetime

from lucky_for_life.analysis.astronomy import as_utc
from lucky_for_life.schemas.cosmic import SolarData, WeatherData

DAY = 86400.0


def _ts(when: date | datetime) -> float:
    return as_utc(when).timestamp()


def solar_activity(when: date | datetime) -> SolarData:
    t = _ts(when)
    return SolarData(
        solar_wind_speed=350 + math.sin(t / DAY) * 50,
        solar_wind_density=5 + math.cos(t / DAY) * 2,
        bz_component=-2 + math.sin(t / (2 * DAY)) * 5,
        proton_flux=0.1 + abs(math.sin(t / (3 * DAY))) * 10,
        electron_flux=1000 + math.sin(t / (4 * DAY)) * 500,
        f10_7_index=70 + math.sin(t / (5 * DAY)) * 30,
    )


def weather(when: date | datetime) -> WeatherData:
    t = _ts(when)
    day_of_year = as_utc(when).timetuple().tm_yday
    return WeatherData(
        temperature=15 + 10 * math.sin(2 * math.pi * day_of_year / 365) + math.sin(t / DAY) * 5,
        pressure=1013 + math.sin(t / (2 * DAY)) * 10,
        humidity=60 + math.sin(t / DAY) * 20,
        wind_speed=5 + abs(math.sin(t / DAY)) * 10,
        precipitation=max(0.0, math.sin(t / (3 * DAY)) * 10),
        cloud_cover=50 + math.sin(t / (2 * DAY)) * 40,
    )


def geomagnetic_index(when: date | datetime) -> float:
    """Mock Kp index, always in [2, 7]."""
    return 2 + abs(math.sin(_ts(when) / (5 * DAY))) * 5
