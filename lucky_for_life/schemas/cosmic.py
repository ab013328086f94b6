"""Pydantic schemas for astronomical / environmental data and correlations."""

import datetime as dt

from pydantic import BaseModel, Field


class SolarData(BaseModel):
    solar_wind_speed: float  # km/s
    solar_wind_density: float  # p/cc
    bz_component: float  # nT
    proton_flux: float
    electron_flux: float
    f10_7_index: float  # solar flux units


class WeatherData(BaseModel):
    temperature: float  # Celsius
    pressure: float  # hPa
    humidity: float  # %
    wind_speed: float  # m/s
    precipitation: float  # mm
    cloud_cover: float  # %


class CosmicData(BaseModel):
    date: dt.date
    moon_phase: float  # 0 = new, 0.5 = full
    moon_illumination: float
    moon_phase_name: str
    zodiac_sign: str
    seasonal_phase: str
    day_of_week: str
    planetary_positions: dict[str, float]  # degrees
    solar_activity: SolarData
    weather_data: WeatherData
    geomagnetic_index: float  # Kp


class CorrelationResult(BaseModel):
    factor: str
    sub_factor: str | None = None
    correlation: float
    p_value: float
    sample_size: int
    significance: str  # High / Moderate / Low / None
    interpretation: str


class CosmicConditions(BaseModel):
    date: dt.date
    moon_phase_name: str
    moon_illumination: float
    zodiac_sign: str
    day_of_week: str
    suggestion: list[str] = Field(default_factory=list)


class CosmicPick(BaseModel):
    date: dt.date
    numbers: list[int]
