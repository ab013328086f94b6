"""Application configuration using Pydantic Settings."""

from pathlib import Path

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RECENT_WINDOW = 50
DEFAULT_GAP_MULTIPLIER = 1.5
DEFAULT_CONFIDENCE_LEVEL = 0.95


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    APP_NAME: str = "Lucky for Life Analyzer"
    DEBUG: bool = True
    LOG_FILE: Path | None = Path("logs/app.log")

    # Data
    DATA_FILE: Path = Path("data/lucky-numbers-history.csv")
    EXPORT_DIR: Path = Path("exports")

    # Analysis
    RECENT_WINDOW: int = DEFAULT_RECENT_WINDOW
    MIN_GAP_MULTIPLIER: float = DEFAULT_GAP_MULTIPLIER
    CONFIDENCE_LEVEL: float = DEFAULT_CONFIDENCE_LEVEL

    @field_validator("LOG_FILE", mode="before")
    @classmethod
    def _blank_log_file(cls, v):
        # LOG_FILE= in the environment disables the file sink
        if isinstance(v, str) and not v.strip():
            return None
        return v


settings = Settings()


class AnalysisConfig(BaseModel):
    """Per-run analysis knobs. Out-of-range values fall back to the defaults."""

    recent_window: int = DEFAULT_RECENT_WINDOW
    min_gap_multiplier: float = DEFAULT_GAP_MULTIPLIER
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL

    @field_validator("recent_window")
    @classmethod
    def _clamp_window(cls, v: int) -> int:
        return v if v > 0 else DEFAULT_RECENT_WINDOW

    @field_validator("min_gap_multiplier")
    @classmethod
    def _clamp_multiplier(cls, v: float) -> float:
        return v if v >= 0 else DEFAULT_GAP_MULTIPLIER

    @field_validator("confidence_level")
    @classmethod
    def _clamp_confidence(cls, v: float) -> float:
        return v if 0 < v < 1 else DEFAULT_CONFIDENCE_LEVEL

    @classmethod
    def from_settings(cls, s: Settings = settings) -> "AnalysisConfig":
        return cls(
            recent_window=s.RECENT_WINDOW,
            min_gap_multiplier=s.MIN_GAP_MULTIPLIER,
            confidence_level=s.CONFIDENCE_LEVEL,
        )
