"""Shared fixtures: the five-drawing reference history."""

import pytest

from lucky_for_life.analysis.analyzer import LotteryAnalyzer
from lucky_for_life.config import AnalysisConfig
from lucky_for_life.loader.csv_parser import load_drawings
from lucky_for_life.schemas.drawing import Drawing

SAMPLE_CSV = """Date,Number 1,Number 2,Number 3,Number 4,Number 5,Lucky Ball
01/15/2024,5,12,23,34,45,7
01/12/2024,3,15,22,38,44,12
01/09/2024,5,18,23,35,42,7
01/06/2024,7,12,25,33,48,15
01/03/2024,2,11,23,34,41,3
"""


@pytest.fixture
def sample_csv(tmp_path):
    path = tmp_path / "history.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def drawings(sample_csv) -> list[Drawing]:
    return load_drawings(sample_csv)


@pytest.fixture
def config() -> AnalysisConfig:
    return AnalysisConfig(recent_window=3, min_gap_multiplier=1.5, confidence_level=0.95)


@pytest.fixture
def analyzer(drawings, config) -> LotteryAnalyzer:
    return LotteryAnalyzer(drawings, config)


@pytest.fixture
def empty_analyzer() -> LotteryAnalyzer:
    return LotteryAnalyzer([], AnalysisConfig())
