"""Analysis service: builds analyzer runs from the configured history file."""

import threading
from pathlib import Path

from loguru import logger

from lucky_for_life.analysis.analyzer import LotteryAnalyzer
from lucky_for_life.analysis.correlation import EnrichmentCancelled
from lucky_for_life.config import AnalysisConfig, settings
from lucky_for_life.loader.csv_parser import load_drawings

_current: LotteryAnalyzer | None = None


def build_analyzer(
    path: Path | str | None = None,
    config: AnalysisConfig | None = None,
    with_correlations: bool = True,
    cancel: threading.Event | None = None,
) -> LotteryAnalyzer:
    """Load the history file and run a full analysis.

    A cancelled enrichment leaves the statistics intact and the correlation
    results empty.
    """
    path = Path(path or settings.DATA_FILE)
    drawings = load_drawings(path)
    analyzer = LotteryAnalyzer(drawings, config or AnalysisConfig.from_settings())

    if with_correlations:
        try:
            analyzer.run_correlations(cancel)
        except EnrichmentCancelled as e:
            logger.warning("Correlation analysis skipped: {}", e)
    return analyzer


def get_analyzer() -> LotteryAnalyzer:
    """Return the cached analyzer, building it on first use."""
    global _current
    if _current is None:
        _current = build_analyzer()
    return _current


def reload_analyzer(config: AnalysisConfig | None = None) -> LotteryAnalyzer:
    """Discard the cached run and analyze the history file again."""
    global _current
    _current = build_analyzer(config=config)
    logger.info("Analysis reloaded: {} drawings", len(_current.store))
    return _current


def set_analyzer(analyzer: LotteryAnalyzer | None) -> None:
    global _current
    _current = analyzer


def randomness_verdict(score: float) -> str:
    if score > 90:
        return "highly random"
    if score > 70:
        return "mostly random with minor deviations"
    return "showing some non-random patterns"


def numbers_report(analyzer: LotteryAnalyzer, pool: str = "main") -> list[dict]:
    tracker = analyzer.main if pool == "main" else analyzer.special
    return [info.model_dump(mode="json") for info in tracker]


def cosmic_report(analyzer: LotteryAnalyzer) -> dict:
    """Correlation results grouped by factor, in analysis order."""
    grouped: dict[str, list[dict]] = {}
    for result in analyzer.correlations.results:
        grouped.setdefault(result.factor, []).append(result.model_dump())
    return {
        "total_results": len(analyzer.correlations.results),
        "enriched_dates": len(analyzer.correlations.cosmic_data),
        "factors": grouped,
    }
