"""One-shot JSON / CSV export of an analysis run."""

import csv
import json
from datetime import datetime
from pathlib import Path

from loguru import logger

from lucky_for_life.analysis.analyzer import LotteryAnalyzer

EXPORT_FORMATS = ("json", "csv")
DATE_FORMAT = "%m/%d/%Y"

CSV_HEADER = [
    "Number",
    "Total Frequency",
    "Recent Frequency",
    "Average Gap",
    "Current Gap",
    "Last Drawn",
    "Chi-Square Component",
]


def _fmt_date(d) -> str:
    return d.strftime(DATE_FORMAT) if d else ""


def export_payload(analyzer: LotteryAnalyzer) -> dict:
    """JSON-serializable snapshot of the run."""
    store = analyzer.store
    date_range = (
        f"{_fmt_date(store.first_date)} to {_fmt_date(store.last_date)}" if len(store) else ""
    )
    stats = analyzer.patterns.stats
    return {
        "metadata": {
            "total_drawings": len(store),
            "date_range": date_range,
            "randomness_score": analyzer.randomness_score,
            "chi_square": analyzer.chi_square.total,
        },
        "main_numbers": {str(i.number): i.model_dump(mode="json") for i in analyzer.main},
        "lucky_balls": {str(i.number): i.model_dump(mode="json") for i in analyzer.special},
        "patterns": {
            "odd_even": stats.odd_even_distribution,
            "sum_ranges": {str(k): v for k, v in sorted(stats.sum_range_distribution.items())},
            "consecutive": stats.consecutive_count,
            "decades": {str(k): v for k, v in sorted(stats.decade_distribution.items())},
        },
    }


def export_json(analyzer: LotteryAnalyzer, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(export_payload(analyzer), indent=2), encoding="utf-8")
    return path


def export_csv(analyzer: LotteryAnalyzer, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(CSV_HEADER)
        for info in analyzer.main:
            writer.writerow([
                info.number,
                info.total_frequency,
                info.recent_frequency,
                f"{info.average_gap:.2f}",
                info.current_gap,
                _fmt_date(info.last_seen_date),
                f"{info.chi_square_component:.4f}",
            ])
    return path


def export_analysis(analyzer: LotteryAnalyzer, fmt: str, directory: Path) -> Path:
    """Write a timestamped export file and return its path."""
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt}. Valid: {EXPORT_FORMATS}")

    filename = f"lottery_analysis_{datetime.now().strftime('%Y%m%d_%H%M%S')}.{fmt}"
    path = Path(directory) / filename
    writer = export_json if fmt == "json" else export_csv
    writer(analyzer, path)
    logger.info("Analysis exported to {}", path)
    return path
