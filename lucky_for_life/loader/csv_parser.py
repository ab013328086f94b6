"""Parser for the Lucky for Life drawing history CSV.

Expected layout (newest drawing first, header row present):
    Date,Number 1,Number 2,Number 3,Number 4,Number 5,Lucky Ball
    01/15/2024,5,12,23,34,45,7
"""

import csv
from datetime import datetime
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from lucky_for_life.schemas.drawing import Drawing

DATE_FORMAT = "%m/%d/%Y"
MIN_COLUMNS = 7


def _parse_row(row: list[str]) -> Drawing | None:
    """Parse a single CSV row into a Drawing.

    Returns None for rows that are structurally unusable (too short, blank
    date, bad date or non-integer fields). Range / uniqueness violations
    raise ValidationError so the caller can report them.
    """
    if len(row) < MIN_COLUMNS or not row[0].strip():
        return None

    try:
        draw_date = datetime.strptime(row[0].strip(), DATE_FORMAT).date()
        numbers = [int(v) for v in row[1:6]]
        special = int(row[6])
    except ValueError:
        return None

    return Drawing(draw_date=draw_date, numbers=numbers, special_number=special)


def parse_rows(rows: list[list[str]]) -> list[Drawing]:
    """Parse CSV rows (header included) into chronologically ordered drawings.

    The source file lists the newest drawing first; the result is reversed so
    that sequence_index 0 is the oldest drawing.
    """
    draws: list[Drawing] = []
    skipped = 0

    for row in rows[1:]:
        try:
            drawing = _parse_row(row)
        except ValidationError as e:
            logger.warning("Invalid drawing row {}: {}", row, e.errors()[0]["msg"])
            skipped += 1
            continue
        if drawing is None:
            skipped += 1
            continue
        draws.append(drawing)

    draws.reverse()
    ordered = [d.model_copy(update={"sequence_index": i}) for i, d in enumerate(draws)]

    if skipped:
        logger.info("Skipped {} unusable rows", skipped)
    return ordered


def load_drawings(path: Path | str) -> list[Drawing]:
    """Load drawings from a CSV file on disk."""
    path = Path(path)
    with path.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))

    drawings = parse_rows(rows)
    logger.info("Loaded {} drawings from {}", len(drawings), path)
    return drawings
