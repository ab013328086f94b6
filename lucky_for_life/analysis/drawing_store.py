"""Chronologically ordered, immutable drawing history."""

from collections.abc import Iterator, Sequence
from datetime import date

from lucky_for_life.schemas.drawing import Drawing


class DrawingStore:
    """Holds the parsed drawing series. Index 0 is the oldest drawing."""

    def __init__(self, drawings: Sequence[Drawing] = ()):
        self._drawings: tuple[Drawing, ...] = tuple(drawings)

    def __len__(self) -> int:
        return len(self._drawings)

    def __iter__(self) -> Iterator[Drawing]:
        return iter(self._drawings)

    def __getitem__(self, idx: int) -> Drawing:
        return self._drawings[idx]

    @property
    def first_date(self) -> date | None:
        return self._drawings[0].draw_date if self._drawings else None

    @property
    def last_date(self) -> date | None:
        return self._drawings[-1].draw_date if self._drawings else None

    def years(self) -> list[int]:
        """Distinct calendar years touched by any drawing, ascending."""
        return sorted({d.draw_date.year for d in self._drawings})
