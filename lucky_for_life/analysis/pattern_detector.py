"""Combination (pair / triple / quad) and shape pattern tallies."""

from collections import Counter

from lucky_for_life.schemas.drawing import Drawing
from lucky_for_life.schemas.statistics import CombinationPattern, PatternStats

COMBINATION_SIZES = {"pairs": 2, "triples": 3, "quads": 4}


class PatternDetector:
    """Accumulate combination frequencies and per-drawing pattern stats."""

    def __init__(self):
        self.pairs: dict[tuple[int, ...], CombinationPattern] = {}
        self.triples: dict[tuple[int, ...], CombinationPattern] = {}
        self.quads: dict[tuple[int, ...], CombinationPattern] = {}
        self.stats = PatternStats()

    def _bump(self, table: dict, key: tuple[int, ...], drawing_index: int) -> None:
        pattern = table.get(key)
        if pattern is None:
            pattern = table[key] = CombinationPattern(numbers=key)
        pattern.frequency += 1
        pattern.last_seen_index = drawing_index

    def record_combinations(self, numbers, drawing_index: int) -> None:
        s = sorted(numbers)
        n = len(s)
        for i in range(n - 1):
            for j in range(i + 1, n):
                self._bump(self.pairs, (s[i], s[j]), drawing_index)
                for k in range(j + 1, n):
                    self._bump(self.triples, (s[i], s[j], s[k]), drawing_index)
                    for m in range(k + 1, n):
                        self._bump(self.quads, (s[i], s[j], s[k], s[m]), drawing_index)

    def record_patterns(self, drawing: Drawing) -> None:
        s = drawing.sorted_numbers
        odd = sum(1 for n in s if n % 2 == 1)
        even = len(s) - odd
        total = sum(s)

        label = f"{odd}O-{even}E"
        dist = self.stats.odd_even_distribution
        dist[label] = dist.get(label, 0) + 1

        bucket = (total // 20) * 20
        sums = self.stats.sum_range_distribution
        sums[bucket] = sums.get(bucket, 0) + 1

        decades = self.stats.decade_distribution
        for n in s:
            decade = (n - 1) // 10
            decades[decade] = decades.get(decade, 0) + 1

        # counted once per drawing, not per adjacent pair
        if any(b - a == 1 for a, b in zip(s, s[1:])):
            self.stats.consecutive_count += 1

    def table(self, kind: str) -> dict[tuple[int, ...], CombinationPattern]:
        if kind not in COMBINATION_SIZES:
            raise ValueError(f"Unknown combination kind: {kind}. Valid: {list(COMBINATION_SIZES)}")
        return getattr(self, kind)

    def top(self, kind: str, count: int) -> list[CombinationPattern]:
        """Most frequent combinations of a kind, ties broken by members."""
        patterns = sorted(self.table(kind).values(), key=lambda p: (-p.frequency, p.numbers))
        return patterns[:count]

    def pair_weights(self) -> Counter:
        """Sum of pair frequencies each number participates in."""
        weights: Counter = Counter()
        for pattern in self.pairs.values():
            for num in pattern.numbers:
                weights[num] += pattern.frequency
        return weights
