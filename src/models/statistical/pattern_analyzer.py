"""
src/models/statistical/pattern_analyzer.py
Consecutive-number rate, odd/even ratio and low/mid/high band distribution.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

NO_DATA = "no data"


def count_consecutive(numbers: Sequence[int]) -> int:
    """Adjacent pairs in the sorted set where the larger is the smaller + 1."""
    ordered = sorted(numbers)
    return sum(1 for a, b in zip(ordered, ordered[1:]) if b - a == 1)


@dataclass(frozen=True)
class PatternStats:
    consecutive_rate: float | None = None
    odd_pct: float | None = None
    even_pct: float | None = None
    range_distribution: dict[str, float] | None = field(default=None)

    @property
    def has_data(self) -> bool:
        return self.consecutive_rate is not None

    def describe(self) -> dict[str, str]:
        if not self.has_data:
            return {"consecutive": NO_DATA, "odd_even": NO_DATA, "ranges": NO_DATA}
        ranges = ", ".join(f"{band}: {pct:.1f}%" for band, pct in self.range_distribution.items())
        return {
            "consecutive": f"avg {self.consecutive_rate:.1f} consecutive numbers",
            "odd_even": f"odd {self.odd_pct:.1f}% : even {self.even_pct:.1f}%",
            "ranges": ranges,
        }


class PatternAnalyzer:
    """Descriptive pattern metrics over the full history."""

    def __init__(self, range_bands: dict[str, list[int]]):
        """
        range_bands: {"1-15": [1, 15], "16-30": [16, 30], "31-45": [31, 45]}
        """
        self.bands = {band: (bounds[0], bounds[1]) for band, bounds in range_bands.items()}

    def get_band(self, num: int) -> str | None:
        for band, (lo, hi) in self.bands.items():
            if lo <= num <= hi:
                return band
        return None

    def analyze(self, history: Sequence[Sequence[int]]) -> PatternStats:
        if not history:
            return PatternStats()

        consecutive = sum(count_consecutive(draw) for draw in history)

        odd = 0
        total = 0
        bands: Counter = Counter()
        for draw in history:
            for num in draw:
                total += 1
                if num % 2 == 1:
                    odd += 1
                band = self.get_band(num)
                if band:
                    bands[band] += 1

        return PatternStats(
            consecutive_rate=consecutive / len(history),
            odd_pct=odd / total * 100,
            even_pct=(total - odd) / total * 100,
            range_distribution={band: bands.get(band, 0) / total * 100 for band in self.bands},
        )
