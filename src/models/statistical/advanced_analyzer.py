"""
src/models/statistical/advanced_analyzer.py
Hot/cold ranking over a recent window, overdue numbers and the draw-sum histogram.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class AdvancedStats:
    hot_numbers: list[int] = field(default_factory=list)
    cold_numbers: list[int] = field(default_factory=list)
    overdue_numbers: list[int] = field(default_factory=list)
    sum_distribution: dict[int, int] = field(default_factory=dict)
    bucket_size: int = 20

    def pool(self, name: str) -> list[int]:
        """Look up a number pool by strategy source name."""
        pools = {
            "hot_numbers": self.hot_numbers,
            "cold_numbers": self.cold_numbers,
            "overdue_numbers": self.overdue_numbers,
        }
        if name not in pools:
            raise ValueError(f"Unknown number pool: {name}")
        return pools[name]

    def sum_distribution_rows(self) -> list[tuple[int, int, int]]:
        """[(bucket_start, bucket_end, count), ...] sorted by bucket_start."""
        return [
            (start, start + self.bucket_size - 1, count)
            for start, count in sorted(self.sum_distribution.items())
        ]


class AdvancedAnalyzer:
    """
    hot/cold: numbers seen in the last `hot_window` draws, ranked by count
    (descending, ties by ascending number). Hot is the head of the ranking,
    cold the tail; the two overlap when fewer than 2 * top_n numbers were seen.

    overdue: numbers not drawn in the last `overdue_window` draws.
    """

    def __init__(
        self,
        number_range: tuple[int, int] = (1, 45),
        hot_window: int = 10,
        overdue_window: int = 5,
        top_n: int = 10,
        sum_bucket_size: int = 20,
    ):
        self.lo, self.hi = number_range
        self.hot_window = hot_window
        self.overdue_window = overdue_window
        self.top_n = top_n
        self.sum_bucket_size = sum_bucket_size

    def rank_recent(self, history: Sequence[Sequence[int]]) -> list[int]:
        recent = history[: self.hot_window]
        counts: Counter = Counter(num for draw in recent for num in draw)
        return sorted(counts, key=lambda n: (-counts[n], n))

    def get_overdue_numbers(self, history: Sequence[Sequence[int]]) -> list[int]:
        seen = {num for draw in history[: self.overdue_window] for num in draw}
        return [n for n in range(self.lo, self.hi + 1) if n not in seen]

    def get_sum_distribution(self, history: Sequence[Sequence[int]]) -> dict[int, int]:
        buckets: Counter = Counter()
        for draw in history:
            buckets[sum(draw) // self.sum_bucket_size * self.sum_bucket_size] += 1
        return dict(buckets)

    def analyze(self, history: Sequence[Sequence[int]]) -> AdvancedStats:
        ranking = self.rank_recent(history)
        return AdvancedStats(
            hot_numbers=ranking[: self.top_n],
            cold_numbers=ranking[-self.top_n:] if ranking and self.top_n else [],
            overdue_numbers=self.get_overdue_numbers(history),
            sum_distribution=self.get_sum_distribution(history),
            bucket_size=self.sum_bucket_size,
        )
