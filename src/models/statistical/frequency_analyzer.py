"""
src/models/statistical/frequency_analyzer.py
Per-number occurrence counts over the full history.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class FrequencySummary:
    total_draws: int
    most_frequent: int | None = None
    least_frequent: int | None = None
    average_sum: int | None = None

    @property
    def has_data(self) -> bool:
        return self.total_draws > 0


class FrequencyAnalyzer:
    """Count how often each number was drawn."""

    def __init__(self, number_range: tuple[int, int] = (1, 45)):
        self.lo, self.hi = number_range

    def get_frequency_table(self, history: Sequence[Sequence[int]]) -> Counter:
        """
        Returns Counter {number: count}. Numbers never drawn are absent,
        and looking them up yields 0.
        """
        table: Counter = Counter()
        for draw in history:
            for num in draw:
                table[num] += 1
        return table

    def get_summary(self, history: Sequence[Sequence[int]]) -> FrequencySummary:
        if not history:
            return FrequencySummary(total_draws=0)

        table = self.get_frequency_table(history)
        # Ties go to the smaller number.
        ranked = sorted(table.items(), key=lambda item: (-item[1], item[0]))
        most = ranked[0][0]
        least = min(table.items(), key=lambda item: (item[1], item[0]))[0]

        sums = np.array([sum(draw) for draw in history], dtype=float)
        # Half-up rounding, not numpy's banker's rounding.
        average = int(np.floor(sums.mean() + 0.5))

        return FrequencySummary(
            total_draws=len(history),
            most_frequent=most,
            least_frequent=least,
            average_sum=average,
        )

    def get_relative_frequencies(self, history: Sequence[Sequence[int]]) -> dict[int, float]:
        """Each number's count as a percentage of the highest count (0.0 with no data)."""
        table = self.get_frequency_table(history)
        max_count = max(table.values(), default=0)
        if max_count == 0:
            return {n: 0.0 for n in range(self.lo, self.hi + 1)}
        return {n: table[n] / max_count * 100 for n in range(self.lo, self.hi + 1)}
