"""
src/models/strategy_selector.py
Strategy-weighted sampling of suggested draws from AdvancedStats pools.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from src.models.statistical.advanced_analyzer import AdvancedStats
from src.utils.logger import get_logger

log = get_logger("strategy")

FULL_POOL = "all"
RANDOM_STRATEGY = "random"


@dataclass(frozen=True)
class Suggestion:
    numbers: list[int]
    strategy: str
    label: str


class StrategySelector:
    """
    Picks one strategy uniformly at random per call, samples from the pools it
    names, then tops up with uniform random numbers until pick_count are unique.
    """

    def __init__(
        self,
        strategies: dict[str, dict[str, Any]],
        number_range: tuple[int, int] = (1, 45),
        pick_count: int = 6,
        rng: np.random.Generator | None = None,
    ):
        """
        strategies: {"hot_numbers": {"label": "...", "mix": [["hot_numbers", 3], ["all", 3]]}, ...}
        """
        self.strategies = strategies
        self.lo, self.hi = number_range
        self.pick_count = pick_count
        self.rng = rng if rng is not None else np.random.default_rng()

    @property
    def strategy_names(self) -> list[str]:
        return list(self.strategies)

    # ── Sampling primitives ───────────────────────────────────────

    def select_from_pool(self, pool: Sequence[int], count: int) -> list[int]:
        """Shuffle the pool and take the first min(count, len(pool))."""
        if not pool or count <= 0:
            return []
        shuffled = self.rng.permutation(np.asarray(pool, dtype=int))
        return [int(n) for n in shuffled[: min(count, len(pool))]]

    def _random_number(self) -> int:
        return int(self.rng.integers(self.lo, self.hi + 1))

    def _fill(self, numbers: list[int]) -> list[int]:
        unique = list(dict.fromkeys(numbers))
        while len(unique) < self.pick_count:
            candidate = self._random_number()
            if candidate not in unique:
                unique.append(candidate)
        return sorted(unique[: self.pick_count])

    # ── Generation ────────────────────────────────────────────────

    def choose_strategy(self) -> str:
        names = self.strategy_names
        return names[int(self.rng.integers(len(names)))]

    def generate(self, stats: AdvancedStats, strategy: str | None = None) -> Suggestion:
        if strategy is None:
            strategy = self.choose_strategy()
        if strategy not in self.strategies:
            raise ValueError(f"Unknown strategy: {strategy}")

        picked: list[int] = []
        for source, count in self.strategies[strategy]["mix"]:
            if source == FULL_POOL:
                pool = [n for n in range(self.lo, self.hi + 1) if n not in picked]
            else:
                pool = stats.pool(source)
            picked.extend(self.select_from_pool(pool, count))

        numbers = self._fill(picked)
        log.info(f"Strategy {strategy} → {numbers}")
        return Suggestion(numbers=numbers, strategy=strategy, label=self.strategies[strategy]["label"])

    def generate_random(self) -> Suggestion:
        """Uniform pick, no statistics involved."""
        return Suggestion(numbers=self._fill([]), strategy=RANDOM_STRATEGY, label="Random")
