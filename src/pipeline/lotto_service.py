"""
src/pipeline/lotto_service.py
User-facing operations: add draw, generate (random / smart), analyze the
current selection, import/export, and the statistics snapshot.

Every operation returns a result dict; failures come back as
{"success": False, "error": "..."} with the history untouched.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import numpy as np

from src.history import document
from src.history.loader import load_initial_history
from src.history.storage import JsonFileStorage
from src.history.store import HistoryStore, parse_draw_text
from src.models.statistical.advanced_analyzer import AdvancedAnalyzer, AdvancedStats
from src.models.statistical.frequency_analyzer import FrequencyAnalyzer, FrequencySummary
from src.models.statistical.pattern_analyzer import PatternAnalyzer, PatternStats
from src.models.strategy_selector import StrategySelector, Suggestion
from src.pipeline.selection_analyzer import analyze_selection
from src.utils.config import EXPORT_FILENAME, HISTORY_URL, MAX_HISTORY, get_analysis_config
from src.utils.errors import FormatError, ValidationError
from src.utils.logger import get_logger

log = get_logger("pipeline.service")


@dataclass(frozen=True)
class StatisticsReport:
    summary: FrequencySummary
    frequency_table: dict[int, int]
    relative_frequencies: dict[int, float]
    patterns: PatternStats
    advanced: AdvancedStats

    @property
    def sum_distribution_rows(self) -> list[tuple[int, int, int]]:
        return self.advanced.sum_distribution_rows()


class LottoService:
    """Wires the history store to the analyzers and the strategy selector."""

    def __init__(
        self,
        storage: JsonFileStorage | None = None,
        rng: np.random.Generator | None = None,
        max_history: int = MAX_HISTORY,
    ):
        config = get_analysis_config()
        number_range = tuple(config["number_range"])
        adv = config["advanced"]

        self.storage = storage if storage is not None else JsonFileStorage()
        self.store = HistoryStore(storage=self.storage, max_history=max_history)

        self.frequency = FrequencyAnalyzer(number_range=number_range)
        self.patterns = PatternAnalyzer(range_bands=config["pattern"]["range_bands"])
        self.advanced = AdvancedAnalyzer(
            number_range=number_range,
            hot_window=adv["hot_window"],
            overdue_window=adv["overdue_window"],
            top_n=adv["top_n"],
            sum_bucket_size=adv["sum_bucket_size"],
        )
        self.selector = StrategySelector(
            strategies=config["strategies"],
            number_range=number_range,
            pick_count=config.get("pick_count", 6),
            rng=rng,
        )
        self.current: Suggestion | None = None

    # ── Load ──────────────────────────────────────────────────────

    def initialize(self, source: str = HISTORY_URL) -> dict[str, Any]:
        result = load_initial_history(self.store, self.storage, source=source)
        if not result["success"]:
            log.warning("Continuing with an empty history")
        return result

    # ── History mutation ──────────────────────────────────────────

    def add_draw(self, numbers: Iterable[Any]) -> dict[str, Any]:
        try:
            draw = self.store.add_draw(numbers)
        except ValidationError as exc:
            log.warning(f"Rejected draw: {exc}")
            return {"success": False, "error": str(exc)}
        except (FormatError, OSError) as exc:
            log.error(f"Failed to save draw: {exc}")
            return {"success": False, "error": str(exc)}
        return {"success": True, "draw": list(draw), "total_draws": len(self.store)}

    def add_draw_text(self, text: str) -> dict[str, Any]:
        try:
            numbers = parse_draw_text(text)
        except ValidationError as exc:
            log.warning(f"Rejected draw text {text!r}: {exc}")
            return {"success": False, "error": str(exc)}
        return self.add_draw(numbers)

    def load_from_file(self, path: Path | str) -> dict[str, Any]:
        try:
            draws = document.load_from_file(path)
            self.store.replace(draws)
        except (FormatError, OSError) as exc:
            log.error(f"Import failed: {exc}")
            return {"success": False, "error": str(exc)}
        return {"success": True, "total_draws": len(self.store)}

    def save_to_file(self, path: Path | str = EXPORT_FILENAME) -> dict[str, Any]:
        try:
            written = document.save_to_file(self.store.snapshot(), path)
        except OSError as exc:
            log.error(f"Export failed: {exc}")
            return {"success": False, "error": str(exc)}
        return {"success": True, "path": str(written), "total_draws": len(self.store)}

    # ── Generation ────────────────────────────────────────────────

    def generate_random(self) -> Suggestion:
        self.current = self.selector.generate_random()
        return self.current

    def generate_smart(self, strategy: str | None = None) -> Suggestion:
        stats = self.advanced.analyze(self.store.snapshot())
        self.current = self.selector.generate(stats, strategy=strategy)
        return self.current

    def analyze_current_selection(self, numbers: Iterable[int] | None = None) -> dict[str, Any]:
        if numbers is None and self.current is not None:
            numbers = self.current.numbers
        try:
            analysis = analyze_selection(numbers)
        except ValidationError as exc:
            return {"success": False, "error": str(exc)}
        return {"success": True, "analysis": analysis}

    # ── Statistics ────────────────────────────────────────────────

    def statistics(self) -> StatisticsReport:
        history = self.store.snapshot()
        return StatisticsReport(
            summary=self.frequency.get_summary(history),
            frequency_table=dict(self.frequency.get_frequency_table(history)),
            relative_frequencies=self.frequency.get_relative_frequencies(history),
            patterns=self.patterns.analyze(history),
            advanced=self.advanced.analyze(history),
        )
