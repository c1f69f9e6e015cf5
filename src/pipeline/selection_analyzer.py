"""
src/pipeline/selection_analyzer.py
Quick breakdown of the 6 numbers currently on display.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from src.history.store import validate_draw
from src.models.statistical.pattern_analyzer import count_consecutive
from src.utils.errors import ValidationError
from src.utils.logger import get_logger

log = get_logger("pipeline.selection")


@dataclass(frozen=True)
class SelectionAnalysis:
    numbers: list[int]
    total: int
    odd: int
    even: int
    consecutive: int

    def summary(self) -> str:
        return (
            f"Numbers: {', '.join(str(n) for n in self.numbers)} | "
            f"sum={self.total} odd={self.odd} even={self.even} consecutive={self.consecutive}"
        )


def analyze_selection(numbers: Iterable[Any] | None) -> SelectionAnalysis:
    """Raise ValidationError when nothing valid has been generated yet."""
    if not numbers:
        raise ValidationError("Generate numbers first")
    draw = sorted(validate_draw(numbers))
    odd = sum(1 for n in draw if n % 2 == 1)
    result = SelectionAnalysis(
        numbers=draw,
        total=sum(draw),
        odd=odd,
        even=len(draw) - odd,
        consecutive=count_consecutive(draw),
    )
    log.debug(result.summary())
    return result
