"""
src/history/store.py
Single-writer owner of the draw history (index 0 = most recent draw).
"""
from __future__ import annotations

from numbers import Integral
from typing import Any, Iterable, Protocol

from src.utils.config import MAX_HISTORY, get_number_range, get_pick_count
from src.utils.errors import ValidationError
from src.utils.logger import get_logger

log = get_logger("history.store")

Draw = tuple[int, ...]
History = tuple[Draw, ...]


class HistoryStorage(Protocol):
    """Anything that can persist the history as a JSON array of arrays."""

    def save_history(self, history: list[list[int]]) -> None: ...

    def load_history(self) -> list[list[int]] | None: ...


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Not a number: {value!r}")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValidationError(f"Not a number: {value!r}")


def validate_draw(numbers: Iterable[Any]) -> Draw:
    """
    Return the draw as a tuple of ints, or raise ValidationError.
    Order is preserved; only count, range and uniqueness are checked.
    """
    if isinstance(numbers, (str, bytes)):
        raise ValidationError("A draw must be a sequence of numbers, not a string")
    try:
        raw = list(numbers)
    except TypeError:
        raise ValidationError(f"A draw must be a sequence of numbers, got {type(numbers).__name__}")

    pick_count = get_pick_count()
    lo, hi = get_number_range()

    if len(raw) != pick_count:
        raise ValidationError(f"Expected {pick_count} numbers, got {len(raw)}")
    nums = tuple(_to_int(v) for v in raw)
    if not all(lo <= n <= hi for n in nums):
        raise ValidationError(f"Numbers must be between {lo} and {hi}: {list(nums)}")
    if len(set(nums)) != pick_count:
        raise ValidationError(f"Duplicate numbers: {list(nums)}")
    return nums


def parse_draw_text(text: str) -> Draw:
    """Parse free-text entry like "3, 13, 15, 24, 33, 37"."""
    text = (text or "").strip()
    if not text:
        raise ValidationError("No numbers entered")
    return validate_draw(part.strip() for part in text.split(","))


class HistoryStore:
    """
    Owns the history. Analyzers get read-only snapshots; only add_draw and
    replace mutate it, and both are all-or-nothing.
    """

    def __init__(self, storage: HistoryStorage | None = None, max_history: int = MAX_HISTORY):
        self.storage = storage
        self.max_history = max_history
        self._history: History = ()

    def __len__(self) -> int:
        return len(self._history)

    def snapshot(self) -> History:
        return self._history

    def as_lists(self) -> list[list[int]]:
        return [list(draw) for draw in self._history]

    # ── Mutation ──────────────────────────────────────────────────

    def add_draw(self, numbers: Iterable[Any]) -> Draw:
        """Validate, prepend, truncate and persist a new draw."""
        draw = validate_draw(numbers)
        updated = ((draw,) + self._history)[: self.max_history]
        self._persist(updated)
        self._history = updated
        log.info(f"Added draw {list(draw)} (history size={len(self._history)})")
        return draw

    def replace(self, draws: Iterable[Iterable[Any]], persist: bool = True) -> None:
        """Swap in a whole new history. Every draw is validated before anything changes."""
        validated = tuple(validate_draw(d) for d in draws)[: self.max_history]
        if persist:
            self._persist(validated)
        self._history = validated
        log.info(f"History replaced ({len(self._history)} draws)")

    def _persist(self, history: History) -> None:
        # Storage errors propagate before the in-memory history is swapped.
        if self.storage is not None:
            self.storage.save_history([list(draw) for draw in history])
