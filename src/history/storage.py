"""
src/history/storage.py
Named-slot key/value persistence for the history (JSON blob per slot).
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from src.utils.config import STORAGE_FILE, STORAGE_KEY
from src.utils.errors import FormatError
from src.utils.logger import get_logger

log = get_logger("history.storage")


class JsonFileStorage:
    """
    Every slot lives in one JSON object on disk: {slot_name: "<json blob>"}.
    Writes go through a temp file and an atomic replace.
    """

    def __init__(self, path: Path | str = STORAGE_FILE, key: str = STORAGE_KEY):
        self.path = Path(path)
        self.key = key

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise FormatError(f"Storage file {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise FormatError(f"Storage file {self.path} must hold a JSON object")
        return data

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def put(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except FormatError as exc:
            log.warning(f"Overwriting unreadable storage file: {exc}")
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_file = self.path.with_suffix(".tmp")
        try:
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(temp_file, self.path)
        except OSError as exc:
            log.error(f"Failed to write storage {self.path}: {exc}")
            if temp_file.exists():
                temp_file.unlink()
            raise

    # ── History slot ──────────────────────────────────────────────

    def save_history(self, history: list[list[int]]) -> None:
        self.put(self.key, json.dumps(history))
        log.debug(f"Persisted {len(history)} draws to slot '{self.key}'")

    def load_history(self) -> list[list[Any]] | None:
        """Return the stored history, or None when the slot is empty."""
        blob = self.get(self.key)
        if not blob:
            return None
        try:
            history = json.loads(blob)
        except json.JSONDecodeError as exc:
            raise FormatError(f"Slot '{self.key}' does not hold valid JSON: {exc}") from exc
        if not isinstance(history, list):
            raise FormatError(f"Slot '{self.key}' must hold a JSON array")
        return history


class MemoryStorage(JsonFileStorage):
    """In-process slot store; same interface, nothing touches disk."""

    def __init__(self, key: str = STORAGE_KEY):
        self.key = key
        self.slots: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.slots.get(key)

    def put(self, key: str, value: str) -> None:
        self.slots[key] = value
