"""
src/history/document.py
History document import/export.

Accepted shapes:
    {"history": [[n1..n6], ...], "lastUpdated": "<ISO-8601>"}
    [[n1..n6], ...]
"""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from src.history.store import Draw, validate_draw
from src.utils.config import EXPORT_FILENAME
from src.utils.errors import FormatError, ValidationError
from src.utils.logger import get_logger

log = get_logger("history.document")


def extract_history(data: Any) -> list[Draw]:
    """Pull a validated draw list out of an already-decoded document."""
    if isinstance(data, dict):
        if "history" not in data:
            raise FormatError("Document has no 'history' key")
        data = data["history"]
    if not isinstance(data, list):
        raise FormatError(f"History must be a JSON array, got {type(data).__name__}")

    draws: list[Draw] = []
    for idx, entry in enumerate(data):
        try:
            draws.append(validate_draw(entry))
        except ValidationError as exc:
            raise FormatError(f"Draw #{idx} is invalid: {exc}") from exc
    return draws


def parse_document(text: str) -> list[Draw]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FormatError(f"Not valid JSON: {exc}") from exc
    return extract_history(data)


def build_document(history: list[list[int]] | tuple, now: datetime | None = None) -> dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    return {
        "history": [list(draw) for draw in history],
        "lastUpdated": now.isoformat(),
    }


def load_from_file(path: Path | str) -> list[Draw]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FormatError(f"Cannot read {path}: {exc}") from exc
    draws = parse_document(text)
    log.info(f"Imported {len(draws)} draws from {path}")
    return draws


def save_to_file(history: list[list[int]] | tuple, path: Path | str = EXPORT_FILENAME) -> Path:
    path = Path(path)
    if path.is_dir():
        path = path / EXPORT_FILENAME
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(build_document(history), f, indent=2)
    log.info(f"Exported {len(history)} draws to {path}")
    return path
