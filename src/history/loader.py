"""
src/history/loader.py
One-time startup load: storage slot first, then the default history document.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import requests

from src.history.document import extract_history
from src.history.storage import JsonFileStorage
from src.history.store import HistoryStore
from src.utils.config import HISTORY_URL, HTTP_TIMEOUT
from src.utils.errors import FormatError, LoadFailure, ValidationError
from src.utils.logger import get_logger

log = get_logger("history.loader")


def _is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_document(source: str = HISTORY_URL, timeout: int = HTTP_TIMEOUT) -> Any:
    """Return the decoded default document from a URL or local path."""
    if _is_remote(source):
        try:
            log.debug(f"GET {source}")
            resp = requests.get(source, timeout=timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as exc:
            raise LoadFailure(f"Failed to fetch {source}: {exc}") from exc
        except ValueError as exc:
            raise LoadFailure(f"{source} did not return JSON: {exc}") from exc

    path = Path(source)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:
        raise LoadFailure(f"Failed to read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise LoadFailure(f"{path} is not valid JSON: {exc}") from exc


def _load_from_storage(store: HistoryStore, storage: JsonFileStorage) -> bool:
    stored = storage.load_history()
    if stored is None:
        return False
    store.replace(stored, persist=False)
    return True


def load_initial_history(
    store: HistoryStore,
    storage: JsonFileStorage,
    source: str = HISTORY_URL,
) -> dict[str, Any]:
    """
    Fill the store before any analysis runs.
    On failure the store is left empty and the error is returned, never raised.
    """
    warnings: list[str] = []
    try:
        if _load_from_storage(store, storage):
            log.info(f"Loaded {len(store)} draws from storage")
            return {"success": True, "source": "storage", "draws": len(store), "warnings": warnings}
    except (FormatError, ValidationError) as exc:
        log.warning(f"Stored history unreadable, falling back to {source}: {exc}")
        warnings.append(str(exc))

    log.info(f"No stored history, loading default document {source}")
    try:
        data = fetch_document(source)
        if not isinstance(data, dict) or "history" not in data:
            raise LoadFailure(f"{source} has no 'history' key")
        draws = extract_history(data)
    except (LoadFailure, FormatError) as exc:
        log.error(f"Failed to load default history: {exc}")
        return {
            "success": False,
            "source": None,
            "draws": len(store),
            "error": str(exc),
            "warnings": warnings,
        }

    store.replace(draws, persist=False)
    # Seeding storage is optional; the in-memory history stays loaded either way.
    try:
        storage.save_history(store.as_lists())
    except (FormatError, OSError) as exc:
        log.warning(f"Could not seed storage: {exc}")
        warnings.append(str(exc))

    log.info(f"Loaded {len(store)} draws from {source}")
    return {"success": True, "source": "document", "draws": len(store), "warnings": warnings}
