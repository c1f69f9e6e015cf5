"""
src/utils/config.py
Load env vars and the analysis parameter JSON file.
"""
import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = ROOT / "config"
ANALYSIS_CONFIG_FILE = "analysis_params.json"

# ── Storage ───────────────────────────────────────────────────────
DATA_DIR: Path = Path(os.getenv("LOTTO_DATA_DIR", str(Path.home() / ".lotto_stats"))).expanduser()
STORAGE_FILE: Path = Path(os.getenv("LOTTO_STORAGE_FILE", str(DATA_DIR / "storage.json"))).expanduser()
STORAGE_KEY: str = os.getenv("LOTTO_STORAGE_KEY", "lottoHistory")

# ── Default history document ──────────────────────────────────────
HISTORY_URL: str = os.getenv("LOTTO_HISTORY_URL", str(ROOT / "data" / "lotto.json"))
HTTP_TIMEOUT: int = int(os.getenv("LOTTO_HTTP_TIMEOUT", "15"))

# ── History limits ────────────────────────────────────────────────
MAX_HISTORY: int = int(os.getenv("LOTTO_MAX_HISTORY", "99999"))
EXPORT_FILENAME = "lotto_data.json"

_analysis_config_cache: dict[str, Any] = {}


def get_analysis_config() -> dict[str, Any]:
    """Load and cache the analysis parameters (windows, top-N, strategy mixes)."""
    if _analysis_config_cache:
        return _analysis_config_cache
    path = CONFIG_DIR / ANALYSIS_CONFIG_FILE
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        config = json.load(f)
    _analysis_config_cache.update(config)
    return _analysis_config_cache


def get_number_range() -> tuple[int, int]:
    lo, hi = get_analysis_config()["number_range"]
    return lo, hi


def get_pick_count() -> int:
    """Return how many numbers make up one draw (6)."""
    return get_analysis_config().get("pick_count", 6)


def get_strategy_labels() -> dict[str, str]:
    """Return {strategy_name: display label}."""
    strategies = get_analysis_config()["strategies"]
    return {name: params["label"] for name, params in strategies.items()}
