"""
scripts/02_generate_numbers.py
Print random or strategy-based suggestions with their quick analysis.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.history.storage import JsonFileStorage
from src.pipeline.lotto_service import LottoService
from src.utils.config import STORAGE_FILE, get_strategy_labels
from src.utils.logger import get_logger

log = get_logger("generate_numbers")


def main():
    parser = argparse.ArgumentParser(description="Generate lotto number suggestions")
    parser.add_argument("--mode", choices=["smart", "random"], default="smart")
    parser.add_argument("--strategy", choices=list(get_strategy_labels()), default=None,
                        help="Force a strategy (smart mode only)")
    parser.add_argument("--count", type=int, default=5, help="Number of sets")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    parser.add_argument("--storage", default=str(STORAGE_FILE), help="Storage file path")
    args = parser.parse_args()

    service = LottoService(storage=JsonFileStorage(args.storage), rng=np.random.default_rng(args.seed))
    service.initialize()

    print("\n" + "=" * 60)
    for i in range(1, args.count + 1):
        if args.mode == "smart":
            suggestion = service.generate_smart(strategy=args.strategy)
        else:
            suggestion = service.generate_random()
        analysis = service.analyze_current_selection()["analysis"]
        numbers = " - ".join(f"{n:02d}" for n in suggestion.numbers)
        print(f"  #{i:<2d} {numbers}  [{suggestion.label}]")
        print(f"      sum={analysis.total} odd={analysis.odd} even={analysis.even} "
              f"consecutive={analysis.consecutive}")
    print("=" * 60)


if __name__ == "__main__":
    main()
