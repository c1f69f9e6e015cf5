"""
scripts/01_initial_load.py
Load the history (storage slot, falling back to the default document) and
print the statistics summary.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.history.storage import JsonFileStorage
from src.pipeline.lotto_service import LottoService
from src.utils.config import HISTORY_URL, STORAGE_FILE
from src.utils.logger import get_logger

log = get_logger("initial_load")


def main():
    parser = argparse.ArgumentParser(description="Lotto history initial load")
    parser.add_argument("--source", default=HISTORY_URL, help="Default document URL or path")
    parser.add_argument("--storage", default=str(STORAGE_FILE), help="Storage file path")
    args = parser.parse_args()

    service = LottoService(storage=JsonFileStorage(args.storage))
    result = service.initialize(source=args.source)
    if not result["success"]:
        log.error(f"Default history could not be loaded: {result['error']}")

    report = service.statistics()
    summary = report.summary
    patterns = report.patterns.describe()
    adv = report.advanced

    print("\n" + "=" * 60)
    print("LOTTO HISTORY SUMMARY")
    print("=" * 60)
    print(f"  Draws          : {summary.total_draws} (source={result['source']})")
    if summary.has_data:
        print(f"  Most frequent  : {summary.most_frequent}")
        print(f"  Least frequent : {summary.least_frequent}")
        print(f"  Average sum    : {summary.average_sum}")
    print(f"  Consecutive    : {patterns['consecutive']}")
    print(f"  Odd/Even       : {patterns['odd_even']}")
    print(f"  Ranges         : {patterns['ranges']}")
    print(f"  Hot            : {adv.hot_numbers}")
    print(f"  Cold           : {adv.cold_numbers}")
    print(f"  Overdue        : {adv.overdue_numbers}")
    for start, end, count in report.sum_distribution_rows:
        print(f"  Sum {start:3d}-{end:3d}  : {count}")
    print("=" * 60)


if __name__ == "__main__":
    main()
