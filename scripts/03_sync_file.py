"""
scripts/03_sync_file.py
Import a history document, export the current history, or add one draw.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.history.storage import JsonFileStorage
from src.pipeline.lotto_service import LottoService
from src.utils.config import STORAGE_FILE
from src.utils.logger import get_logger

log = get_logger("sync_file")


def main():
    parser = argparse.ArgumentParser(description="Lotto history import/export")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--import", dest="import_path", help="Replace history from a JSON document")
    group.add_argument("--export", dest="export_path", help="Write history to a JSON document")
    group.add_argument("--add", dest="draw", help='Add a draw, e.g. "3, 13, 15, 24, 33, 37"')
    parser.add_argument("--storage", default=str(STORAGE_FILE), help="Storage file path")
    args = parser.parse_args()

    service = LottoService(storage=JsonFileStorage(args.storage))

    if args.import_path:
        result = service.load_from_file(args.import_path)
    else:
        service.initialize()
        if args.export_path:
            result = service.save_to_file(args.export_path)
        else:
            result = service.add_draw_text(args.draw)

    if not result["success"]:
        log.error(result["error"])
        sys.exit(1)
    log.info(f"[DONE] {result}")


if __name__ == "__main__":
    main()
