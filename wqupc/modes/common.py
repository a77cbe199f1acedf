"""Shared helpers for execution modes: run directories and JSON persistence."""
from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger("wqupc.modes")


def make_run_dir(results_dir: str | Path) -> Path:
    """Create ``results_dir/<YYYYmmdd_HHMMSS>`` and return it.

    Older run directories are left untouched.
    """
    base = Path(results_dir)
    base.mkdir(parents=True, exist_ok=True)
    run_dir = base / datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def write_json(path: str | Path, payload: Any) -> bool:
    """Atomically write ``payload`` as indented JSON.

    Returns:
        True on success; False (after logging) when the file system refuses.
    """
    path = str(path)
    tmp_path = path + ".tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, path)
    except OSError as e:
        logger.warning("JSON save failed %s: %s", path, e)
        return False
    logger.info("Saved %s", path)
    return True
