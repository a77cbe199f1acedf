"""Flat one-record-per-line CSV export / import.

No header row. A record is either a single value (written as its decimal /
string form) or a sequence of fields joined by commas. Failures are logged
and reported through the return value instead of raising.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

logger = logging.getLogger("wqupc.csv")

Record = Union[str, int, float, Sequence[object]]


def _fields(record: Record) -> list:
    if isinstance(record, (str, bytes)) or not isinstance(record, Sequence):
        return [record]
    return list(record)


def export_csv(path: Union[str, Path], records: Iterable[Record]) -> bool:
    """Write ``records`` to ``path``, one per line.

    Parent directories are created when missing.

    Returns:
        True on success, False if the file could not be written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            for record in records:
                writer.writerow(_fields(record))
    except OSError as e:
        logger.error("CSV export to %s failed: %s", path, e)
        return False
    logger.info("CSV written: %s", path)
    return True


def import_csv(path: Union[str, Path]) -> Optional[List[str]]:
    """Read a file produced by :func:`export_csv`.

    Returns:
        One string per non-blank line (multi-field records re-joined with
        commas), or None if the file is missing or unreadable.
    """
    path = Path(path)
    try:
        with open(path, "r", newline="", encoding="utf-8") as f:
            return [",".join(row) for row in csv.reader(f) if row]
    except OSError as e:
        logger.error("CSV import from %s failed: %s", path, e)
        return None
