"""Re-plot a connections CSV exported by the connectivity mode.

The CSV holds one mean per line, line ``i`` (0-based) being the mean for
``i + 1`` sites. The figure compares it against ``0.5 n ln n``.

Usage:
    python scripts/plot_connections_csv.py results/20250101_120000/connections.csv
    python scripts/plot_connections_csv.py connections.csv --out figures/connections.png
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from wqupc.connectivity import expected_connections  # noqa: E402
from wqupc.csv_io import import_csv  # noqa: E402
from wqupc.visualization import plot_connections  # noqa: E402


def read_connections(path: Path) -> list[tuple[int, float, float]]:
    """Parse the CSV into ``(sites, mean, expected)`` rows.

    Raises:
        FileNotFoundError: If the CSV cannot be read.
    """
    values = import_csv(path)
    if values is None:
        raise FileNotFoundError(f"Cannot read {path}")
    return [
        (i + 1, float(v), expected_connections(i + 1)) for i, v in enumerate(values)
    ]


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("csv", type=Path)
    ap.add_argument("--out", type=Path, default=None, help="PNG path (default: next to CSV)")
    args = ap.parse_args(argv)
    rows = read_connections(args.csv)
    out = args.out or args.csv.with_suffix(".png")
    plot_connections(rows, save_path=str(out))
    print(f"Saved {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
