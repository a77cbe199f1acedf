from __future__ import annotations

from pathlib import Path

import pytest

from scripts.plot_connections_csv import main, read_connections
from wqupc.csv_io import export_csv


def test_read_connections_smoke(tmp_path: Path) -> None:
    csv_path = tmp_path / "connections.csv"
    assert export_csv(csv_path, ["0", "1", "3", "5"])

    rows = read_connections(csv_path)
    assert [r[0] for r in rows] == [1, 2, 3, 4]
    assert [r[1] for r in rows] == [0.0, 1.0, 3.0, 5.0]
    assert rows[0][2] == 0.0

    out = tmp_path / "fig.png"
    assert main([str(csv_path), "--out", str(out)]) == 0
    assert out.exists()


def test_read_connections_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_connections(tmp_path / "missing.csv")
