from pathlib import Path

from wqupc.csv_io import export_csv, import_csv


def test_values_one_per_line(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "counts.csv"
    assert export_csv(path, ["0", 1, 2.5]) is True
    assert path.read_text(encoding="utf-8") == "0\n1\n2.5\n"
    assert import_csv(path) == ["0", "1", "2.5"]


def test_multi_field_records(tmp_path: Path) -> None:
    path = tmp_path / "bench.csv"
    assert export_csv(path, [("random", 10, 0.25), ("ordered", 100, 1.5)])
    assert import_csv(path) == ["random,10,0.25", "ordered,100,1.5"]


def test_blank_lines_skipped(tmp_path: Path) -> None:
    path = tmp_path / "gaps.csv"
    path.write_text("1\n\n2\n", encoding="utf-8")
    assert import_csv(path) == ["1", "2"]


def test_import_missing_file_returns_none(tmp_path: Path) -> None:
    assert import_csv(tmp_path / "absent.csv") is None


def test_export_failure_returns_false(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    # parent "directory" is a regular file
    assert export_csv(blocker / "out.csv", ["1"]) is False
