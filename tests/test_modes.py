"""Tests for the execution modes and the CLI entry point.

All artefacts go to pytest ``tmp_path`` directories; plots are disabled
except in the dedicated plotting test.
"""

from __future__ import annotations

import json
import random
from pathlib import Path

import main
from wqupc.config import BenchmarkSettings, ConnectivitySettings
from wqupc.connectivity import ConnectivityConfig
from wqupc.csv_io import import_csv
from wqupc.modes.benchmark import BenchmarkRecord, report_line as bench_line, run_sort_benchmark
from wqupc.modes.connectivity import format_count, report_line, run_connectivity


def test_report_lines() -> None:
    assert report_line(3, 2) == "The number of sites is 3, the number of connections is 2."
    assert format_count(4.0) == "4"
    assert format_count(4.5) == "4.50"
    rec = BenchmarkRecord(distribution="random", size=10, runs=5, avg_ms=0.5)
    assert bench_line(rec) == "Sort 10 random numbers -- average time in milliseconds: 0.5"


def test_run_connectivity_outputs(tmp_path: Path, capsys) -> None:
    settings = ConnectivitySettings(
        experiment=ConnectivityConfig(max_sites=8, trials=2, seed=1),
        plot=False,
    )
    result = run_connectivity(settings, tmp_path)
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 8
    assert out[0] == "The number of sites is 1, the number of connections is 0."

    values = import_csv(tmp_path / "connections.csv")
    assert values is not None and len(values) == 8
    assert values == [format_count(c) for c in result.connection_counts]

    summary = json.loads((tmp_path / "connectivity_summary.json").read_text())
    assert len(summary["per_site"]) == 8


def test_run_sort_benchmark_outputs(tmp_path: Path, capsys) -> None:
    settings = BenchmarkSettings(
        runs=2, sizes=[5, 15], distributions=["ordered", "random"], plot=False
    )
    records = run_sort_benchmark(settings, tmp_path, rng=random.Random(0))
    assert [(r.distribution, r.size) for r in records] == [
        ("ordered", 5),
        ("ordered", 15),
        ("random", 5),
        ("random", 15),
    ]
    assert all(r.avg_ms >= 0 for r in records)
    out = capsys.readouterr().out
    assert "Sort 15 random numbers -- average time in milliseconds:" in out

    rows = import_csv(tmp_path / "benchmark.csv")
    assert rows is not None and len(rows) == 4
    assert rows[0].startswith("ordered,5,")
    summary = json.loads((tmp_path / "benchmark_summary.json").read_text())
    assert summary["settings"]["runs"] == 2
    assert len(summary["records"]) == 4


def test_plots_written(tmp_path: Path) -> None:
    run_connectivity(
        ConnectivitySettings(experiment=ConnectivityConfig(max_sites=6, trials=2, seed=2)),
        tmp_path,
    )
    run_sort_benchmark(
        BenchmarkSettings(runs=2, sizes=[5, 10], distributions=["reverse_ordered"]),
        tmp_path,
    )
    assert (tmp_path / "connections.png").stat().st_size > 0
    assert (tmp_path / "benchmark.png").stat().st_size > 0


def test_main_runs_both_modes(small_config_file: Path, capsys) -> None:
    assert main.main(["--config", str(small_config_file)]) == 0
    run_dirs = list((small_config_file.parent / "results").iterdir())
    assert len(run_dirs) == 1
    produced = {p.name for p in run_dirs[0].iterdir()}
    assert {"connections.csv", "benchmark.csv"} <= produced
    out = capsys.readouterr().out
    assert "The number of sites is 12" in out
    assert "Sort 20 reverse_ordered numbers" in out


def test_main_mode_override(small_config_file: Path) -> None:
    assert main.main(["--config", str(small_config_file), "--mode", "benchmark"]) == 0
    run_dir = next((small_config_file.parent / "results").iterdir())
    produced = {p.name for p in run_dir.iterdir()}
    assert "benchmark.csv" in produced
    assert "connections.csv" not in produced
