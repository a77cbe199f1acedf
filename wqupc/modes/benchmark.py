"""Sort benchmark mode.

For every configured input shape one base array of ``max(sizes)`` elements
is generated. Each (shape, size) pair is then benchmarked with
:class:`wqupc.benchmark.Benchmark`: the untimed pre-step copies the base
array, the timed step insertion-sorts its first ``size`` elements and the
untimed post-step verifies that prefix is sorted.
"""
from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List, Optional

from wqupc.benchmark import Benchmark
from wqupc.config import BenchmarkSettings
from wqupc.csv_io import export_csv
from wqupc.sorting import generate_array, insertion_sort, is_sorted
from wqupc.visualization import plot_benchmark

from .common import write_json

logger = logging.getLogger("wqupc.modes.benchmark")


@dataclass(frozen=True)
class BenchmarkRecord:
    distribution: str
    size: int
    runs: int
    avg_ms: float


def report_line(record: BenchmarkRecord) -> str:
    return (
        f"Sort {record.size} {record.distribution} numbers -- "
        f"average time in milliseconds: {record.avg_ms}"
    )


def sort_benchmark(size: int) -> Benchmark[List[int]]:
    """Benchmark insertion sort over the first ``size`` elements of a list."""

    def check(xs: List[int]) -> None:
        if not is_sorted(xs, 0, size):
            raise AssertionError(f"first {size} elements not sorted")

    return Benchmark(
        f"InsertionSort n={size}",
        run=lambda xs: insertion_sort(xs, 0, size),
        pre=list,
        post=check,
    )


def run_sort_benchmark(
    settings: BenchmarkSettings,
    out_dir: str | Path,
    rng: Optional[random.Random] = None,
) -> List[BenchmarkRecord]:
    """Benchmark every (distribution, size) pair and persist the results."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    if rng is None:
        rng = random.Random(settings.seed) if settings.seed is not None else random.Random()
    n = max(settings.sizes)
    logger.info(
        "Benchmark: distributions=%s sizes=%s runs=%d",
        ",".join(settings.distributions),
        settings.sizes,
        settings.runs,
    )
    records: List[BenchmarkRecord] = []
    for dist in settings.distributions:
        base = generate_array(dist, n, rng)
        for size in settings.sizes:
            avg_ms = sort_benchmark(size).run_from_value(base, settings.runs)
            record = BenchmarkRecord(distribution=dist, size=size, runs=settings.runs, avg_ms=avg_ms)
            print(report_line(record))
            records.append(record)

    csv_path = out_dir / settings.csv_name
    if not export_csv(csv_path, [(r.distribution, r.size, r.avg_ms) for r in records]):
        logger.warning("Benchmark results were not exported")
    write_json(
        out_dir / "benchmark_summary.json",
        {"settings": asdict(settings), "records": [asdict(r) for r in records]},
    )
    if settings.plot:
        try:
            plot_benchmark(
                [(r.distribution, r.size, r.avg_ms) for r in records],
                save_path=str(out_dir / "benchmark.png"),
            )
        except Exception as e:  # pragma: no cover
            logger.warning("Benchmark plot failed: %s", e)
    return records
