import logging
import os
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

logger = logging.getLogger("wqupc.visualization")


def _ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def plot_connections(
    rows: Iterable[Tuple[int, float, float]],
    save_path: str,
    trials: int = None,
) -> str:
    """Plot mean connection attempts against site count.

    ``rows`` holds ``(sites, measured_mean, expected)`` triples; the expected
    ``0.5 n ln n`` curve is drawn dashed for comparison.
    """
    sites: List[int] = []
    measured: List[float] = []
    expected: List[float] = []
    for n, mean, exp in rows:
        sites.append(n)
        measured.append(mean)
        expected.append(exp)
    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    ax.plot(sites, measured, label="measured mean", linewidth=1.6, color="#1f77b4")
    ax.plot(
        sites,
        expected,
        label=r"$\frac{1}{2} n \ln n$",
        linewidth=1.4,
        linestyle="--",
        color="#d62728",
    )
    ax.set_xlabel("Sites (n)", fontsize=12)
    ax.set_ylabel("Connections until fully connected", fontsize=12)
    title = "Random connections to connect n sites"
    if trials:
        title += f" (mean of {trials} trials)"
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
    ax.legend(loc="upper left", frameon=False, fontsize=10)
    _ensure_dir(os.path.dirname(save_path))
    fig.savefig(save_path, dpi=180)
    plt.close(fig)
    logger.info("Connectivity plot saved as: %s", save_path)
    return save_path


def plot_benchmark(
    records: Iterable[Tuple[str, int, float]],
    save_path: str,
) -> str:
    """Plot average sort time against input size, one line per distribution.

    Both axes are logarithmic; non-positive times are dropped since they
    cannot be drawn on a log scale.
    """
    series: Dict[str, List[Tuple[int, float]]] = defaultdict(list)
    for dist, size, avg_ms in records:
        if avg_ms > 0:
            series[dist].append((size, avg_ms))
    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    for dist, points in series.items():
        points.sort()
        ax.plot(
            [p[0] for p in points],
            [p[1] for p in points],
            label=dist,
            linewidth=2,
            marker="o",
            markersize=4,
            markerfacecolor="white",
            markeredgewidth=1.0,
        )
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Elements sorted", fontsize=12)
    ax.set_ylabel("Average time [ms]", fontsize=12)
    ax.set_title("Insertion sort benchmark", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
    ax.legend(
        loc="center left",
        bbox_to_anchor=(1.02, 0.5),
        frameon=False,
        fontsize=9,
        borderaxespad=0.0,
    )
    _ensure_dir(os.path.dirname(save_path))
    fig.savefig(save_path, dpi=180)
    plt.close(fig)
    logger.info("Benchmark plot saved as: %s", save_path)
    return save_path
