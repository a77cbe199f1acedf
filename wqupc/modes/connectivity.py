"""Connectivity mode.

Runs the Monte Carlo connectivity sweep, prints one line per site count and
saves the per-site means as CSV (one value per line, first line = 1 site),
a JSON summary and a measured-vs-expected plot.
"""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

from wqupc.config import ConnectivitySettings
from wqupc.connectivity import ConnectivityExperiment, ConnectivityResult
from wqupc.csv_io import export_csv
from wqupc.visualization import plot_connections

from .common import write_json

logger = logging.getLogger("wqupc.modes.connectivity")


def format_count(value: float) -> str:
    """Decimal text for a mean: integers without a fractional part."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def report_line(sites: int, count: float) -> str:
    return f"The number of sites is {sites}, the number of connections is {format_count(count)}."


def run_connectivity(
    settings: ConnectivitySettings,
    out_dir: str | Path,
    rng: Optional[random.Random] = None,
) -> ConnectivityResult:
    """Execute the sweep and write its artefacts into ``out_dir``.

    Artefact failures are logged and do not abort the mode; errors raised
    by the experiment itself propagate.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    result = ConnectivityExperiment(settings.experiment, rng=rng).run()

    values = []
    for sites, mean, _expected in result.rows():
        print(report_line(sites, mean))
        values.append(format_count(mean))

    csv_path = out_dir / settings.csv_name
    if not export_csv(csv_path, values):
        logger.warning("Connection counts were not exported")
    write_json(out_dir / "connectivity_summary.json", result.to_dict())
    if settings.plot:
        try:
            plot_connections(
                result.rows(),
                save_path=str(out_dir / "connections.png"),
                trials=settings.experiment.trials,
            )
        except Exception as e:  # pragma: no cover
            logger.warning("Connectivity plot failed: %s", e)
    return result
