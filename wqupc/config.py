"""Run configuration: YAML / JSON loading and typed mode sections."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from wqupc.connectivity import ConnectivityConfig
from wqupc.sorting import DISTRIBUTIONS

MODES = ("connectivity", "benchmark", "both")

DEFAULT_SIZES = [10, 100, 1000]
DEFAULT_DISTRIBUTIONS = ["random", "ordered", "reverse_ordered", "partially_ordered"]


def load_config(config_file: str = "config.yaml") -> Dict[str, Any]:
    """Load configuration from a YAML (``.yml`` / ``.yaml``) or JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping.
    """
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        text = f.read()
    if config_file.endswith((".yml", ".yaml")):
        cfg = yaml.safe_load(text)
    else:
        cfg = json.loads(text)
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping, got {type(cfg).__name__}")
    return cfg


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    sec = cfg.get(name)
    return sec if isinstance(sec, dict) else {}


@dataclass(frozen=True)
class ConnectivitySettings:
    experiment: ConnectivityConfig
    csv_name: str = "connections.csv"
    plot: bool = True


@dataclass(frozen=True)
class BenchmarkSettings:
    """Sort benchmark parameters.

    Attributes:
        runs: Measured runs per (distribution, size) pair (``m``).
        sizes: Numbers of leading elements sorted per run.
        distributions: Input shapes, keys of ``wqupc.sorting.DISTRIBUTIONS``.
        seed: Seed for the random input; None draws a fresh one.
    """

    runs: int = 100
    sizes: List[int] = field(default_factory=lambda: list(DEFAULT_SIZES))
    distributions: List[str] = field(default_factory=lambda: list(DEFAULT_DISTRIBUTIONS))
    seed: Optional[int] = None
    csv_name: str = "benchmark.csv"
    plot: bool = True

    def __post_init__(self) -> None:
        if self.runs <= 0:
            raise ValueError(f"benchmark.runs must be positive, got {self.runs}")
        if not self.sizes or any(s <= 0 for s in self.sizes):
            raise ValueError("benchmark.sizes must be a non-empty list of positive integers")
        unknown = [d for d in self.distributions if d not in DISTRIBUTIONS]
        if not self.distributions or unknown:
            raise ValueError(
                f"benchmark.distributions invalid: {unknown or self.distributions} "
                f"(expected from {sorted(DISTRIBUTIONS)})"
            )


def connectivity_settings(cfg: Dict[str, Any]) -> ConnectivitySettings:
    sec = _section(cfg, "connectivity")
    max_attempts = sec.get("max_attempts")
    seed = sec.get("seed")
    experiment = ConnectivityConfig(
        max_sites=int(sec.get("max_sites", 500)),
        trials=int(sec.get("trials", 100)),
        seed=int(seed) if seed is not None else None,
        integer_mean=bool(sec.get("integer_mean", True)),
        max_attempts=int(max_attempts) if max_attempts is not None else None,
    )
    return ConnectivitySettings(
        experiment=experiment,
        csv_name=str(sec.get("csv", "connections.csv")),
        plot=bool(sec.get("plot", True)),
    )


def benchmark_settings(cfg: Dict[str, Any]) -> BenchmarkSettings:
    sec = _section(cfg, "benchmark")
    seed = sec.get("seed")
    return BenchmarkSettings(
        runs=int(sec.get("runs", 100)),
        sizes=[int(s) for s in sec.get("sizes", DEFAULT_SIZES)],
        distributions=[str(d) for d in sec.get("distributions", DEFAULT_DISTRIBUTIONS)],
        seed=int(seed) if seed is not None else None,
        csv_name=str(sec.get("csv", "benchmark.csv")),
        plot=bool(sec.get("plot", True)),
    )
