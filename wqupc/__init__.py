"""Weighted quick-union connectivity experiments and a timing harness.

Exports the disjoint-set structure, the connectivity experiment and the
benchmark harness.
"""

from wqupc.benchmark import Benchmark, BenchmarkOps, get_warmup_runs, repeat  # noqa: F401
from wqupc.connectivity import (  # noqa: F401
    ConnectivityConfig,
    ConnectivityExperiment,
    ConnectivityResult,
    ConnectivityTimeout,
    average_connections,
    count_connections,
)
from wqupc.union_find import DisjointSet  # noqa: F401

__all__ = [
    "Benchmark",
    "BenchmarkOps",
    "ConnectivityConfig",
    "ConnectivityExperiment",
    "ConnectivityResult",
    "ConnectivityTimeout",
    "DisjointSet",
    "average_connections",
    "count_connections",
    "get_warmup_runs",
    "repeat",
]
