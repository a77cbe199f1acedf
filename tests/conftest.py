"""Pytest configuration, shared fixtures & custom summary hook.

Also ensures the project root is on sys.path so ``import wqupc`` and
``import main`` work without installing the package.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240501)


@pytest.fixture
def small_config_file(tmp_path: Path) -> Path:
    """Tiny YAML config running both modes into ``tmp_path/results``."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "log_level: WARNING\n"
        "mode: both\n"
        f"results_dir: {tmp_path / 'results'}\n"
        "connectivity:\n"
        "  max_sites: 12\n"
        "  trials: 3\n"
        "  seed: 7\n"
        "  plot: false\n"
        "benchmark:\n"
        "  runs: 3\n"
        "  sizes: [5, 20]\n"
        "  distributions: [random, reverse_ordered]\n"
        "  seed: 7\n"
        "  plot: false\n",
        encoding="utf-8",
    )
    return path


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Append a one-line pass/fail tally and the failing node ids."""
    stats = terminalreporter.stats
    counts = {key: len(stats.get(key, [])) for key in ("passed", "failed", "error", "skipped")}
    terminalreporter.section("wqupc summary", sep="=")
    terminalreporter.write_line(" | ".join(f"{k}: {v}" for k, v in counts.items()))
    for rep in stats.get("failed", []):
        terminalreporter.write_line(f"  - {rep.nodeid}")
