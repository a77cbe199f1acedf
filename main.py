#!/usr/bin/env python3
"""Run the connectivity sweep and / or the sort benchmark from a config file."""

import argparse
import logging
import sys
from typing import List, Optional

from wqupc.config import MODES, benchmark_settings, connectivity_settings, load_config
from wqupc.modes.benchmark import run_sort_benchmark
from wqupc.modes.common import make_run_dir
from wqupc.modes.connectivity import run_connectivity

logger = logging.getLogger("wqupc")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Weighted quick-union connectivity experiment and sort benchmark"
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to YAML/JSON configuration file (default: config.yaml)",
    )
    parser.add_argument("--mode", choices=MODES, help="Override the 'mode' key of the config")
    parser.add_argument("--log-level", help="Override the 'log_level' key of the config")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    config = load_config(args.config)

    log_level = args.log_level or config.get("log_level", "INFO")
    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    mode = args.mode or config.get("mode", "connectivity")
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode} (expected one of {', '.join(MODES)})")
    # Validate every section we are going to use before any work starts
    conn = connectivity_settings(config) if mode in ("connectivity", "both") else None
    bench = benchmark_settings(config) if mode in ("benchmark", "both") else None

    run_dir = make_run_dir(config.get("results_dir", "results"))
    logger.info("Mode=%s, results in %s", mode, run_dir)
    if conn is not None:
        run_connectivity(conn, run_dir)
    if bench is not None:
        run_sort_benchmark(bench, run_dir)
    logger.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
