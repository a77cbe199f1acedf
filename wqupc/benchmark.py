"""Warmup-then-measure benchmark harness.

A "run" has three phases:

1. ``pre`` prepares the input (clock stopped). Its return value is what the
   measured operation receives. When absent the supplied value is used as is.
2. ``run`` is the operation being timed. It is treated as mutating; any
   return value is ignored.
3. ``post`` checks or cleans up after ``run`` (clock stopped).

``Benchmark.run_from_supplier`` first performs a few warmup runs whose timings
are thrown away, then ``m`` measured runs, and reports the mean time of
``run`` in milliseconds. Exceptions raised by any phase propagate to the
caller unchanged.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger("wqupc.benchmark")

NANOS_PER_MILLI = 1_000_000


def get_warmup_runs(m: int) -> int:
    """Number of warmup runs for ``m`` measured runs: ``m // 10`` clamped to [2, 10]."""
    return max(2, min(10, m // 10))


@dataclass(frozen=True)
class BenchmarkOps(Generic[T]):
    """The three hooks of a benchmark run."""

    run: Callable[[T], Any]
    pre: Optional[Callable[[T], T]] = None
    post: Optional[Callable[[T], Any]] = None


def repeat(
    n: int,
    supplier: Callable[[], T],
    ops: BenchmarkOps[T],
    use_post: bool = True,
) -> float:
    """Execute ``n`` runs and return the mean duration of ``ops.run`` in ms.

    Only the ``ops.run`` call sits inside the timed window; ``supplier``,
    ``ops.pre`` and ``ops.post`` are excluded. Timing uses the monotonic
    ``time.perf_counter_ns`` clock.

    Raises:
        ValueError: If ``n`` is not positive.
    """
    if n <= 0:
        raise ValueError(f"number of runs must be positive, got {n}")
    elapsed_ns = 0
    for _ in range(n):
        value = supplier()
        if ops.pre is not None:
            value = ops.pre(value)
        start = time.perf_counter_ns()
        ops.run(value)
        elapsed_ns += time.perf_counter_ns() - start
        if use_post and ops.post is not None:
            ops.post(value)
    return elapsed_ns / n / NANOS_PER_MILLI


class Benchmark(Generic[T]):
    """Benchmark of one operation over inputs of type ``T``.

    Args:
        description: Label used in log messages.
        run: Operation whose time is measured.
        pre: Optional untimed input preparation; its result is passed to
            ``run`` and ``post``.
        post: Optional untimed check / cleanup; skipped during warmup.
    """

    def __init__(
        self,
        description: str,
        run: Callable[[T], Any],
        pre: Optional[Callable[[T], T]] = None,
        post: Optional[Callable[[T], Any]] = None,
    ) -> None:
        self.description = description
        self.ops: BenchmarkOps[T] = BenchmarkOps(run=run, pre=pre, post=post)

    def __repr__(self) -> str:
        return f"Benchmark({self.description!r})"

    def run_from_supplier(self, supplier: Callable[[], T], m: int) -> float:
        """Warm up, then time ``m`` runs; return mean milliseconds per run.

        Raises:
            ValueError: If ``m`` is not positive.
        """
        if m <= 0:
            raise ValueError(f"number of runs must be positive, got {m}")
        warmups = get_warmup_runs(m)
        logger.debug("Begin run: %s with %d warmup and %d timed runs", self.description, warmups, m)
        repeat(warmups, supplier, self.ops, use_post=False)
        avg_ms = repeat(m, supplier, self.ops, use_post=True)
        logger.debug("End run: %s average %.6f ms", self.description, avg_ms)
        return avg_ms

    def run_from_value(self, value: T, m: int) -> float:
        """Same as :meth:`run_from_supplier` with a constant input."""
        return self.run_from_supplier(lambda: value, m)
