"""Monte Carlo connectivity experiment on top of :class:`DisjointSet`.

One trial starts from ``n`` isolated sites and keeps drawing uniformly random
pairs; a pair that is not yet connected gets merged. Every draw counts as one
connection attempt, merged or not. The trial ends once all sites form a
single component. Averaging many trials per ``n`` estimates the expected
number of random connections, which grows like ``0.5 * n * ln(n)``.

Each trial owns its own ``DisjointSet``; nothing is shared between trials.
"""

from __future__ import annotations

import logging
import math
import random
import time
from dataclasses import asdict, dataclass, field
from typing import Iterator, List, Optional

from wqupc.union_find import DisjointSet

logger = logging.getLogger("wqupc.connectivity")


class ConnectivityTimeout(RuntimeError):
    """A bounded trial used up ``max_attempts`` before connecting all sites."""


def random_pair(n: int, rng: random.Random) -> tuple[int, int]:
    """Draw two independent uniform integers in ``[0, n)``."""
    return rng.randrange(n), rng.randrange(n)


def all_connected(uf: DisjointSet) -> bool:
    """Adjacency-chain test: every ``i`` shares a root with ``i + 1``.

    Equivalent to ``uf.count() == 1``: connectivity is an equivalence
    relation, so a chain of equal roots over ``0..n-1`` means one root
    overall. The experiment loop uses the O(1) ``count()`` form.
    """
    for i in range(len(uf) - 1):
        if uf.find(i) != uf.find(i + 1):
            return False
    return True


def count_connections(
    n: int,
    rng: random.Random,
    max_attempts: Optional[int] = None,
) -> int:
    """Run one trial and return the number of connection attempts.

    Args:
        n: Number of sites. ``n <= 1`` is already connected (0 attempts).
        rng: Source of the random pairs.
        max_attempts: Optional cap on draws. The expected draw count is
            about ``0.5 * n * ln(n)``; ``None`` means unbounded.

    Raises:
        ConnectivityTimeout: If ``max_attempts`` draws did not connect all
            sites.
    """
    if n <= 1:
        return 0
    uf = DisjointSet(n)
    attempts = 0
    while uf.count() > 1:
        if max_attempts is not None and attempts >= max_attempts:
            raise ConnectivityTimeout(
                f"{n} sites not connected after {attempts} attempts "
                f"({uf.count()} components left)"
            )
        p, q = random_pair(n, rng)
        if not uf.connected(p, q):
            uf.union(p, q)
        attempts += 1
    return attempts


def average_connections(
    n: int,
    trials: int,
    rng: random.Random,
    integer_mean: bool = False,
    max_attempts: Optional[int] = None,
) -> float:
    """Mean connection count over ``trials`` independent trials.

    With ``integer_mean`` the sum is floor-divided by ``trials`` (the
    historical truncating average); otherwise the exact mean is returned.
    """
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")
    total = 0
    for _ in range(trials):
        total += count_connections(n, rng, max_attempts=max_attempts)
    if integer_mean:
        return total // trials
    return total / trials


def expected_connections(n: int) -> float:
    """Analytic approximation ``0.5 * n * ln(n)`` of the mean draw count."""
    if n <= 1:
        return 0.0
    return 0.5 * n * math.log(n)


@dataclass(frozen=True)
class ConnectivityConfig:
    """Parameters of one connectivity sweep."""

    max_sites: int
    trials: int
    seed: Optional[int] = None
    integer_mean: bool = True
    max_attempts: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_sites <= 0:
            raise ValueError(f"max_sites must be positive, got {self.max_sites}")
        if self.trials <= 0:
            raise ValueError(f"trials must be positive, got {self.trials}")
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")


@dataclass
class ConnectivityResult:
    config: ConnectivityConfig
    # connection_counts[i] is the mean for i + 1 sites
    connection_counts: List[float] = field(default_factory=list)
    total_time_ms: int = 0

    def rows(self) -> Iterator[tuple[int, float, float]]:
        for i, mean in enumerate(self.connection_counts):
            sites = i + 1
            yield sites, mean, expected_connections(sites)

    def to_dict(self):
        return {
            "config": asdict(self.config),
            "total_time_ms": self.total_time_ms,
            "per_site": [
                {"sites": sites, "connections": mean, "expected": expected}
                for sites, mean, expected in self.rows()
            ],
        }


class ConnectivityExperiment:
    def __init__(self, config: ConnectivityConfig, rng: Optional[random.Random] = None):
        self.config = config
        if rng is None:
            rng = random.Random(config.seed) if config.seed is not None else random.Random()
        self.rng = rng

    def run(self) -> ConnectivityResult:
        """Sweep ``n`` from ``max_sites`` down to 1, one mean per ``n``."""
        cfg = self.config
        counts: List[float] = [0] * cfg.max_sites
        logger.info(
            "Connectivity sweep: max_sites=%d trials=%d integer_mean=%s",
            cfg.max_sites,
            cfg.trials,
            cfg.integer_mean,
        )
        t0 = time.perf_counter()
        step = max(1, cfg.max_sites // 10)
        for done, n in enumerate(range(cfg.max_sites, 0, -1), start=1):
            counts[n - 1] = average_connections(
                n,
                cfg.trials,
                self.rng,
                integer_mean=cfg.integer_mean,
                max_attempts=cfg.max_attempts,
            )
            if done % step == 0:
                logger.info("Progress %d/%d: n=%d mean=%s", done, cfg.max_sites, n, counts[n - 1])
        elapsed_ms = int((time.perf_counter() - t0) * 1000)
        logger.info("Connectivity sweep finished in %d ms", elapsed_ms)
        return ConnectivityResult(config=cfg, connection_counts=counts, total_time_ms=elapsed_ms)
