"""Simulation throughput measurement."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from snake_sim.config import SimulationConfig
from snake_sim.engine import GameEngine
from snake_sim.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_ticks: int
    total_resets: int
    wall_time_seconds: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_ticks} ticks, "
            f"{self.total_resets} resets in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def benchmark_throughput(
    *,
    num_ticks: int = 10_000,
    width: int = 10,
    height: int = 10,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw tick throughput under random input.

    Steers the snake with a random direction on every tick and reports
    ticks/second along with how many game-over resets occurred.
    """
    if num_ticks < 1:
        raise ValueError("num_ticks must be at least 1.")
    config = SimulationConfig(width=width, height=height, seed=seed)
    engine = GameEngine(config)
    rng = np.random.default_rng(seed)
    choices = rng.integers(len(_DIRECTIONS), size=num_ticks).tolist()

    start = time.perf_counter()
    for choice in choices:
        engine.tick(_DIRECTIONS[choice])
    elapsed = time.perf_counter() - start

    result = BenchmarkResult(
        total_ticks=num_ticks,
        total_resets=engine.state.resets,
        wall_time_seconds=elapsed,
        ticks_per_second=num_ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
