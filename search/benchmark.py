"""
Purpose: Compare the search strategies on generated drivers.
What it does:
- Scatters a seeded, reproducible population of drivers over the grid.
- Places the order in the middle of the map.
- Runs every strategy several times per population size, measuring mean
  latency and peak allocated memory, and ranks the strategies (1 = fastest).

Results come back as a pandas DataFrame so they can be printed or saved to CSV.
"""

from __future__ import annotations

import logging
import time
import tracemalloc
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from drivers.models import Driver, MapBounds
from drivers.policy import SearchPolicy

from .base import DriverRanker
from .registry import available_rankers, get_ranker

logger = logging.getLogger(__name__)

DRIVER_COLUMNS = ["driver_id", "x", "y"]
RESULT_COLUMNS = ["ranker", "drivers", "mean_ms", "peak_kib", "rank"]


@dataclass(frozen=True)
class BenchmarkConfig:
    """
    Knobs for a benchmark run.
    """
    map_width: int = 100
    map_height: int = 100

    # population sizes to test
    driver_counts: Tuple[int, ...] = (100, 500)

    repeats: int = 20
    seed: int = 51

    @property
    def bounds(self) -> MapBounds:
        return MapBounds(self.map_width, self.map_height)

    def validate(self) -> None:
        if self.map_width <= 0 or self.map_height <= 0:
            raise ValueError("map_width and map_height must be > 0")

        if not self.driver_counts or any(count < 0 for count in self.driver_counts):
            raise ValueError("driver_counts must be a non-empty list of counts >= 0")

        if self.repeats < 1:
            raise ValueError("repeats must be >= 1")


def generate_drivers(count: int, bounds: MapBounds, seed: int = 51) -> List[Driver]:
    """
    Drivers 0..count-1 at random cells of the grid. Same seed, same drivers.
    """
    rng = np.random.default_rng(seed)
    xs = rng.integers(0, bounds.width, size=count)
    ys = rng.integers(0, bounds.height, size=count)
    return [Driver.new(index, int(x), int(y)) for index, (x, y) in enumerate(zip(xs, ys))]


def drivers_to_frame(drivers: List[Driver]) -> pd.DataFrame:
    rows = [
        {"driver_id": driver.id, "x": driver.position.x, "y": driver.position.y}
        for driver in drivers
    ]
    return pd.DataFrame(rows, columns=DRIVER_COLUMNS)


def drivers_from_frame(frame: pd.DataFrame) -> List[Driver]:
    missing = [column for column in DRIVER_COLUMNS if column not in frame.columns]
    if missing:
        raise ValueError(f"driver table is missing columns: {missing}")

    return [
        Driver.new(int(row.driver_id), int(row.x), int(row.y))
        for row in frame.itertuples(index=False)
    ]


def _measure(ranker: DriverRanker, drivers: List[Driver], bounds: MapBounds, repeats: int) -> Tuple[float, float]:
    order = bounds.center()

    start_time = time.perf_counter()
    for _ in range(repeats):
        ranker.rank(order, drivers, bounds)
    mean_ms = (time.perf_counter() - start_time) * 1000 / repeats

    # one extra call under tracemalloc so tracing overhead stays out of the timing.
    # A session the caller already started is reused and left running.
    was_tracing = tracemalloc.is_tracing()
    if not was_tracing:
        tracemalloc.start()
    try:
        tracemalloc.reset_peak()
        baseline_bytes, _ = tracemalloc.get_traced_memory()
        ranker.rank(order, drivers, bounds)
        _, peak_bytes = tracemalloc.get_traced_memory()
    finally:
        if not was_tracing:
            tracemalloc.stop()

    return mean_ms, max(peak_bytes - baseline_bytes, 0) / 1024


def run_benchmarks(
    config: Optional[BenchmarkConfig] = None,
    rankers: Optional[Dict[str, DriverRanker]] = None,
    policy: Optional[SearchPolicy] = None,
) -> pd.DataFrame:
    config = config or BenchmarkConfig()
    config.validate()

    if rankers is not None and policy is not None:
        raise ValueError("pass either rankers or policy, not both")

    if rankers is None:
        rankers = {name: get_ranker(name, policy) for name in available_rankers()}

    bounds = config.bounds
    rows = []
    for count in config.driver_counts:
        drivers = generate_drivers(count, bounds, seed=config.seed)
        for name, ranker in rankers.items():
            mean_ms, peak_kib = _measure(ranker, drivers, bounds, config.repeats)
            logger.info("benchmark %s with %d drivers: %.4f ms, %.1f KiB", name, count, mean_ms, peak_kib)
            rows.append({"ranker": name, "drivers": count, "mean_ms": mean_ms, "peak_kib": peak_kib})

    results = pd.DataFrame(rows, columns=RESULT_COLUMNS[:-1])
    if results.empty:
        return pd.DataFrame(columns=RESULT_COLUMNS)

    results["rank"] = (
        results.groupby("drivers")["mean_ms"].rank(method="min").astype(int)
    )
    return results
