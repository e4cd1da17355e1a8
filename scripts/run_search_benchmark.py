import os
from typing import List, Optional

import pandas as pd

from drivers.models import Driver
from drivers.policy import search_policy_from_env
from search.benchmark import BenchmarkConfig, drivers_from_frame, run_benchmarks
from search.registry import available_rankers, get_ranker


def load_drivers(filepath="mock_drivers_100.csv") -> List[Driver]:
    # Resolve the correct path depending on where the user runs the script from.
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    absolute_path = os.path.join(base_dir, filepath)
    return drivers_from_frame(pd.read_csv(absolute_path))


def run_benchmark(output_file: Optional[str] = "search_benchmark_results.csv"):
    print("=== STARTING DRIVER SEARCH BENCHMARK ===")

    policy = search_policy_from_env()
    config = BenchmarkConfig()
    print(f"Map {config.map_width}x{config.map_height}, drivers {list(config.driver_counts)}, "
          f"{config.repeats} runs each, returning up to {policy.max_results} drivers.\n")

    results = run_benchmarks(config, policy=policy)

    print(results.sort_values(["drivers", "rank"]).to_string(index=False))

    if output_file:
        base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        output_path = os.path.join(base_dir, output_file)
        results.to_csv(output_path, index=False)
        print(f"\nResults written to '{output_path}'.")

    print("\n=== BENCHMARK COMPLETE ===")


def show_nearest_from_csv(filepath="mock_drivers_100.csv"):
    """
    Quick manual check: run every strategy once over a saved driver CSV.
    """
    drivers = load_drivers(filepath)
    config = BenchmarkConfig()
    bounds = config.bounds
    order = bounds.center()

    print(f"Order at ({order.x}, {order.y}), {len(drivers)} drivers loaded.")
    for name in available_rankers():
        found = get_ranker(name).rank(order, drivers, bounds)
        positions = [(driver.id, driver.position.x, driver.position.y) for driver in found]
        print(f"  {name}: {positions}")

if __name__ == "__main__":
    run_benchmark()

    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if os.path.exists(os.path.join(base_dir, "mock_drivers_100.csv")):
        show_nearest_from_csv("mock_drivers_100.csv")
