import os

from drivers.models import MapBounds
from search.benchmark import drivers_to_frame, generate_drivers


def generate_mock_drivers(filename="mock_drivers_100.csv", count=100, width=100, height=100, seed=51):
    # Same seed as the benchmark, so the CSV matches what the benchmark searches over.
    drivers = generate_drivers(count, MapBounds(width, height), seed=seed)

    # Save next to the benchmark script's lookup path (repo root)
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    output_path = os.path.join(base_dir, filename)

    df = drivers_to_frame(drivers)
    df.to_csv(output_path, index=False)

    print(f"Successfully generated {count} mock drivers on a {width}x{height} grid into '{output_path}'.")

if __name__ == "__main__":
    generate_mock_drivers()
