"""Benchmark different prefix-search algorithms."""

import gc
import json
import random
import string
import time
import tracemalloc
from pathlib import Path
from typing import Callable

import matplotlib.pyplot as plt
import psutil

from src.dictionary import prefix_search

WORKDIR = Path("/tmp/dictionary_benchmarks")
RESULTS_DIR = (
    Path(__file__).parent.parent / "static" / "benchmarks" / "suggestions"
)
DATA_SIZES = [1_000, 10_000, 50_000, 100_000]
PREFIXES = ["a", "ca", "the", "zzz", "qu", "mar"]
LIMIT = 10
REPEATS = 3

ALGORITHMS: dict[str, Callable[[Path, str, int], list[str]]] = {
    "Linear Scan": prefix_search.linear_scan_suggestions,
    "Binary Search": prefix_search.binary_search_suggestions,
    "Trie": prefix_search.trie_suggestions,
}


def generate_word_list(size: int, seed: int = 42) -> Path:
    """Write a word list of `size` random lowercase words.

    Args:
        size (int): The number of lines to write.
        seed (int): The random seed, so every run uses the same data.

    Returns:
        Path: The path of the generated file.

    """
    WORKDIR.mkdir(parents=True, exist_ok=True)
    data_path = WORKDIR / f"words{size}.txt"
    if data_path.exists():
        return data_path

    rng = random.Random(seed)
    with data_path.open("w", encoding="utf-8") as file:
        for _ in range(size):
            length = rng.randint(2, 12)
            file.write(
                "".join(rng.choices(string.ascii_lowercase, k=length)) + "\n",
            )
    return data_path


def benchmark_algorithm(
    func: Callable[[Path, str, int], list[str]],
    data_path: Path,
) -> dict[str, float]:
    """Time one algorithm over every prefix.

    Args:
        func (Callable): The prefix-search function.
        data_path (Path): The word list to search.

    Returns:
        dict[str, float]: The average time per query in milliseconds,
        the peak traced memory and the process RSS in bytes.

    """
    process = psutil.Process()
    tracemalloc.start()
    timings: list[float] = []
    try:
        for _ in range(REPEATS):
            for prefix in PREFIXES:
                start_time = time.perf_counter()
                func(data_path, prefix, LIMIT)
                timings.append((time.perf_counter() - start_time) * 1000)

        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()

    return {
        "average_execution_time": sum(timings) / len(timings),
        "peak_memory": float(peak),
        "rss": float(process.memory_info().rss),
    }


def plot_results(size: int, results: dict[str, dict[str, float]]) -> Path:
    """Save a bar chart of the average query times for one data size.

    Args:
        size (int): The number of words in the benchmarked list.
        results (dict): The metrics per algorithm.

    Returns:
        Path: The path of the saved image.

    """
    names = list(results)
    y_values = [results[name]["average_execution_time"] for name in names]

    plt.figure(figsize=(8, 5))
    x = range(len(names))
    plt.bar(x, y_values, color="steelblue")
    plt.xticks(x, names)
    plt.xlabel("Algorithm")
    plt.ylabel("Execution Time (ms)")
    plt.title(f"Average Prefix Query Time ({size} words)")

    for i, v in enumerate(y_values):
        plt.text(i, v + 0.01, f"{v:.2f}", ha="center", va="bottom")

    plt.tight_layout()
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    image_path = RESULTS_DIR / f"benchmark_{size}.png"
    plt.savefig(image_path)
    plt.close("all")
    return image_path


def main() -> None:
    """Main function."""
    results_json: dict[str, dict[str, dict[str, float]]] = {}

    for size in DATA_SIZES:
        data_path = generate_word_list(size)
        results: dict[str, dict[str, float]] = {}

        for name, func in ALGORITHMS.items():
            print(f"\n--- Benchmarking {name} on {size} words ---")
            try:
                results[name] = benchmark_algorithm(func, data_path)
                print(
                    "Average response time: "
                    f"{results[name]['average_execution_time']:.2f} ms",
                )
            except Exception as e:
                print(f"An error occurred during benchmarking {name}: {e}")
            finally:
                gc.collect()

        if results:
            plot_results(size, results)
        results_json[str(size)] = results

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    with open(RESULTS_DIR / "results.json", "w", encoding="utf-8") as f:
        json.dump(results_json, f, indent=4)


if __name__ == "__main__":
    main()
