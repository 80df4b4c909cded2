import json

import matplotlib
import pytest

matplotlib.use("Agg")

from benchmarks import run_benchmarks_suggestions as bench  # noqa: E402


@pytest.fixture(autouse=True)
def small_benchmark(tmp_path, monkeypatch):
    monkeypatch.setattr(bench, "WORKDIR", tmp_path / "data")
    monkeypatch.setattr(bench, "RESULTS_DIR", tmp_path / "results")
    monkeypatch.setattr(bench, "DATA_SIZES", [200])
    monkeypatch.setattr(bench, "REPEATS", 1)


def test_generate_word_list_is_reproducible(tmp_path):
    first = bench.generate_word_list(50)
    content = first.read_text(encoding="utf-8")
    first.unlink()
    second = bench.generate_word_list(50)

    assert second.read_text(encoding="utf-8") == content
    assert len(content.splitlines()) == 50


def test_benchmark_algorithm_reports_metrics():
    data_path = bench.generate_word_list(100)

    metrics = bench.benchmark_algorithm(bench.ALGORITHMS["Trie"], data_path)

    assert metrics["average_execution_time"] >= 0
    assert metrics["peak_memory"] > 0
    assert metrics["rss"] > 0


def test_main_writes_results_and_plots(tmp_path):
    bench.main()

    results_dir = tmp_path / "results"
    results = json.loads((results_dir / "results.json").read_text())
    assert set(results["200"]) == set(bench.ALGORITHMS)
    assert (results_dir / "benchmark_200.png").exists()
