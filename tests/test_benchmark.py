"""Tests for the benchmark runner."""

from __future__ import annotations

import logging
import random

import pytest

from algos.core.benchmark import BenchmarkConfig, generate_input, run_benchmark, run_once
from algos.core.constants import Distribution
from algos.core.metrics import BenchmarkResult, summarise


@pytest.mark.parametrize("distribution", list(Distribution))
def test_generate_input_shapes(distribution: Distribution) -> None:
    values = generate_input(distribution, 40, random.Random(3))
    assert len(values) == 40
    if distribution is Distribution.SORTED:
        assert values == list(range(40))
    if distribution is Distribution.REVERSED:
        assert values == list(range(40, 0, -1))
    if distribution is Distribution.FEW_UNIQUE:
        assert set(values) <= {0, 1, 2, 3}
    if distribution is Distribution.NEARLY_SORTED:
        assert sorted(values) == list(range(40))


def test_generate_input_rejects_bad_arguments() -> None:
    with pytest.raises(ValueError, match="Unknown input distribution"):
        generate_input("zigzag", 5, random.Random(0))
    with pytest.raises(ValueError):
        generate_input("random", -1, random.Random(0))


def test_comparison_counts_on_sorted_input() -> None:
    values = list(range(20))
    assert run_once("insertion", values).comparisons == 19
    assert run_once("cocktail", values).comparisons == 19
    assert run_once("bubble", values).comparisons == 20 * 19 // 2
    assert run_once("selection", values).comparisons == 20 * 19 // 2


def test_run_benchmark_covers_every_combination(caplog: pytest.LogCaptureFixture) -> None:
    config = BenchmarkConfig.from_dict(
        {"algorithms": ["merge", "quick", "heap"], "sizes": [0, 1, 30], "distributions": ["random", "sorted"], "repeats": 2}
    )
    with caplog.at_level(logging.INFO, logger="algos.core.benchmark"):
        results = run_benchmark(config)

    assert len(results) == 3 * 3 * 2 * 2
    assert all(r.sorted_ok for r in results)
    assert {r.distribution for r in results} == {"random", "sorted"}
    assert "Benchmark finished" in caplog.text

    summary = summarise(results)
    assert list(summary) == ["merge", "quick", "heap"]
    assert summary["merge"].runs == 12
    assert summary["merge"].all_sorted


def test_run_benchmark_is_reproducible() -> None:
    config = BenchmarkConfig(algorithms=["quick"], sizes=[50], distributions=["random"], seed=5)
    first = [r.comparisons for r in run_benchmark(config)]
    second = [r.comparisons for r in run_benchmark(config)]
    assert first == second


@pytest.mark.parametrize(
    "data, message",
    [
        ({"algorithms": ["bogo"]}, "Unknown sorting algorithm"),
        ({"algorithms": []}, "at least one algorithm"),
        ({"sizes": [-1]}, "sizes must be >= 0"),
        ({"sizes": []}, "at least one size"),
        ({"distributions": ["zigzag"]}, "Unknown input distributions"),
        ({"repeats": 0}, "repeats must be > 0"),
        ({"sizes": "10"}, "'sizes' must be a list"),
        ({"algorithms": "merge"}, "'algorithms' must be a list"),
        ({"distributions": 5}, "'distributions' must be a list"),
    ],
)
def test_config_validation(data: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        BenchmarkConfig.from_dict(data)


def test_summarise_means() -> None:
    results = [
        BenchmarkResult("merge", "random", 10, 20, 0.5, True),
        BenchmarkResult("merge", "random", 10, 40, 1.5, False),
    ]
    summary = summarise(results)["merge"]
    assert summary.mean_comparisons == 30
    assert summary.mean_elapsed_s == 1.0
    assert summary.all_sorted is False
