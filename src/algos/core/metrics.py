"""Comparison counting and benchmark result records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterable, List, TypeVar


T = TypeVar("T")


class ComparisonCounter(Generic[T]):
    """Wrap an ordering predicate and count how often it is called."""

    def __init__(self, less_than: Callable[[T, T], bool]) -> None:
        self.less_than = less_than
        self.count = 0

    def __call__(self, a: T, b: T) -> bool:
        self.count += 1
        return self.less_than(a, b)

    def reset(self) -> None:
        self.count = 0


@dataclass
class BenchmarkResult:
    algorithm: str
    distribution: str
    size: int
    comparisons: int
    elapsed_s: float
    sorted_ok: bool


@dataclass
class BenchmarkSummary:
    algorithm: str
    runs: int = 0
    total_comparisons: int = 0
    mean_comparisons: float | None = None
    mean_elapsed_s: float | None = None
    all_sorted: bool = True


def summarise(results: Iterable[BenchmarkResult]) -> Dict[str, BenchmarkSummary]:
    """Aggregate benchmark results per algorithm, keeping first-seen order."""

    summaries: Dict[str, BenchmarkSummary] = {}
    elapsed: Dict[str, List[float]] = {}
    for result in results:
        summary = summaries.setdefault(result.algorithm, BenchmarkSummary(result.algorithm))
        summary.runs += 1
        summary.total_comparisons += result.comparisons
        summary.all_sorted = summary.all_sorted and result.sorted_ok
        elapsed.setdefault(result.algorithm, []).append(result.elapsed_s)

    for name, summary in summaries.items():
        summary.mean_comparisons = summary.total_comparisons / summary.runs
        times = elapsed[name]
        summary.mean_elapsed_s = sum(times) / len(times)
    return summaries
