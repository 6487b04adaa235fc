"""Chart generation using Matplotlib."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from matplotlib.figure import Figure

from algos.core.metrics import BenchmarkResult


def _mean_series(
    results: Iterable[BenchmarkResult], distribution: str, attr: str
) -> Dict[str, List[Tuple[int, float]]]:
    # algorithm -> sorted [(size, mean value)]
    grouped: Dict[str, Dict[int, List[float]]] = {}
    for r in results:
        if r.distribution != distribution:
            continue
        grouped.setdefault(r.algorithm, {}).setdefault(r.size, []).append(float(getattr(r, attr)))

    return {
        algorithm: sorted((size, sum(vals) / len(vals)) for size, vals in by_size.items())
        for algorithm, by_size in grouped.items()
    }


def _line_chart(series: Dict[str, List[Tuple[int, float]]], ylabel: str, title: str) -> Figure:
    fig = Figure(figsize=(6, 4), dpi=100)
    ax = fig.add_subplot(111)

    if series:
        for algorithm, points in series.items():
            sizes = [p[0] for p in points]
            values = [p[1] for p in points]
            ax.plot(sizes, values, marker="o", label=algorithm)
        ax.set_xlabel("Input size (n)")
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True, linestyle='--', alpha=0.7)
        ax.legend(fontsize="small")
    else:
        ax.text(0.5, 0.5, "No Data", ha='center', va='center')

    fig.tight_layout()
    return fig


def build_comparisons_chart(results: Iterable[BenchmarkResult], distribution: str = "random") -> Figure:
    """Plot mean predicate calls against input size, one line per algorithm."""
    series = _mean_series(results, distribution, "comparisons")
    return _line_chart(series, "Comparisons", f"Comparisons ({distribution} input)")


def build_timing_chart(results: Iterable[BenchmarkResult], distribution: str = "random") -> Figure:
    """Plot mean wall time against input size."""
    series = _mean_series(results, distribution, "elapsed_s")
    return _line_chart(series, "Time (s)", f"Sort time ({distribution} input)")
