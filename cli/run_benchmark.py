"""Command-line entry point for comparing the sorting algorithms."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark the algos sorting algorithms")
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        help="Path to benchmark configuration JSON (defaults are used when omitted)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Directory to write outputs (results.csv, results.json, comparisons.png)",
        default=Path("outputs"),
    )
    parser.add_argument("--verbose", action="store_true", help="Log every individual run")
    return parser.parse_args()


def main() -> None:
    """Parse arguments, run the benchmark and write the outputs."""

    import sys
    from importlib import import_module

    project_root = Path(__file__).resolve().parents[1]
    sys.path.append(str(project_root / "src"))

    benchmark = import_module("algos.core.benchmark")
    exporters = import_module("algos.io.exporters")
    load_benchmark_config = import_module("algos.io.importers").load_benchmark_config
    build_comparisons_chart = import_module("algos.viz.charts").build_comparisons_chart
    summarise = import_module("algos.core.metrics").summarise

    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_benchmark_config(args.config) if args.config else benchmark.BenchmarkConfig()
    results = benchmark.run_benchmark(config)

    output_dir = args.output
    output_dir.mkdir(parents=True, exist_ok=True)
    exporters.export_csv(output_dir / "results.csv", results)
    exporters.export_json(output_dir / "results.json", results)

    chart_distribution = config.distributions[0]
    fig = build_comparisons_chart(results, chart_distribution)
    fig.savefig(output_dir / "comparisons.png")

    for name, summary in summarise(results).items():
        print(
            f"{name:>10}: {summary.mean_comparisons:12.1f} comparisons/run, "
            f"{summary.mean_elapsed_s:.6f}s/run, sorted={summary.all_sorted}"
        )
    print(f"Completed {len(results)} runs. Results saved to {output_dir}")


if __name__ == "__main__":
    main()
