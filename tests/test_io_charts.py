"""Tests for config loading, result export and charts."""

from __future__ import annotations

import csv
import json
from pathlib import Path

import pytest
from matplotlib.figure import Figure

from algos.core.benchmark import BenchmarkConfig, run_benchmark
from algos.io.exporters import export_csv, export_json
from algos.io.importers import load_benchmark_config
from algos.viz.charts import build_comparisons_chart, build_timing_chart


def _results():
    config = BenchmarkConfig(algorithms=["insertion", "merge"], sizes=[5, 20], distributions=["random"])
    return run_benchmark(config)


def test_load_benchmark_config(tmp_path: Path) -> None:
    sample = tmp_path / "bench.json"
    sample.write_text(json.dumps({"algorithms": ["heap"], "sizes": [8], "seed": 4}), encoding="utf-8")

    config = load_benchmark_config(sample)
    assert config.algorithms == ["heap"]
    assert config.sizes == [8]
    assert config.seed == 4
    assert config.repeats == 1


def test_load_benchmark_config_missing_keys(tmp_path: Path) -> None:
    sample = tmp_path / "bench.json"
    sample.write_text(json.dumps({"sizes": [8]}), encoding="utf-8")
    with pytest.raises(ValueError, match="missing keys: algorithms"):
        load_benchmark_config(sample)


def test_load_benchmark_config_rejects_bad_json(tmp_path: Path) -> None:
    sample = tmp_path / "bench.json"
    sample.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid JSON"):
        load_benchmark_config(sample)

    sample.write_text(json.dumps(["merge"]), encoding="utf-8")
    with pytest.raises(ValueError, match="must be a JSON object"):
        load_benchmark_config(sample)


def test_export_csv_and_json(tmp_path: Path) -> None:
    results = _results()

    csv_path = tmp_path / "results.csv"
    export_csv(csv_path, results)
    with csv_path.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert len(rows) == 4
    assert rows[0]["algorithm"] == "insertion"
    assert rows[0]["sorted_ok"] == "True"
    assert int(rows[0]["size"]) == 5
    assert set(rows[0]) == {"algorithm", "distribution", "size", "comparisons", "elapsed_s", "sorted_ok"}

    json_path = tmp_path / "results.json"
    export_json(json_path, results)
    payload = json.loads(json_path.read_text(encoding="utf-8"))
    assert len(payload["results"]) == 4
    assert payload["summary"]["merge"]["runs"] == 2


def test_export_csv_empty(tmp_path: Path) -> None:
    path = tmp_path / "empty.csv"
    export_csv(path, [])
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == ["algorithm,distribution,size,comparisons,elapsed_s,sorted_ok"]


def test_charts() -> None:
    results = _results()
    fig = build_comparisons_chart(results, "random")
    assert isinstance(fig, Figure)
    assert len(fig.axes[0].get_lines()) == 2

    timing = build_timing_chart(results, "random")
    assert len(timing.axes[0].get_lines()) == 2

    empty = build_comparisons_chart(results, "sorted")
    assert len(empty.axes[0].get_lines()) == 0
