"""Benchmark configuration loader."""

from __future__ import annotations

import json
from pathlib import Path

from algos.core.benchmark import BenchmarkConfig


REQUIRED_KEYS = {"algorithms", "sizes"}


def load_benchmark_config(path: Path) -> BenchmarkConfig:
    """Load and validate a benchmark configuration file.

    Raises:
        ValueError: If the file is not a JSON object, misses required keys or
            fails :meth:`BenchmarkConfig.from_dict` validation.
    """

    path = Path(path)
    with path.open(encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path.name} is not valid JSON: {exc.msg}") from exc

    if not isinstance(data, dict):
        raise ValueError("Benchmark config must be a JSON object")
    missing = REQUIRED_KEYS.difference(data)
    if missing:
        raise ValueError(f"Benchmark config missing keys: {', '.join(sorted(missing))}")
    return BenchmarkConfig.from_dict(data)
