"""Result export helpers."""

from __future__ import annotations

import csv
import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Iterable, List

from algos.core.metrics import BenchmarkResult, summarise


RESULT_COLUMNS = [f.name for f in fields(BenchmarkResult)]


def results_to_rows(results: Iterable[BenchmarkResult]) -> List[Dict[str, Any]]:
    return [asdict(r) for r in results]


def export_csv(path: Path, results: Iterable[BenchmarkResult]) -> None:
    """Write one CSV row per benchmark run.

    The header is always written, so an empty benchmark still yields a file
    with the expected columns.
    """

    with Path(path).open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(RESULT_COLUMNS)
        for result in results:
            writer.writerow(getattr(result, column) for column in RESULT_COLUMNS)


def export_json(path: Path, results: Iterable[BenchmarkResult]) -> None:
    """Write raw results plus a per-algorithm summary as JSON."""

    results = list(results)
    payload = {
        "results": results_to_rows(results),
        "summary": {name: asdict(s) for name, s in summarise(results).items()},
    }
    Path(path).write_text(json.dumps(payload, indent=2), encoding="utf-8")
