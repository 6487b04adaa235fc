"""Benchmark runner comparing the sorting algorithms.

The runner never touches the sort implementations themselves: it generates
inputs, wraps the predicate in a :class:`ComparisonCounter`, times each call and
checks the result with the validation helpers.
"""

from __future__ import annotations

import logging
import operator
import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .constants import FEW_UNIQUE_VALUES, NEARLY_SORTED_SWAP_RATE, Distribution
from .metrics import BenchmarkResult, ComparisonCounter
from .sort import ALGORITHMS, get_sorter, quick
from .validation import is_permutation, is_sorted


logger = logging.getLogger(__name__)


def generate_input(distribution: Distribution | str, size: int, rng: random.Random) -> List[int]:
    """Build an integer input list of ``size`` elements with the given shape."""

    if size < 0:
        raise ValueError("size must be >= 0")
    try:
        kind = Distribution(distribution)
    except ValueError:
        raise ValueError(f"Unknown input distribution: {distribution!r}") from None

    if kind is Distribution.RANDOM:
        return [rng.randint(0, 10 * size) for _ in range(size)]
    if kind is Distribution.SORTED:
        return list(range(size))
    if kind is Distribution.REVERSED:
        return list(range(size, 0, -1))
    if kind is Distribution.FEW_UNIQUE:
        return [rng.randrange(FEW_UNIQUE_VALUES) for _ in range(size)]

    values = list(range(size))
    if size > 1:
        for _ in range(max(1, size * NEARLY_SORTED_SWAP_RATE // 100)):
            i = rng.randrange(size - 1)
            values[i], values[i + 1] = values[i + 1], values[i]
    return values


def _list_field(data: Dict[str, Any], name: str, default: List[Any]) -> List[Any]:
    value = data.get(name, default)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Benchmark config field {name!r} must be a list, got {type(value).__name__}")
    return list(value)


@dataclass
class BenchmarkConfig:
    algorithms: List[str] = field(default_factory=lambda: list(ALGORITHMS))
    sizes: List[int] = field(default_factory=lambda: [10, 100, 500])
    distributions: List[str] = field(default_factory=lambda: [d.value for d in Distribution])
    repeats: int = 1
    seed: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BenchmarkConfig":
        """Build a validated config from a plain dictionary (e.g. parsed JSON).

        Raises:
            ValueError: On unknown algorithms or distributions, empty lists,
                negative sizes or a non-positive repeat count.
        """

        defaults = cls()
        algorithms = [str(a) for a in _list_field(data, "algorithms", defaults.algorithms)]
        sizes = [int(s) for s in _list_field(data, "sizes", defaults.sizes)]
        distributions = [str(d) for d in _list_field(data, "distributions", defaults.distributions)]
        repeats = int(data.get("repeats", defaults.repeats))
        seed = int(data.get("seed", defaults.seed))

        if not algorithms:
            raise ValueError("Benchmark config needs at least one algorithm")
        for name in algorithms:
            get_sorter(name)
        if not sizes:
            raise ValueError("Benchmark config needs at least one size")
        if any(s < 0 for s in sizes):
            raise ValueError("Benchmark sizes must be >= 0")
        if not distributions:
            raise ValueError("Benchmark config needs at least one distribution")
        known = {d.value for d in Distribution}
        unknown = [d for d in distributions if d not in known]
        if unknown:
            raise ValueError(f"Unknown input distributions: {', '.join(unknown)}")
        if repeats <= 0:
            raise ValueError("repeats must be > 0")

        return cls(
            algorithms=algorithms,
            sizes=sizes,
            distributions=distributions,
            repeats=repeats,
            seed=seed,
        )


def run_once(algorithm: str, values: Sequence[int], *, seed: int = 0) -> BenchmarkResult:
    """Sort a copy of ``values`` with one algorithm and measure it.

    ``distribution`` is left empty; :func:`run_benchmark` fills it in.
    """

    sorter = get_sorter(algorithm)
    counter: ComparisonCounter[int] = ComparisonCounter(operator.lt)
    work = list(values)

    t0 = time.perf_counter()
    if sorter is quick:
        quick(work, counter, rng=random.Random(seed))
    else:
        sorter(work, counter)
    elapsed = time.perf_counter() - t0

    ok = is_sorted(work) and is_permutation(work, values)
    if not ok:
        logger.warning("%s produced an invalid result for %d elements", algorithm, len(values))
    return BenchmarkResult(
        algorithm=algorithm,
        distribution="",
        size=len(values),
        comparisons=counter.count,
        elapsed_s=elapsed,
        sorted_ok=ok,
    )


def run_benchmark(config: BenchmarkConfig) -> List[BenchmarkResult]:
    """Run every (distribution, size, repeat, algorithm) combination in ``config``.

    All algorithms see the same input for a given distribution, size and repeat,
    and the whole run is reproducible from ``config.seed``.
    """

    rng = random.Random(config.seed)
    results: List[BenchmarkResult] = []
    logger.info(
        "Benchmarking %d algorithms over sizes %s and distributions %s",
        len(config.algorithms),
        config.sizes,
        config.distributions,
    )
    for distribution in config.distributions:
        for size in config.sizes:
            for repeat in range(config.repeats):
                values = generate_input(distribution, size, rng)
                for algorithm in config.algorithms:
                    result = run_once(algorithm, values, seed=config.seed + repeat)
                    result.distribution = Distribution(distribution).value
                    results.append(result)
                    logger.debug(
                        "%s %s n=%d: %d comparisons in %.6fs",
                        algorithm,
                        distribution,
                        size,
                        result.comparisons,
                        result.elapsed_s,
                    )
    logger.info("Benchmark finished with %d results", len(results))
    return results
