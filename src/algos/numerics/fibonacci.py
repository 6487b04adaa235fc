"""Fibonacci sequence algorithms.

Two families are provided:

- bounded variants (``Fib``, ``recursive_fibonacci``, ``dynamic_fibonacci``,
  ``fast_doubling_fibonacci``) that refuse to produce values above an unsigned
  128-bit integer and raise ``OverflowError`` instead;
- unbounded variants (``BigFib``, ``big_fast_doubling_fibonacci``) relying on
  Python's arbitrary precision integers.

Indexing starts at ``F(0) == 0``, ``F(1) == 1``.
"""

from __future__ import annotations

import operator
from typing import Iterator, Tuple


U128_MAX = 2**128 - 1

# Largest n with F(n) <= U128_MAX.
U128_MAX_INDEX = 186


def _check_index(nth: int) -> int:
    nth = operator.index(nth)
    if nth < 0:
        raise ValueError("Fibonacci index must be >= 0")
    return nth


def _check_bound(value: int, nth: int) -> int:
    if value > U128_MAX:
        raise OverflowError(f"Fibonacci number {nth} does not fit in 128 bits")
    return value


def _fib_pair(nth: int) -> Tuple[int, int]:
    """Return ``(F(nth), F(nth + 1))`` using fast doubling."""

    if nth == 0:
        return 0, 1
    a, b = _fib_pair(nth // 2)
    c = a * (2 * b - a)
    d = a * a + b * b
    if nth % 2 == 0:
        return c, d
    return d, c + d


class BigFib:
    """Iterator over the Fibonacci sequence using unbounded integers.

    Example:
        >>> from itertools import islice
        >>> list(islice(BigFib(), 8))
        [0, 1, 1, 2, 3, 5, 8, 13]
    """

    def __init__(self, start: int = 0) -> None:
        self.index = _check_index(start)
        self._val = _fib_pair(self.index)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        current, following = self._val
        self._val = (following, current + following)
        self.index += 1
        return current


class Fib(BigFib):
    """Iterator over the Fibonacci sequence bounded to unsigned 128-bit values.

    The first 187 numbers (``F(0)`` to ``F(186)``) fit; asking for the next one
    raises ``OverflowError``. Use :class:`BigFib` past that point.
    """

    def __init__(self, start: int = 0) -> None:
        nth = _check_index(start)
        if nth > U128_MAX_INDEX:
            raise OverflowError(f"Fibonacci number {nth} does not fit in 128 bits")
        super().__init__(nth)
        _check_bound(self._val[0], nth)

    def __next__(self) -> int:
        _check_bound(self._val[0], self.index)
        return super().__next__()


def recursive_fibonacci(nth: int) -> int:
    """Classic doubly recursive definition. Exponential time; only for small ``nth``."""

    nth = _check_index(nth)
    if nth > U128_MAX_INDEX:
        raise OverflowError(f"Fibonacci number {nth} does not fit in 128 bits")

    def fib(n: int) -> int:
        if n == 0:
            return 0
        if n <= 2:
            return 1
        return fib(n - 1) + fib(n - 2)

    return _check_bound(fib(nth), nth)


def dynamic_fibonacci(nth: int) -> int:
    """Iterative bottom-up computation in O(n) time and O(1) space."""

    nth = _check_index(nth)
    a, b = 0, 1
    for _ in range(nth):
        a, b = b, a + b
        if a > U128_MAX:
            break
    return _check_bound(a, nth)


def fast_doubling_fibonacci(nth: int) -> int:
    """Fast doubling in O(log n) arithmetic steps, bounded to 128 bits."""

    nth = _check_index(nth)
    if nth > U128_MAX_INDEX:
        raise OverflowError(f"Fibonacci number {nth} does not fit in 128 bits")
    return _check_bound(_fib_pair(nth)[0], nth)


def big_fast_doubling_fibonacci(nth: int) -> int:
    """Fast doubling without an upper bound."""

    return _fib_pair(_check_index(nth))[0]
