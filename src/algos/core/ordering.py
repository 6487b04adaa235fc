"""Helpers for building ordering predicates."""

from __future__ import annotations

from typing import Any, Callable, TypeVar


T = TypeVar("T")


def natural_less_than(a: Any, b: Any) -> bool:
    return a < b


def by_key(key: Callable[[T], Any]) -> Callable[[T, T], bool]:
    """Return a predicate comparing ``key(a) < key(b)`` (like ``sorted(..., key=...)``)."""

    def less_than(a: T, b: T) -> bool:
        return key(a) < key(b)

    return less_than


def reversed_order(less_than: Callable[[T, T], bool]) -> Callable[[T, T], bool]:
    """Return the descending counterpart of ``less_than``.

    Equal elements stay equal, so stable algorithms remain stable.
    """

    def greater_than(a: T, b: T) -> bool:
        return less_than(b, a)

    return greater_than
