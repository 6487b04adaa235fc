"""Property checks for sort results.

These are used by the benchmark runner as a sanity check and by the tests.
Stability cannot be read off values alone, so ``is_stable`` compares the
per-key order of the original items with the per-key order of the result.
"""

from __future__ import annotations

import operator
from collections import Counter, defaultdict, deque
from typing import Any, Callable, Deque, Dict, List, Optional, Sequence, TypeVar


T = TypeVar("T")


def first_order_violation(values: Sequence[T], less_than: Callable[[T, T], bool] = operator.lt) -> Optional[int]:
    """Return the first index ``i`` where ``values[i + 1]`` should precede ``values[i]``."""

    for i in range(len(values) - 1):
        if less_than(values[i + 1], values[i]):
            return i
    return None


def is_sorted(values: Sequence[T], less_than: Callable[[T, T], bool] = operator.lt) -> bool:
    return first_order_violation(values, less_than) is None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff ``a`` and ``b`` hold the same multiset of elements."""

    if len(a) != len(b):
        return False
    try:
        return Counter(a) == Counter(b)
    except TypeError:
        pass

    # Unhashable elements: match each element of `a` against an unused equal one in `b`.
    remaining: List[Any] = list(b)
    for item in a:
        for idx, candidate in enumerate(remaining):
            if candidate == item:
                del remaining[idx]
                break
        else:
            return False
    return not remaining


def is_stable(original: Sequence[T], result: Sequence[T], key: Callable[[T], Any]) -> bool:
    """Return True if elements with equal keys kept their original relative order.

    For every key, the items of ``result`` carrying it must appear in the same
    order as in ``original``. Items are matched by equality, so repeated or
    shared objects are fine.
    """

    if len(original) != len(result):
        return False
    pending: Dict[Any, Deque[T]] = defaultdict(deque)
    for item in original:
        pending[key(item)].append(item)
    for item in result:
        queue = pending.get(key(item))
        if not queue or queue.popleft() != item:
            return False
    return True
