"""In-place comparison sorts driven by a caller-supplied ordering predicate.

Every public sort has the same shape::

    sort(values, less_than) -> None

``less_than(a, b)`` must return True when ``a`` has to come before ``b`` and must
behave as a strict weak ordering. The sequence is rearranged in place; nothing is
returned and the result is always a permutation of the input.

| Algorithm | Best        | Average     | Worst       | Extra space | Stable |
|-----------|-------------|-------------|-------------|-------------|--------|
| selection | n^2         | n^2         | n^2         | 1           | no     |
| bubble    | n^2         | n^2         | n^2         | 1           | yes    |
| cocktail  | n           | n^2         | n^2         | 1           | yes    |
| insertion | n           | n^2         | n^2         | 1           | yes    |
| merge     | n log n     | n log n     | n log n     | n           | yes    |
| quick     | n log n     | n log n     | n^2         | log n       | no     |
| heap      | n log n     | n log n     | n log n     | 1           | no     |
"""

from __future__ import annotations

import operator
import random
from typing import Callable, Dict, Iterable, List, MutableSequence, Optional, TypeVar


T = TypeVar("T")

LessThan = Callable[[T, T], bool]
SortFunc = Callable[..., None]


def selection(a: MutableSequence[T], less_than: LessThan = operator.lt) -> None:
    """Selection sort: swap the minimum of the unsorted suffix into place."""

    n = len(a)
    for i in range(n - 1):
        i_min = i
        for j in range(i + 1, n):
            if less_than(a[j], a[i_min]):
                i_min = j
        if i_min != i:
            a[i], a[i_min] = a[i_min], a[i]


def bubble(a: MutableSequence[T], less_than: LessThan = operator.lt) -> None:
    """Bubble sort.

    Each pass carries the largest remaining element to the end of the scanned
    range, which then shrinks by one. There is no early exit.
    """

    for end in range(len(a) - 1, 0, -1):
        for j in range(end):
            if less_than(a[j + 1], a[j]):
                a[j], a[j + 1] = a[j + 1], a[j]


def cocktail(a: MutableSequence[T], less_than: LessThan = operator.lt) -> None:
    """Cocktail shaker sort (bidirectional bubble sort).

    The window ``[start, end]`` shrinks from the top after a forward pass and from
    the bottom after a backward pass. A forward pass without swaps ends the sort,
    so already sorted input costs a single scan.
    """

    start = 0
    end = len(a) - 1
    while start < end:
        swapped = False
        for i in range(start, end):
            if less_than(a[i + 1], a[i]):
                a[i], a[i + 1] = a[i + 1], a[i]
                swapped = True
        end -= 1

        if not swapped:
            break

        for i in range(end - 1, start - 1, -1):
            if less_than(a[i + 1], a[i]):
                a[i], a[i + 1] = a[i + 1], a[i]
        start += 1


def insertion(a: MutableSequence[T], less_than: LessThan = operator.lt) -> None:
    """Insertion sort using adjacent swaps."""

    for i in range(1, len(a)):
        j = i
        # Strict comparison keeps equal elements in their original order.
        while j > 0 and less_than(a[j], a[j - 1]):
            a[j], a[j - 1] = a[j - 1], a[j]
            j -= 1


def merge(a: MutableSequence[T], less_than: LessThan = operator.lt) -> None:
    """Top-down merge sort.

    Mergesort is stable and runs in $O(n\\log n)$ time. A single auxiliary buffer
    the size of ``a`` is shared by every merge level.
    """

    n = len(a)
    if n <= 1:
        return
    buffer: List[T] = list(a)
    _merge_sort(a, 0, n, buffer, less_than)


def _merge_sort(a: MutableSequence[T], lo: int, hi: int, buffer: List[T], less_than: LessThan) -> None:
    # Sorts the half-open range [lo, hi).
    if hi - lo <= 1:
        return
    mid = (lo + hi) // 2
    _merge_sort(a, lo, mid, buffer, less_than)
    _merge_sort(a, mid, hi, buffer, less_than)
    _combine(a, lo, mid, hi, buffer, less_than)


def _combine(a: MutableSequence[T], lo: int, mid: int, hi: int, buffer: List[T], less_than: LessThan) -> None:
    """Merge the sorted runs ``a[lo:mid]`` and ``a[mid:hi]`` back into ``a``."""

    i = lo
    j = mid
    k = lo
    while i < mid and j < hi:
        # Stable: prefer left unless the right element is strictly smaller.
        if less_than(a[j], a[i]):
            buffer[k] = a[j]
            j += 1
        else:
            buffer[k] = a[i]
            i += 1
        k += 1

    while i < mid:
        buffer[k] = a[i]
        i += 1
        k += 1
    while j < hi:
        buffer[k] = a[j]
        j += 1
        k += 1

    for k in range(lo, hi):
        a[k] = buffer[k]


def quick(
    a: MutableSequence[T],
    less_than: LessThan = operator.lt,
    rng: Optional[random.Random] = None,
) -> None:
    """Quicksort with a uniformly random pivot and Lomuto partitioning.

    Args:
        a: Sequence to sort in place.
        less_than: Strict ordering predicate.
        rng: Random source for pivot selection. A fresh ``random.Random`` is
            created for the call when omitted; pass a seeded instance for
            reproducible runs.
    """

    if len(a) <= 1:
        return
    if rng is None:
        rng = random.Random()
    _quick_sort(a, 0, len(a) - 1, less_than, rng)


def _quick_sort(a: MutableSequence[T], lo: int, hi: int, less_than: LessThan, rng: random.Random) -> None:
    # Sorts the closed range [lo, hi]. Recursing only into the smaller side keeps
    # the stack depth logarithmic even when every pivot is a bad one.
    while lo < hi:
        p = _partition(a, lo, hi, less_than, rng)
        if p - lo < hi - p:
            _quick_sort(a, lo, p - 1, less_than, rng)
            lo = p + 1
        else:
            _quick_sort(a, p + 1, hi, less_than, rng)
            hi = p - 1


def _partition(a: MutableSequence[T], lo: int, hi: int, less_than: LessThan, rng: random.Random) -> int:
    """Partition ``a[lo:hi + 1]`` around a random pivot and return its final index."""

    r = rng.randint(lo, hi)
    a[r], a[hi] = a[hi], a[r]
    pivot = a[hi]

    i = lo
    for j in range(lo, hi):
        if less_than(a[j], pivot):
            a[i], a[j] = a[j], a[i]
            i += 1
    a[i], a[hi] = a[hi], a[i]
    return i


def heap(a: MutableSequence[T], less_than: LessThan = operator.lt) -> None:
    """Heap sort over an implicit max-heap (children of ``k`` are ``2k+1``, ``2k+2``)."""

    n = len(a)
    for k in range(n // 2 - 1, -1, -1):
        _sift_down(a, k, n, less_than)
    for end in range(n - 1, 0, -1):
        a[0], a[end] = a[end], a[0]
        _sift_down(a, 0, end, less_than)


def _sift_down(a: MutableSequence[T], k: int, size: int, less_than: LessThan) -> None:
    # Restores the heap property for the subtree rooted at k within a[:size].
    largest = k
    left = 2 * k + 1
    right = left + 1
    if left < size and less_than(a[largest], a[left]):
        largest = left
    if right < size and less_than(a[largest], a[right]):
        largest = right
    if largest != k:
        a[k], a[largest] = a[largest], a[k]
        _sift_down(a, largest, size, less_than)


ALGORITHMS: Dict[str, SortFunc] = {
    "selection": selection,
    "bubble": bubble,
    "cocktail": cocktail,
    "insertion": insertion,
    "merge": merge,
    "quick": quick,
    "heap": heap,
}

STABLE_ALGORITHMS = frozenset({"bubble", "cocktail", "insertion", "merge"})


def get_sorter(name: str) -> SortFunc:
    """Return the sort function registered under ``name``.

    Raises:
        ValueError: If no algorithm has that name.
    """

    try:
        return ALGORITHMS[name]
    except KeyError:
        known = ", ".join(sorted(ALGORITHMS))
        raise ValueError(f"Unknown sorting algorithm {name!r} (expected one of: {known})") from None


def sort_copy(
    values: Iterable[T],
    *,
    algorithm: str = "merge",
    less_than: LessThan = operator.lt,
) -> List[T]:
    """Return a new list containing ``values`` sorted with the named algorithm.

    The input is never mutated.
    """

    items = list(values)
    get_sorter(algorithm)(items, less_than)
    return items
