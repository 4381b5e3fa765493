"""Comparison, distribution and radix sorts, partitioning and selection."""

from __future__ import annotations

import random
from bisect import bisect_left
from collections import deque
from itertools import accumulate
from typing import Any, Callable, Iterable, MutableSequence, Optional, Sequence


def insertion_sort(values: Iterable[Any]) -> list:
    """Return a sorted list, placing each element with a binary search."""
    result: list = []
    for value in values:
        result.insert(bisect_left(result, value), value)
    return result


def merge_sorted(a: Sequence[Any], b: Sequence[Any]) -> list:
    """Merge two sorted sequences into one sorted list, favouring *a* on ties."""
    result = []
    i = j = 0
    while i < len(a) and j < len(b):
        if b[j] < a[i]:
            result.append(b[j])
            j += 1
        else:
            result.append(a[i])
            i += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def merge_sort(values: Iterable[Any]) -> list:
    """Return a sorted list using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return merge_sorted(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(
    items: MutableSequence[Any], left: int, right: int, predicate: Callable[[Any], bool]
) -> int:
    """Move elements of ``items[left:right]`` satisfying *predicate* to the front.

    Return the index of the first element that does not satisfy it.
    """
    boundary = left
    for j in range(left, right):
        if predicate(items[j]):
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    return boundary


def _quicksort_range(
    items: MutableSequence[Any],
    left: int,
    right: int,
    choose: Optional[Callable[[int, int], int]],
) -> None:
    while right - left > 1:
        if choose is not None:
            pick = choose(left, right)
            items[left], items[pick] = items[pick], items[left]
        z = items[left]
        pivot = _partition(items, left + 1, right, lambda x: x < z) - 1
        items[left], items[pivot] = items[pivot], items[left]
        # Recurse into the smaller side and loop on the larger one.
        if pivot - left < right - pivot - 1:
            _quicksort_range(items, left, pivot, choose)
            left = pivot + 1
        else:
            _quicksort_range(items, pivot + 1, right, choose)
            right = pivot


def quicksort(values: Iterable[Any]) -> list:
    """Return a sorted list using quicksort with the first element as pivot."""
    items = list(values)
    _quicksort_range(items, 0, len(items), None)
    return items


def randomized_quicksort(values: Iterable[Any], rng: Optional[random.Random] = None) -> list:
    """Return a sorted list using quicksort with a randomly chosen pivot."""
    if rng is None:
        rng = random.Random()
    items = list(values)
    _quicksort_range(items, 0, len(items), rng.randrange)
    return items


def _three_way_range(items: MutableSequence[Any], left: int, right: int, rng: random.Random) -> None:
    while right - left > 1:
        z = items[rng.randrange(left, right)]
        lr = _partition(items, left, right, lambda x: x < z)
        rl = _partition(items, lr, right, lambda x: not z < x)
        if lr - left < right - rl:
            _three_way_range(items, left, lr, rng)
            left = rl
        else:
            _three_way_range(items, rl, right, rng)
            right = lr


def three_way_quicksort(values: Iterable[Any], rng: Optional[random.Random] = None) -> list:
    """Return a sorted list using quicksort that groups elements equal to the pivot."""
    if rng is None:
        rng = random.Random()
    items = list(values)
    _three_way_range(items, 0, len(items), rng)
    return items


def partition_lomuto(values: MutableSequence[Any], left: int, position: int, right: int) -> int:
    """Partition ``values[left:right]`` around ``values[position]`` in place.

    Smaller elements end up before the returned index, which holds the pivot.
    If *position* is outside the range nothing moves and *left* is returned.
    """
    if left <= position < right:
        z = values[position]
        right -= 1
        values[position], values[right] = values[right], values[position]
        for index in range(left, right):
            if values[index] < z:
                values[left], values[index] = values[index], values[left]
                left += 1
        values[left], values[right] = values[right], values[left]
    return left


def quickselect(values: MutableSequence[Any], k: int) -> Any:
    """Rearrange *values* so that position *k* holds the k-th smallest; return it.

    Elements before *k* are not greater and elements after are not smaller.
    """
    if not 0 <= k < len(values):
        raise IndexError("k is out of range")
    left, right = 0, len(values)
    while True:
        z = values[left]
        pivot = _partition(values, left + 1, right, lambda x: x < z) - 1
        values[left], values[pivot] = values[pivot], values[left]
        d = pivot - left
        if d == k:
            return values[pivot]
        if d < k:
            left = pivot + 1
            k -= d + 1
        else:
            right = pivot


def counting_sort(values: Iterable[int], k: int) -> list:
    """Return a stable sort of integers drawn from ``range(k)``."""
    items = list(values)
    counts = [0] * (k + 1)
    for x in items:
        if not 0 <= x < k:
            raise ValueError(f"value {x} is outside [0, {k})")
        counts[x + 1] += 1
    starts = list(accumulate(counts))
    result: list = [0] * len(items)
    for x in items:
        result[starts[x]] = x
        starts[x] += 1
    return result


def _bucket_index(x: float, m: int) -> int:
    if not 0 <= x < 1:
        raise ValueError(f"value {x} is outside [0, 1)")
    return min(int(x * m), m - 1)


def bucket_sort(values: Iterable[float]) -> list:
    """Sort numbers in ``[0, 1)`` using one list bucket per element."""
    items = list(values)
    m = len(items)
    buckets: list[list[float]] = [[] for _ in range(m)]
    for x in items:
        buckets[_bucket_index(x, m)].append(x)
    return [x for bucket in buckets for x in sorted(bucket)]


def histogram_sort(values: Iterable[float]) -> list:
    """Sort numbers in ``[0, 1)`` by counting bucket sizes into one array."""
    items = list(values)
    m = len(items)
    indices = [_bucket_index(x, m) for x in items]
    counts = [0] * (m + 1)
    for index in indices:
        counts[index + 1] += 1
    starts = list(accumulate(counts))
    ends = starts[1:]
    placed: list = [0.0] * m
    for x, index in zip(items, indices):
        placed[starts[index]] = x
        starts[index] += 1
    result: list = []
    left = 0
    for right in ends:
        result.extend(sorted(placed[left:right]))
        left = right
    return result


def radix_sort_strings(strings: Iterable[str], length: int, base: int = 10) -> list:
    """Sort digit strings by their first *length* characters, least significant first."""
    items = list(strings)
    for s in items:
        if len(s) < length:
            raise ValueError(f"string {s!r} is shorter than {length}")
    for d in reversed(range(length)):
        queues: list[deque] = [deque() for _ in range(base)]
        for s in items:
            queues[int(s[d], base)].append(s)
        items = [s for queue in queues for s in queue]
    return items