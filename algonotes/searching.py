"""Linear and binary searching, and edits that keep a sorted list sorted."""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence


def linear_search(key: Any, data: Sequence[Any]) -> int:
    """Return the index of the first element equal to *key*, or ``len(data)``."""
    return next((i for i, item in enumerate(data) if item == key), len(data))


def sentinel_linear_search(key: Any, data: MutableSequence[Any]) -> int:
    """Search with *key* placed as a sentinel after the last element.

    The list is restored before returning. The result is the index of the
    first match, or ``len(data)`` when *key* is absent.
    """
    data.append(key)
    try:
        i = 0
        while data[i] != key:
            i += 1
        return i
    finally:
        data.pop()


def binary_search_index(key: Any, data: Sequence[Any]) -> int:
    """Binary search over a closed interval.

    Return the index of an element equal to *key*, or ``len(data)`` if none.
    """
    n = len(data)
    low, high = 0, n - 1
    while low <= high:
        mid = low + (high - low) // 2
        if key < data[mid]:
            high = mid - 1
        elif data[mid] < key:
            low = mid + 1
        else:
            return mid
    return n


def binary_search(key: Any, data: Sequence[Any], lo: int = 0, hi: int | None = None) -> bool:
    """Report whether *key* occurs in the sorted range ``data[lo:hi]``."""
    if hi is None:
        hi = len(data)
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if key < data[mid]:
            hi = mid
        elif data[mid] < key:
            lo = mid + 1
        else:
            return True
    return False


def lower(key: Any, data: Sequence[Any]) -> int:
    """Return the first position whose element is not less than *key*."""
    left, right = 0, len(data)
    while left < right:
        middle = left + (right - left) // 2
        if data[middle] < key:
            left = middle + 1
        else:
            right = middle
    return left


def upper(key: Any, data: Sequence[Any]) -> int:
    """Return the first position whose element is greater than *key*."""
    left, right = 0, len(data)
    while left < right:
        middle = left + (right - left) // 2
        if key < data[middle]:
            right = middle
        else:
            left = middle + 1
    return left


def insert_sorted(data: MutableSequence[Any], key: Any) -> int:
    """Insert *key* after any equal elements and return its position."""
    position = upper(key, data)
    data.insert(position, key)
    return position


def remove_last_sorted(data: MutableSequence[Any], key: Any) -> bool:
    """Remove the last element equal to *key* from a sorted list.

    Return True if an element was removed.
    """
    if not binary_search(key, data):
        return False
    del data[upper(key, data) - 1]
    return True


def remove_all_sorted(data: MutableSequence[Any], key: Any) -> int:
    """Remove every element equal to *key* from a sorted list; return how many."""
    first, last = lower(key, data), upper(key, data)
    del data[first:last]
    return last - first


def remove_last_unsorted(data: MutableSequence[Any], key: Any) -> bool:
    """Remove the last element equal to *key*, filling its slot with the tail.

    Order is not preserved. Return True if an element was removed.
    """
    for position in reversed(range(len(data))):
        if data[position] == key:
            data[position] = data[-1]
            data.pop()
            return True
    return False