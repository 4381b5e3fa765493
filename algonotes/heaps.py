"""Binary heap swim and sink on 1-based lists, and multiway merging."""

from __future__ import annotations

import heapq
import operator
from typing import Any, Callable, Iterable, MutableSequence

Less = Callable[[Any, Any], bool]


def swim(heap: MutableSequence[Any], i: int, less: Less = operator.lt) -> int:
    """Move ``heap[i]`` up until its parent is not less than it; return its new index.

    The heap is stored from index 1; index 0 is left untouched.
    """
    x = heap[i]
    while i > 1 and less(heap[i // 2], x):
        heap[i] = heap[i // 2]
        i //= 2
    heap[i] = x
    return i


def sink(heap: MutableSequence[Any], i: int, less: Less = operator.lt) -> int:
    """Move ``heap[i]`` down below any greater child; return its new index.

    The heap is stored from index 1; index 0 is left untouched. When both
    children are greater and equal, the right one is chosen.
    """
    x = heap[i]
    size = len(heap)
    right = 2 * i + 1
    while right < size:
        position, value = None, x
        if less(value, heap[right]):
            position, value = right, heap[right]
        if less(value, heap[right - 1]):
            position = right - 1
        if position is None:
            break
        heap[i] = heap[position]
        i = position
        right = 2 * i + 1
    if right == size and less(x, heap[right - 1]):
        heap[i] = heap[right - 1]
        i = right - 1
    heap[i] = x
    return i


def multiway_merge(sequences: Iterable[Iterable[Any]]) -> list:
    """Merge sorted sequences into one sorted list with a priority queue."""
    queue = []
    for index, sequence in enumerate(sequences):
        iterator = iter(sequence)
        for first in iterator:
            queue.append((first, index, iterator))
            break
    heapq.heapify(queue)
    result = []
    while queue:
        value, index, iterator = queue[0]
        result.append(value)
        following = next(iterator, _EXHAUSTED)
        if following is _EXHAUSTED:
            heapq.heappop(queue)
        else:
            heapq.heapreplace(queue, (following, index, iterator))
    return result


_EXHAUSTED = object()