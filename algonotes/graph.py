"""Adjacency-list transposition and numbering of named vertices."""

from __future__ import annotations

from typing import Hashable, Iterable, Sequence


def transpose(graph: Sequence[Iterable[int]]) -> list[list[int]]:
    """Return the graph with every edge reversed.

    Each new adjacency list holds its sources in increasing order.
    """
    adjacency = [list(neighbours) for neighbours in graph]
    n = len(adjacency)
    result: list[list[int]] = [[] for _ in range(n)]
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            if not 0 <= v < n:
                raise ValueError(f"vertex {v} is out of range")
            result[v].append(u)
    return result


def index_pairs(
    edges: Iterable[tuple[Hashable, Hashable]],
) -> tuple[list[Hashable], list[tuple[int, int]]]:
    """Number the vertex names in order of first appearance.

    Return the names by number and every edge as a pair of numbers.
    """
    names: list[Hashable] = []
    index: dict[Hashable, int] = {}

    def number(name: Hashable) -> int:
        if name not in index:
            index[name] = len(names)
            names.append(name)
        return index[name]

    pairs = []
    for first, second in edges:
        a = number(first)
        b = number(second)
        pairs.append((a, b))
    return names, pairs