"""Disjoint sets with union by rank and path compression."""

from __future__ import annotations


class DisjointSets:
    """A forest over the elements ``0 .. n - 1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self.parent = list(range(n))
        self.rank = [0] * n

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """Return the root of *x*, pointing every node on the way at it."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while x != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def find_with_stack(self, x: int) -> int:
        """Same as :meth:`find`, remembering the path on a stack."""
        stack = []
        while self.parent[x] != x:
            stack.append(x)
            x = self.parent[x]
        while stack:
            self.parent[stack.pop()] = x
        return x

    def union(self, x: int, y: int) -> int:
        """Join the sets holding *x* and *y*; return the root of the result."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return x
        if self.rank[x] < self.rank[y]:
            self.parent[x] = y
            return y
        if self.rank[y] < self.rank[x]:
            self.parent[y] = x
            return x
        self.parent[y] = x
        self.rank[x] += 1
        return x