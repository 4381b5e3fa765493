"""Lengths of Collatz sequences, directly and with a memo table."""

from __future__ import annotations


def _step(n: int) -> int:
    return n // 2 if n % 2 == 0 else 3 * n + 1


def collatz_length(n: int) -> int:
    """Number of terms in the Collatz sequence from *n* down to 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    length = 1
    while n != 1:
        n = _step(n)
        length += 1
    return length


class CollatzMemo:
    """Collatz lengths cached for starting values below ``size``."""

    def __init__(self, size: int) -> None:
        if size < 2:
            raise ValueError("memo size must be at least 2")
        self._memo = [0] * size
        self._memo[1] = 1

    def length(self, n: int) -> int:
        """Number of terms in the Collatz sequence from *n* down to 1."""
        if n < 1:
            raise ValueError("n must be at least 1")
        size = len(self._memo)
        offset = 0
        while n >= size:
            n = _step(n)
            offset += 1
        chain = []
        m = n
        while self._memo[m] == 0:
            nxt = _step(m)
            distance = 1
            while nxt >= size:
                nxt = _step(nxt)
                distance += 1
            chain.append((m, distance))
            m = nxt
        value = self._memo[m]
        for index, distance in reversed(chain):
            value += distance
            self._memo[index] = value
        return self._memo[n] + offset