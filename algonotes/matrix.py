"""Square matrices with one value on the diagonal and another elsewhere."""

from __future__ import annotations

from typing import Any


def diagonal_matrix(n: int, diagonal: Any = 4, other: Any = 2) -> list[list[Any]]:
    """Return an n-by-n matrix holding *diagonal* where row equals column, else *other*."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [[diagonal if i == j else other for j in range(n)] for i in range(n)]