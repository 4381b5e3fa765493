"""Circular rotation of fixed-width bit patterns."""

from __future__ import annotations


def _check(value: int, width: int) -> None:
    if width < 1:
        raise ValueError("width must be at least 1")
    if not 0 <= value < 1 << width:
        raise ValueError(f"value does not fit in {width} bits")


def rotate_left(value: int, shift: int, width: int) -> int:
    """Rotate the *width*-bit pattern *value* left by *shift* places."""
    _check(value, width)
    shift %= width
    mask = (1 << width) - 1
    return ((value << shift) | (value >> (width - shift))) & mask


def rotate_right(value: int, shift: int, width: int) -> int:
    """Rotate the *width*-bit pattern *value* right by *shift* places."""
    _check(value, width)
    shift %= width
    mask = (1 << width) - 1
    return ((value >> shift) | (value << (width - shift))) & mask