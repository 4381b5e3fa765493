"""Huffman coding of weighted symbols."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections import deque
from typing import Iterable

LETTER_FREQUENCIES = (
    0.0721, 0.0240, 0.0394, 0.0372, 0.1224, 0.0272, 0.0178,
    0.0449, 0.0779, 0.0013, 0.0054, 0.0426, 0.0282, 0.0638,
    0.0681, 0.0290, 0.0023, 0.0638, 0.0728, 0.0908, 0.0235,
    0.0094, 0.0130, 0.0077, 0.0126, 0.0026,
)


def huffman_codes(weights: Iterable[float]) -> list[str]:
    """Return the Huffman code of each weight as a string of '0' and '1'.

    The lighter of two merged trees becomes the left child, coded '0'.
    A single symbol gets the empty code.
    """
    weights = list(weights)
    if not weights:
        return []
    queue = [(weight, node) for node, weight in enumerate(weights)]
    heapq.heapify(queue)
    children: dict[int, tuple[int, int]] = {}
    next_node = len(weights)
    while len(queue) > 1:
        left_weight, left = heapq.heappop(queue)
        right_weight, right = heapq.heappop(queue)
        children[next_node] = (left, right)
        heapq.heappush(queue, (left_weight + right_weight, next_node))
        next_node += 1
    codes = [""] * len(weights)
    pending = deque([(queue[0][1], "")])
    while pending:
        node, code = pending.popleft()
        if node in children:
            left, right = children[node]
            pending.append((left, code + "0"))
            pending.append((right, code + "1"))
        else:
            codes[node] = code
    return codes


def main(argv: list[str] | None = None) -> int:
    """Print the Huffman code of each English letter by its usual frequency."""
    parser = argparse.ArgumentParser(description="Huffman codes for the letters A-Z.")
    parser.parse_args(argv)
    for offset, code in enumerate(huffman_codes(LETTER_FREQUENCIES)):
        print(f"{chr(ord('A') + offset)}->{code} ")
    return 0


if __name__ == "__main__":
    sys.exit(main())