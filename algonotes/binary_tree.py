"""Binary trees: traversals, in-order stepping, generation and reconstruction."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import itemgetter
from typing import Any, Iterable, Optional, Sequence


@dataclass(eq=False)
class Node:
    """A binary tree node that knows its parent."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    parent: Optional["Node"] = field(default=None, repr=False)


def pre_order(root: Optional[Node]) -> list:
    """Values in pre-order: node, left subtree, right subtree."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def in_order(root: Optional[Node]) -> list:
    """Values in in-order: left subtree, node, right subtree."""
    result = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def post_order(root: Optional[Node]) -> list:
    """Values in post-order: left subtree, right subtree, node."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: Optional[Node]) -> list:
    """Values level by level, each level from left to right."""
    from collections import deque

    result = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def tree_generation(values: Iterable[Any], alpha: float = 0.3) -> Optional[Node]:
    """Build a tree whose in-order traversal yields *values*.

    Each subtree of n nodes has its root at offset ``int((n - 1) * alpha)``.
    """
    if not 0 <= alpha <= 1:
        raise ValueError("alpha must lie in [0, 1]")
    nodes = [Node(value) for value in values]
    root: Optional[Node] = None
    pending: list[tuple[int, int, Optional[Node], bool]] = [(0, len(nodes), None, False)]
    while pending:
        start, n, parent, is_left = pending.pop()
        if n < 1:
            continue
        c = int((n - 1) * alpha)
        node = nodes[start + c]
        node.parent = parent
        if parent is None:
            root = node
        elif is_left:
            parent.left = node
        else:
            parent.right = node
        pending.append((start, c, node, True))
        pending.append((start + c + 1, n - 1 - c, node, False))
    return root


def left_most(node: Optional[Node]) -> Optional[Node]:
    """The left-most node of the subtree rooted at *node*."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def right_most(node: Optional[Node]) -> Optional[Node]:
    """The right-most node of the subtree rooted at *node*."""
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def next_position(node: Node) -> Optional[Node]:
    """The in-order successor of *node*, or None for the last node."""
    if node.right is not None:
        return left_most(node.right)
    last, current = node, node.parent
    while current is not None and last is not current.left:
        last, current = current, current.parent
    return current


def prev_position(node: Node) -> Optional[Node]:
    """The in-order predecessor of *node*, or None for the first node."""
    if node.left is not None:
        return right_most(node.left)
    last, current = node, node.parent
    while current is not None and last is not current.right:
        last, current = current, current.parent
    return current


def rebuild(pre: Sequence[Any], ino: Sequence[Any]) -> Optional[Node]:
    """Rebuild a tree from its pre-order and in-order traversals.

    Raise ValueError when the traversals cannot belong to one tree.
    """
    pre = list(pre)
    ino = list(ino)
    if len(pre) != len(ino):
        raise ValueError("traversals differ in length")
    if not pre:
        return None

    def build(p: int, i: int, n: int, parent: Optional[Node]) -> Node:
        try:
            pivot = ino.index(pre[p], i, i + n)
        except ValueError:
            raise ValueError(f"{pre[p]!r} is missing from the in-order range") from None
        cl = pivot - i
        cr = n - cl - 1
        node = Node(ino[pivot], parent=parent)
        if cl:
            node.left = build(p + 1, i, cl, node)
        if cr:
            node.right = build(p + 1 + cl, pivot + 1, cr, node)
        return node

    return build(0, 0, len(pre), None)


def construct_from_numbers(pairs: Iterable[tuple[int, Any]]) -> Optional[Node]:
    """Build a tree from (number, value) pairs using heap numbering from 1.

    Node k has children 2k and 2k + 1. Raise ValueError on a repeated number,
    a missing root or a node whose parent is absent.
    """
    nodes: dict[int, Node] = {}
    for number, value in pairs:
        if number in nodes:
            raise ValueError(f"number {number} appears twice")
        nodes[number] = Node(value)
    if not nodes:
        return None
    if min(nodes) != 1:
        raise ValueError("there is no node numbered 1")
    for number in sorted(nodes):
        if number == 1:
            continue
        parent = nodes.get(number // 2)
        if parent is None:
            raise ValueError(f"node {number} has no parent")
        child = nodes[number]
        child.parent = parent
        if number % 2 == 0:
            parent.left = child
        else:
            parent.right = child
    return nodes[1]


def scan_construct_from_numbers(pairs: Iterable[tuple[int, Any]]) -> Optional[Node]:
    """Like :func:`construct_from_numbers`, scanning the sorted pairs with two indices."""
    items = sorted(pairs, key=itemgetter(0))
    if not items:
        return None
    numbers = [number for number, _ in items]
    if any(a == b for a, b in zip(numbers, numbers[1:])):
        raise ValueError("a number appears twice")
    if numbers[0] != 1:
        raise ValueError("there is no node numbered 1")
    nodes = [Node(value) for _, value in items]
    p = 0
    for c in range(1, len(items)):
        half = numbers[c] // 2
        while numbers[p] < half:
            p += 1
        if numbers[p] != half:
            raise ValueError(f"node {numbers[c]} has no parent")
        child = nodes[c]
        child.parent = nodes[p]
        if numbers[c] % 2 == 0:
            nodes[p].left = child
        else:
            nodes[p].right = child
    return nodes[0]