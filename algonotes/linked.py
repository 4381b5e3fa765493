"""Singly linked lists: reversal, cycle detection, middles and k-th from the end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    value: Any
    next: Optional["Node"] = None


def build_list(values: Iterable[Any]) -> Optional[Node]:
    """Link *values* in order and return the head, or None if there are none."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _nodes(head: Optional[Node]):
    while head is not None:
        yield head
        head = head.next


def to_list(head: Optional[Node]) -> list:
    """Return the values of an acyclic list in order."""
    return [node.value for node in _nodes(head)]


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the list in place and return the new head."""
    prev: Optional[Node] = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def has_cycle(head: Optional[Node]) -> bool:
    """Detect a cycle with a hare moving two steps per tortoise step."""
    hare = tortoise = head
    while hare is not None and hare.next is not None and tortoise is not None:
        hare = hare.next.next
        tortoise = tortoise.next
        if hare is tortoise:
            return True
    return False


def middle_fast_slow(head: Optional[Node]) -> Any:
    """Return the value at position ``n // 2`` using a fast and a slow pointer."""
    if head is None:
        raise ValueError("empty list has no middle")
    fast: Optional[Node] = head
    slow = head
    while fast is not None:
        fast = fast.next
        if fast is None:
            break
        fast = fast.next
        slow = slow.next  # type: ignore[assignment]
    return slow.value


def middle_by_count(head: Optional[Node]) -> Any:
    """Return the value at position ``n // 2`` by counting the list first."""
    if head is None:
        raise ValueError("empty list has no middle")
    n = sum(1 for _ in _nodes(head))
    node = head
    for _ in range(n // 2):
        node = node.next  # type: ignore[assignment]
    return node.value


def _advance(node: Optional[Node], steps: int) -> tuple[Optional[Node], bool]:
    """Move *steps* nodes forward; the flag is False if the end came first."""
    for _ in range(steps):
        if node is None:
            return None, False
        node = node.next
    return node, True


def _walk_together(front: Optional[Node], back: Optional[Node]) -> Optional[Node]:
    while front is not None:
        front = front.next
        back = back.next  # type: ignore[union-attr]
    return back


def count_and_find(head: Optional[Node], k: int) -> Optional[Node]:
    """Return the k-th node from the end (1-based) by counting, or None."""
    if k < 1:
        return None
    n = sum(1 for _ in _nodes(head))
    if n < k:
        return None
    node = head
    for _ in range(n - k):
        node = node.next  # type: ignore[union-attr]
    return node


def front_and_back(head: Optional[Node], k: int) -> Optional[Node]:
    """Return the k-th node from the end with two pointers k apart, or None."""
    if k < 1:
        return None
    front, ok = _advance(head, k)
    if not ok:
        return None
    return _walk_together(front, head)


def updated_front_and_back(head: Optional[Node], k: int) -> Optional[Node]:
    """Two pointers where the back pointer jumps forward in strides of k."""
    if k < 1:
        return None
    front, ok = _advance(head, k)
    if not ok:
        return None
    back = head
    i = 0
    position = front
    while position is not None:
        if i == k:
            i = 0
            back = front
            front = position
        position = position.next
        i += 1
    return _walk_together(front, back)


def mod_updated_front_and_back(head: Optional[Node], k: int) -> Optional[Node]:
    """Two pointers updated every k nodes while counting the list length."""
    if k < 1:
        return None
    n = 0
    front = head
    back: Optional[Node] = None
    for position in _nodes(head):
        if n % k == 0:
            back = front
            front = position
        n += 1
    if n < k:
        return None
    if n == k:
        return head
    return _walk_together(front, back)