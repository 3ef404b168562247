"""Two-pointer queries on linked lists: cycles, middles and intersections."""

from __future__ import annotations

from typing import Optional

from .node import ListNode, walk


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return whether the list starting at ``head`` loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if fast is slow:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    probe = head
    while probe is not slow:
        probe = probe.next
        slow = slow.next
    return slow


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    length_a = sum(1 for _ in walk(head_a))
    length_b = sum(1 for _ in walk(head_b))
    node_a, node_b = head_a, head_b
    for _ in range(length_a - length_b):
        node_a = node_a.next
    for _ in range(length_b - length_a):
        node_b = node_b.next
    while node_a is not node_b:
        node_a = node_a.next
        node_b = node_b.next
    return node_a