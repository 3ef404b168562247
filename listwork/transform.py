"""In-place transformations of linked lists."""

from __future__ import annotations

from typing import Optional

from .node import ListNode, walk


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Return whether the values read the same both ways.

    The list is split and its second half reversed while comparing, and
    restored before returning.
    """
    if head is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        fast = fast.next.next
        slow = slow.next
    second = reverse_list(slow.next)
    slow.next = None
    try:
        left, right = head, second
        while right is not None:
            if left.val != right.val:
                return False
            left = left.next
            right = right.next
        return True
    finally:
        slow.next = reverse_list(second)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node from the end and return the head.

    When ``n`` is at least the length of the list, the head is removed.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if head is None:
        raise ValueError("cannot remove from an empty list")
    fast: Optional[ListNode] = head
    for _ in range(n + 1):
        if fast is None:
            return head.next
        fast = fast.next
    slow = head
    while fast is not None:
        slow = slow.next
        fast = fast.next
    slow.next = slow.next.next
    return head


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list, given only the node itself."""
    if node.next is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = node.next.val
    node.next = node.next.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right and return the new head."""
    if k < 0:
        raise ValueError("k must not be negative")
    nodes = walk(head)
    length = 0
    tail: Optional[ListNode] = None
    for tail in nodes:
        length += 1
    if length <= 1:
        return head
    k %= length
    if k == 0:
        return head
    new_tail = head
    for _ in range(length - k - 1):
        new_tail = new_tail.next
    tail.next = head
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop nodes equal to their predecessor, leaving each run once."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Put nodes below ``x`` before the rest, keeping relative order."""
    low_dummy = ListNode(-1)
    high_dummy = ListNode(-1)
    low, high = low_dummy, high_dummy
    for node in list(walk(head)):
        if node.val < x:
            low.next = node
            low = node
        else:
            high.next = node
            high = node
    low.next = high_dummy.next
    high.next = None
    return low_dummy.next