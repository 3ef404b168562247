"""Merging and sorting linked lists by splicing their nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Optional

from .node import ListNode


def merge_two_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists into one, reusing their nodes.

    On equal values the node from ``first`` comes before the one from
    ``second``.
    """
    dummy = ListNode(-1)
    tail = dummy
    while first is not None and second is not None:
        if first.val > second.val:
            tail.next = second
            second = second.next
        else:
            tail.next = first
            first = first.next
        tail = tail.next
    tail.next = second if first is None else first
    return dummy.next


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists, pairing them off from the front."""
    queue = deque(lists)
    if not queue:
        return None
    while len(queue) > 1:
        first = queue.popleft()
        second = queue.popleft()
        queue.append(merge_two_lists(first, second))
    return queue[0]


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list by merge sort, reusing its nodes."""
    if head is None or head.next is None:
        return head
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    right = sort_list(slow.next)
    slow.next = None
    left = sort_list(head)
    return merge_two_lists(right, left)