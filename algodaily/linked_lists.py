"""Singly linked list node type and in-place list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A singly linked list node. Nodes compare by identity."""

    val: int = 0
    next: ListNode | None = None


def build_list(values: Iterable[int]) -> ListNode | None:
    """Link the values into a list and return its head."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of the list from head to tail."""
    return [node.val for node in _nodes(head)]


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    previous = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes in place and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = head.next
    previous = None
    current = head
    while current is not None and current.next is not None:
        first, second = current, current.next
        first.next = second.next
        second.next = first
        if previous is not None:
            previous.next = second
        previous = first
        current = first.next
    return new_head


def reorder_list(head: ListNode | None) -> None:
    """Reorder in place to first, last, second, second-to-last, and so on."""
    if head is None or head.next is None:
        return
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse_list(slow.next)
    slow.next = None
    first = head
    while second is not None:
        after_first = first.next
        after_second = second.next
        first.next = second
        second.next = after_first
        first = after_first
        second = after_second