"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic linked list as a Python list."""
    values = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.next
    return values


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list loops back on itself (tortoise and hare)."""
    slow = head
    fast = head
    while fast is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
            slow = slow.next
        if fast is slow:
            return True
    return False


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return the sum the same way."""
    dummy = ListNode(-1)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def merge_two_lists(
    left: Optional[ListNode], right: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``left`` first."""
    if left is None:
        return right
    if right is None:
        return left
    dummy = ListNode(-1)
    tail = dummy
    while left is not None and right is not None:
        if left.val <= right.val:
            tail.next = left
            left = left.next
        else:
            tail.next = right
            right = right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def merge_nodes(head: Optional[ListNode]) -> Optional[ListNode]:
    """Replace each run of nodes between zeros by one node holding their sum.

    The list must start and end with a zero.
    """
    if head is None:
        raise ValueError("list must not be empty")
    dummy = ListNode()
    tail = dummy
    zero = head
    while zero.next is not None:
        first = zero.next
        total = 0
        node = first
        while node.val != 0:
            total += node.val
            node = node.next
            if node is None:
                raise ValueError("list must end with a zero")
        first.val = total
        tail.next = first
        tail = first
        zero = node
    tail.next = None
    return dummy.next


def _first_middle(head: ListNode) -> ListNode:
    slow = head
    fast = head
    while fast.next is not None:
        fast = fast.next
        if fast.next is not None:
            fast = fast.next
            slow = slow.next
    return slow


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the values read the same both ways; the list is left intact."""
    if head is None:
        return True
    middle = _first_middle(head)
    second = reverse_list(middle.next)
    middle.next = None

    result = True
    a, b = head, second
    while a is not None and b is not None:
        if a.val != b.val:
            result = False
            break
        a, b = a.next, b.next

    middle.next = reverse_list(second)
    return result


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list k nodes at a time; a short tail stays as it is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    remaining = len(to_list(head))
    dummy = ListNode(0, head)
    prev_tail = dummy
    curr = head
    while k > 1 and remaining >= k:
        group_head = curr
        prev = None
        for _ in range(k):
            curr.next, prev, curr = prev, curr, curr.next
        prev_tail.next = prev
        group_head.next = curr
        prev_tail = group_head
        remaining -= k
    return dummy.next


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for even lengths, the second of the two middles."""
    slow = head
    fast = head
    while fast is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
            slow = slow.next
    return slow