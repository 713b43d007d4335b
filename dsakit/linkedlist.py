"""Singly linked lists and the classic algorithms that work on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        """Yield this node and every node after it.

        Raises ValueError if the chain loops back on itself.
        """
        seen: set[int] = set()
        node: Optional[ListNode] = self
        while node is not None:
            if id(node) in seen:
                raise ValueError("linked list contains a cycle")
            seen.add(id(node))
            yield node
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list from ``values`` and return its head (None if empty)."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    if head is None:
        return []
    return [node.val for node in head]


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return the sum the same way."""
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry > 0:
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
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node from the end and return the new head.

    Raises ValueError if ``n`` is not between 1 and the length of the list.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n is larger than the length of the list")
        fast = fast.next
    assert head is not None
    if fast is None:
        return head.next

    slow = head
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    target = slow.next
    slow.next = target.next
    target.next = None
    return head


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from ``list1`` comes first.
    """
    dummy = ListNode(-1)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list right by ``k`` places; a negative ``k`` leaves it as is."""
    if head is None or head.next is None or k < 0:
        return head
    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1
    k %= length
    if k == 0:
        return head

    new_tail = head
    for _ in range(length - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return True if following ``next`` from ``head`` never ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None

    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None if they never meet."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    previous: Optional[ListNode] = None
    while head is not None:
        following = head.next
        head.next = previous
        previous = head
        head = following
    return previous


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Return True if the values read the same in both directions.

    The list is left as it was found.
    """
    length = 0 if head is None else sum(1 for _ in head)
    half = length // 2
    second = head
    for _ in range(half + length % 2):
        second = second.next

    reversed_half = reverse_list(second)
    try:
        left, right = head, reversed_half
        for _ in range(half):
            if left.val != right.val:
                return False
            left = left.next
            right = right.next
        return True
    finally:
        reverse_list(reversed_half)


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by taking over its successor.

    Raises ValueError if ``node`` is the last node.
    """
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = successor.val
    node.next = successor.next


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two."""
    if head is None:
        return None
    length = sum(1 for _ in head)
    node = head
    for _ in range(length // 2):
        node = node.next
    return node