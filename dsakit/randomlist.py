"""Linked lists whose nodes also carry an arbitrary ``random`` link."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class RandomNode:
    """A list node with an extra link to any node of the list, or None."""

    val: int
    next: Optional["RandomNode"] = None
    random: Optional["RandomNode"] = None


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of the list, with ``next`` and ``random`` links remapped."""
    copies: dict[Optional[RandomNode], Optional[RandomNode]] = {None: None}
    node = head
    while node is not None:
        copies[node] = RandomNode(node.val)
        node = node.next

    node = head
    while node is not None:
        copy = copies[node]
        copy.next = copies[node.next]
        copy.random = copies[node.random]
        node = node.next
    return copies[head]