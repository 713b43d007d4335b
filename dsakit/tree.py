"""Binary trees and the classic traversals and queries over them."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree. Nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order listing where None marks a missing child.

    Returns the root, or None if the listing is empty or starts with None.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    parents: deque[TreeNode] = deque([root])
    while parents:
        parent = parents.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(parent, side, child)
                parents.append(child)
    return root


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left-node-right order.

    Uses threaded (Morris) traversal; the tree is restored before returning.
    """
    values: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            values.append(current.val)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            values.append(current.val)
            current = current.right
    return values


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in node-left-right order.

    Uses threaded (Morris) traversal; the tree is restored before returning.
    """
    values: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            values.append(current.val)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            values.append(current.val)
            current = current.left
        else:
            predecessor.right = None
            current = current.right
    return values


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left-right-node order."""
    values: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    values.reverse()
    return values


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and the same values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values level by level, each level from left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue: deque[TreeNode] = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the levels, alternating left-to-right and right-to-left."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(level_order(root))
    ]


def _balanced_height(node: Optional[TreeNode]) -> int:
    """Height of ``node``, or -1 if any subtree is unbalanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left == -1:
        return -1
    right = _balanced_height(node.right)
    if right == -1 or abs(left - right) > 1:
        return -1
    return max(left, right) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True if every node's subtrees differ in height by at most one."""
    return _balanced_height(root) != -1


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node having both ``p`` and ``q`` as descendants.

    A node counts as its own descendant. Nodes are matched by identity.
    """
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def width_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the widest level, counting the gaps between its end nodes.

    An empty tree has width 0.
    """
    if root is None:
        return 0
    widest = 0
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        first = queue[0][1]
        widest = max(widest, queue[-1][1] - first + 1)
        for _ in range(len(queue)):
            node, index = queue.popleft()
            index -= first
            if node.left is not None:
                queue.append((node.left, 2 * index + 1))
            if node.right is not None:
                queue.append((node.right, 2 * index + 2))
    return widest


def vertical_traversal(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the columns from left to right.

    Within a column nodes are ordered by depth, and nodes sharing a column
    and a depth by value.
    """
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue: deque[tuple[TreeNode, int, int]] = deque()
    if root is not None:
        queue.append((root, 0, 0))
    while queue:
        node, x, y = queue.popleft()
        columns[x][y].append(node.val)
        if node.left is not None:
            queue.append((node.left, x - 1, y + 1))
        if node.right is not None:
            queue.append((node.right, x + 1, y + 1))

    result = []
    for x in sorted(columns):
        column: list[int] = []
        for y in sorted(columns[x]):
            column.extend(sorted(columns[x][y]))
        result.append(column)
    return result