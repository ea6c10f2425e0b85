"""Binary tree traversals and per-level sums."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

__all__ = ["TreeNode", "inorder", "level_order", "sum_at_level"]


@dataclass
class TreeNode:
    """A binary tree node."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def inorder(root: Optional[TreeNode]) -> List[Any]:
    """Return the values in left, root, right order."""
    if root is None:
        return []
    return inorder(root.left) + [root.data] + inorder(root.right)


def _levels(root: TreeNode) -> Iterator[List[TreeNode]]:
    level = [root]
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Optional[TreeNode]) -> List[Any]:
    """Return the values breadth first, left to right within a level."""
    if root is None:
        return []
    result: List[Any] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def sum_at_level(root: Optional[TreeNode], k: int) -> Any:
    """Return the sum of the values on level ``k``, the root being level 0.

    Levels deeper than the tree sum to 0.
    """
    if root is None:
        raise ValueError("the tree is empty")
    for depth, level in enumerate(_levels(root)):
        if depth == k:
            return sum(node.data for node in level)
    return 0