"""Binary trees and deepest-leaf queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


_END = object()


def build_tree(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from level-order ``values`` where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def _deepest(node: Optional[TreeNode]) -> tuple[int, Optional[TreeNode]]:
    """Return the height of ``node`` and the smallest subtree holding its deepest leaves."""
    if node is None:
        return 0, None
    left_height, left_best = _deepest(node.left)
    right_height, right_best = _deepest(node.right)
    if left_height > right_height:
        return left_height + 1, left_best
    if right_height > left_height:
        return right_height + 1, right_best
    return left_height + 1, node


def subtree_with_all_deepest(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the root of the smallest subtree that contains every deepest node."""
    return _deepest(root)[1]


def lca_deepest_leaves(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the lowest common ancestor of the deepest leaves."""
    return _deepest(root)[1]