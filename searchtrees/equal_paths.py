"""Check whether every leaf of a binary tree lies at the same depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A plain binary tree node with an integer key."""

    key: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def has_children(node: TreeNode) -> bool:
    """True if node has a left or right child."""
    return node.left is not None or node.right is not None


def equal_paths(root: Optional[TreeNode]) -> bool:
    """True if all root-to-leaf paths have the same length.

    This does not require the tree to be full; only the leaves that
    exist are compared. An empty tree has equal paths.
    """
    leaf_depth: Optional[int] = None

    def check(node: Optional[TreeNode], depth: int) -> bool:
        nonlocal leaf_depth
        if node is None:
            return True
        if not has_children(node):
            if leaf_depth is None:
                leaf_depth = depth
                return True
            return leaf_depth == depth
        return all(
            check(child, depth + 1)
            for child in (node.left, node.right)
            if child is not None
        )

    return check(root, 0)