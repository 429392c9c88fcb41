"""A self-balancing AVL tree built on the plain binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from searchtrees.bst import BinarySearchTree, Node


@dataclass(eq=False)
class AVLNode(Node):
    """A tree node that also records its balance factor (left minus right height)."""

    balance: int = 0

    def find_balance(self) -> int:
        """Compute the balance factor from the heights of both subtrees."""
        return self.subtree_height(self.left) - self.subtree_height(self.right)

    @staticmethod
    def subtree_height(node: Optional[Node]) -> int:
        """Height of the subtree at node; an empty subtree has height 0."""
        if node is None:
            return 0
        return 1 + max(
            AVLNode.subtree_height(node.left), AVLNode.subtree_height(node.right)
        )


class AVLTree(BinarySearchTree):
    """A binary search tree kept height-balanced after every change."""

    def insert(self, key: Any, value: Any) -> None:
        """Add key with value, overwriting the value if key is present."""
        if self.root is None:
            self.root = AVLNode(key, value)
            return

        current: Optional[Node] = self.root
        parent = self.root
        while current is not None:
            parent = current
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                current.value = value
                return

        node = AVLNode(key, value, parent)
        if key < parent.key:
            parent.left = node
        else:
            parent.right = node

        self._rebalance_upwards(parent)

    def remove(self, key: Any) -> None:
        """Remove key from the tree; a missing key is ignored.

        A node with two children is first swapped with its predecessor.
        """
        node = self._find_node(key)
        if node is None:
            return
        parent = self._detach(node)
        self._rebalance_upwards(parent)

    def _rebalance_upwards(self, node: Optional[Node]) -> None:
        current = node
        while current is not None:
            current = self._rebalance(current)
            current = current.parent

    def _node_swap(self, n1: Optional[Node], n2: Optional[Node]) -> None:
        super()._node_swap(n1, n2)
        if n1 is None or n2 is None or n1 is n2:
            return
        n1.balance, n2.balance = n2.balance, n1.balance

    def _rotate_right(self, node: AVLNode) -> AVLNode:
        pivot = node.left
        if pivot is None:
            return node
        parent = node.parent
        inner = pivot.right

        pivot.parent = parent
        pivot.right = node
        if parent is None:
            self.root = pivot
        elif parent.left is node:
            parent.left = pivot
        else:
            parent.right = pivot

        node.parent = pivot
        node.left = inner
        if inner is not None:
            inner.parent = node

        pivot.balance = pivot.find_balance()
        node.balance = node.find_balance()
        if parent is not None:
            parent.balance = parent.find_balance()
        return pivot

    def _rotate_left(self, node: AVLNode) -> AVLNode:
        pivot = node.right
        if pivot is None:
            return node
        parent = node.parent
        inner = pivot.left

        pivot.parent = parent
        if parent is None:
            self.root = pivot
        elif parent.left is node:
            parent.left = pivot
        else:
            parent.right = pivot
        pivot.left = node

        node.parent = pivot
        node.right = inner
        if inner is not None:
            inner.parent = node

        pivot.balance = pivot.find_balance()
        node.balance = node.find_balance()
        if parent is not None:
            parent.balance = parent.find_balance()
        return pivot

    def _rebalance(self, node: AVLNode) -> AVLNode:
        balance = node.find_balance()
        node.balance = balance

        if balance > 1:
            if node.left.balance < 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance < -1:
            if node.right.balance > 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node