"""An unbalanced binary search tree keyed by any totally ordered type."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A tree node holding one key/value pair and links to its neighbours."""

    key: Any
    value: Any
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)

    @property
    def item(self) -> tuple[Any, Any]:
        """The node's (key, value) pair."""
        return (self.key, self.value)


class BinarySearchTree:
    """A mapping stored as a binary search tree that is never rebalanced."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, key: Any, value: Any) -> None:
        """Add key with value, overwriting the value if key is present."""
        if self.root is None:
            self.root = Node(key, value)
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

        node = Node(key, value, parent)
        if key < parent.key:
            parent.left = node
        else:
            parent.right = node

    def remove(self, key: Any) -> None:
        """Remove key from the tree; a missing key is ignored.

        A node with two children is first swapped with its predecessor.
        """
        node = self._find_node(key)
        if node is not None:
            self._detach(node)

    def clear(self) -> None:
        """Remove every entry from the tree."""
        self.root = None

    def _detach(self, node: Node) -> Optional[Node]:
        """Unlink node from the tree and return its final parent."""
        if node.left is not None and node.right is not None:
            self._node_swap(node, self.predecessor(node))

        child = node.left if node.left is not None else node.right
        parent = node.parent

        if child is not None:
            child.parent = parent

        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

        node.parent = node.left = node.right = None
        return parent

    def _node_swap(self, n1: Optional[Node], n2: Optional[Node]) -> None:
        """Exchange the positions of two nodes in the tree."""
        if n1 is n2 or n1 is None or n2 is None:
            return

        n1p, n1r, n1l = n1.parent, n1.right, n1.left
        n1_is_left = n1p is not None and n1p.left is n1
        n2p, n2r, n2l = n2.parent, n2.right, n2.left
        n2_is_left = n2p is not None and n2p.left is n2

        n1.parent, n2.parent = n2.parent, n1.parent
        n1.left, n2.left = n2.left, n1.left
        n1.right, n2.right = n2.right, n1.right

        if n1r is n2:
            n2.right = n1
            n1.parent = n2
        elif n2r is n1:
            n1.right = n2
            n2.parent = n1
        elif n1l is n2:
            n2.left = n1
            n1.parent = n2
        elif n2l is n1:
            n1.left = n2
            n2.parent = n1

        if n1p is not None and n1p is not n2:
            if n1_is_left:
                n1p.left = n2
            else:
                n1p.right = n2
        if n1r is not None and n1r is not n2:
            n1r.parent = n2
        if n1l is not None and n1l is not n2:
            n1l.parent = n2

        if n2p is not None and n2p is not n1:
            if n2_is_left:
                n2p.left = n1
            else:
                n2p.right = n1
        if n2r is not None and n2r is not n1:
            n2r.parent = n1
        if n2l is not None and n2l is not n1:
            n2l.parent = n1

        if self.root is n1:
            self.root = n2
        elif self.root is n2:
            self.root = n1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_balanced(self) -> bool:
        """True if no node's subtrees differ in height by more than one."""
        return self.height(self.root) != -1

    def empty(self) -> bool:
        """True if the tree holds no entries."""
        return self.root is None

    def find(self, key: Any) -> Optional[Node]:
        """Return the node holding key, or None."""
        return self._find_node(key)

    def smallest(self) -> Optional[Node]:
        """Return the node with the smallest key, or None if empty."""
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def predecessor(node: Node) -> Optional[Node]:
        """Return the largest node in node's left subtree, or None."""
        current = node.left
        if current is None:
            return None
        while current.right is not None:
            current = current.right
        return current

    def height(self, node: Optional[Node]) -> int:
        """Height of the subtree at node, or -1 if it is not balanced."""
        if node is None:
            return 0
        left = self.height(node.left)
        right = self.height(node.right)
        if left == -1 or right == -1:
            return -1
        if abs(left - right) > 1:
            return -1
        return 1 + max(left, right)

    def _find_node(self, key: Any) -> Optional[Node]:
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    @staticmethod
    def _successor(node: Node) -> Optional[Node]:
        if node.right is not None:
            node = node.right
            while node.left is not None:
                node = node.left
            return node
        parent = node.parent
        while parent is not None and parent.left is not node:
            node = parent
            parent = parent.parent
        return parent

    def _iter_nodes(self) -> Iterator[Node]:
        node = self.smallest()
        while node is not None:
            yield node
            node = self._successor(node)

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------
    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in ascending key order."""
        for node in self._iter_nodes():
            yield node.item

    def __iter__(self) -> Iterator[Any]:
        for node in self._iter_nodes():
            yield node.key

    def __contains__(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def __getitem__(self, key: Any) -> Any:
        node = self._find_node(key)
        if node is None:
            raise KeyError("Invalid key")
        return node.value

    def __len__(self) -> int:
        return sum(1 for _ in self._iter_nodes())

    def __bool__(self) -> bool:
        return not self.empty()