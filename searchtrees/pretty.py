"""Draw a binary search tree as ASCII-art boxes with a placeholder legend."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from searchtrees.bst import BinarySearchTree, Node

MAX_HEIGHT = 6
BOX_WIDTH = 4
PADDING = 2
ELEMENT_WIDTH = BOX_WIDTH + PADDING


def node_depth(root: Optional[Node], node: Optional[Node]) -> int:
    """Distance of node from root, counting root as 1.

    Returns -1 if the node lies deeper than MAX_HEIGHT, and -2 if it
    cannot be reached from root through its parent links.
    """
    dist = 1
    while node is not root:
        if node is None:
            return -2
        dist += 1
        node = node.parent
        if dist > MAX_HEIGHT:
            return -1
    return dist


def subtree_height(root: Optional[Node], recursion_depth: int = 1) -> int:
    """Height of the subtree at root, never looking below MAX_HEIGHT levels."""
    if root is None:
        return 0
    if recursion_depth > MAX_HEIGHT:
        return 0
    return 1 + max(
        subtree_height(root.left, recursion_depth + 1),
        subtree_height(root.right, recursion_depth + 1),
    )


def _placeholder_box(number: int) -> str:
    return f"[{number:02d}]"


def render_tree(tree: BinarySearchTree, root: Optional[Node]) -> str:
    """Return a drawing of the subtree at root with a key/value legend."""
    if root is None:
        return "<empty tree>\n"

    printed_height = subtree_height(root)
    clipped = False
    if printed_height > MAX_HEIGHT:
        printed_height = MAX_HEIGHT
        clipped = True

    final_row_elements = 2 ** (printed_height - 1)
    final_row_width = ELEMENT_WIDTH * final_row_elements - PADDING

    placeholders: dict[Any, int] = {}
    for number, node in enumerate(
        (n for n in tree._iter_nodes() if node_depth(root, n) != -1), start=1
    ):
        placeholders.setdefault(node.key, number)

    lines: list[str] = []
    margin = final_row_width // 2 - BOX_WIDTH // 2
    padding = final_row_width - 2
    row: list[Optional[Node]] = [root]

    for level in range(printed_height):
        boxes = (
            "    " if node is None else _placeholder_box(placeholders.get(node.key, 0))
            for node in row
        )
        lines.append(" " * margin + (" " * padding).join(boxes))

        padding = (padding - BOX_WIDTH) // 2
        margin = margin - (padding // 2 + 2)

        previous = row
        row = []
        for node in previous:
            if node is None:
                row.extend((None, None))
            else:
                row.extend((node.left, node.right))

        if level < printed_height - 1:
            half = padding // 2
            parts = [" " * (margin + 2)]
            for node in previous:
                if node is None or node.left is None:
                    parts.append(" " * (half + 3))
                else:
                    parts.append("\u250c" + "\u2500" * (half - 1) + "\u2518  ")
                if node is None or node.right is None:
                    parts.append(" " * (half + 3))
                else:
                    parts.append("\u2514" + "\u2500" * (half - 1) + "\u2510  ")
                parts.append(" " * (padding + 2))
            lines.append("".join(parts))

    lines.append("")
    if clipped:
        lines.append("(deeper levels omitted due to space limitations)")

    lines.append("Tree Placeholders:------------------")
    for key in sorted(placeholders):
        found = tree.find(key)
        shown = "<error: lookup failed>" if found is None else found.value
        lines.append(f"{_placeholder_box(placeholders[key])} -> ({key}, {shown})")

    return "\n".join(lines) + "\n"


def print_tree(tree: BinarySearchTree, file: Optional[TextIO] = None) -> None:
    """Write the drawing of the whole tree, followed by a blank line."""
    out = sys.stdout if file is None else file
    out.write(render_tree(tree, tree.root))
    out.write("\n")