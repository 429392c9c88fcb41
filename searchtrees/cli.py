"""Command-line demonstrations of the search trees and the equal-paths check."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from searchtrees.avl import AVLTree
from searchtrees.bst import BinarySearchTree
from searchtrees.equal_paths import TreeNode, equal_paths


def _demo_tree(tree: BinarySearchTree, title: str, out: TextIO) -> None:
    tree.insert("a", 1)
    tree.insert("b", 2)

    out.write(f"{title} contents:\n")
    for key, value in tree.items():
        out.write(f"{key} {value}\n")

    if "b" in tree:
        out.write("Found b\n")
    else:
        out.write("Did not find b\n")

    out.write("Erasing b\n")
    tree.remove("b")


def bst_demo(out: Optional[TextIO] = None) -> None:
    """Fill a plain and an AVL tree, list them, look up and erase a key."""
    out = sys.stdout if out is None else out
    _demo_tree(BinarySearchTree(), "Binary Search Tree", out)
    out.write("\n")
    _demo_tree(AVLTree(), "AVLTree", out)


def _sample_trees() -> list[tuple[str, TreeNode]]:
    single = TreeNode(1)

    left_only = TreeNode(1, left=TreeNode(2))

    full = TreeNode(1, left=TreeNode(2), right=TreeNode(3))

    right_only = TreeNode(1, right=TreeNode(3))

    uneven = TreeNode(
        1,
        left=TreeNode(2, right=TreeNode(4)),
        right=TreeNode(3),
    )

    return [
        ("Test1", single),
        ("Test2", left_only),
        ("Test3", full),
        ("Test4", right_only),
        ("Test5", uneven),
    ]


def equal_paths_demo(out: Optional[TextIO] = None) -> None:
    """Run the equal-paths check on five small trees, printing 1 or 0 for each."""
    out = sys.stdout if out is None else out
    for name, root in _sample_trees():
        out.write(f"{name}: {int(equal_paths(root))}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen demonstration, or both when none is named."""
    parser = argparse.ArgumentParser(
        prog="searchtrees",
        description="Demonstrate the binary search trees and the equal-paths check.",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("bst", "equal-paths", "all"),
        default="all",
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)

    if args.demo in ("bst", "all"):
        bst_demo(sys.stdout)
    if args.demo == "all":
        sys.stdout.write("\n")
    if args.demo in ("equal-paths", "all"):
        equal_paths_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())