"""Binary search trees, AVL trees, tree drawing, leaf-depth checks and a demo command."""

__version__ = "0.1.0"
__all__ = ["bst", "avl", "pretty", "equal_paths", "cli"]