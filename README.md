# searchtrees

Ordered key/value containers built on binary search trees:

- `searchtrees.bst.BinarySearchTree`: a plain, unbalanced binary search tree.
- `searchtrees.avl.AVLTree`: a self-balancing AVL tree with the same interface.
- `searchtrees.pretty`: draws up to six levels of a tree with box-drawing
  characters, with a placeholder-to-(key, value) legend underneath.
- `searchtrees.equal_paths`: checks whether every leaf of a simple binary
  tree sits at the same depth.
- `searchtrees.cli`: a small demonstration command.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the trees

```python
from searchtrees.avl import AVLTree

tree = AVLTree()
for key, value in [("c", 3), ("a", 1), ("b", 2)]:
    tree.insert(key, value)

tree.insert("a", 10)        # an existing key has its value replaced
print(list(tree.items()))   # [('a', 10), ('b', 2), ('c', 3)]
print(list(tree))           # ['a', 'b', 'c']
print("b" in tree)          # True
print(tree["b"])            # 2
print(tree.is_balanced())   # True

tree.remove("b")            # removing a missing key does nothing
print(len(tree))            # 2
```

Keys may be of any type whose values can be compared with `<` and `>`.

- `insert(key, value)` adds a key, or replaces the value of a key already present.
- `remove(key)` deletes a key; a node with two children is first swapped with
  its in-order predecessor. A missing key is ignored.
- `tree[key]` returns the value and raises `KeyError` for a missing key.
- `find(key)` returns the `Node` holding the key, or `None`. A node has
  `key`, `value`, `parent`, `left` and `right` attributes and an `item`
  property giving `(key, value)`.
- `items()` yields `(key, value)` pairs in ascending key order; iterating over
  the tree itself yields the keys in the same order.
- `smallest()` returns the node with the smallest key, and the static method
  `BinarySearchTree.predecessor(node)` the largest node in a node's left subtree.
- `clear()` empties the tree, `empty()` tells whether it is empty, and a tree
  is false in a boolean context when empty. `len(tree)` counts the entries by
  walking the tree.
- `is_balanced()` reports whether the heights of every node's two subtrees
  differ by at most one; `height(node)` gives the height of a subtree, or `-1`
  if it is not balanced.

`BinarySearchTree` never rebalances, so inserting keys in sorted order
produces a chain. `AVLTree` rebalances with rotations after every insertion
and removal; its nodes are `AVLNode`s, which also carry a `balance` attribute
(left height minus right height).

## Drawing a tree

```python
from searchtrees.avl import AVLTree
from searchtrees.pretty import print_tree, render_tree

tree = AVLTree()
for n in range(1, 8):
    tree.insert(n, str(n))

print_tree(tree)                        # writes to standard output
text = render_tree(tree, tree.root)     # or get the drawing as a string
```

`render_tree(tree, root)` draws the subtree at `root`; an empty subtree is
drawn as `<empty tree>`. `print_tree(tree, file=None)` writes the drawing of
the whole tree, followed by a blank line, to `file` or to standard output.

Each node is shown as a numbered box such as `[03]`; the legend below the
drawing maps each number to its `(key, value)` pair. Trees deeper than six
levels are clipped, with a note saying so.

## Checking leaf depths

```python
from searchtrees.equal_paths import TreeNode, equal_paths

root = TreeNode(1, TreeNode(2), TreeNode(3))
print(equal_paths(root))                          # True
print(equal_paths(TreeNode(1, TreeNode(2, right=TreeNode(4)), TreeNode(3))))  # False
```

The tree need not be full: only the leaves that exist are compared. An empty
tree (`None`) counts as having equal paths. `has_children(node)` tells whether
a node has any child.

## Demo

```
searchtrees-demo
```

runs a short walkthrough: it fills a plain tree and an AVL tree, lists their
contents, looks up and removes a key, and then prints the result of the
equal-paths check (`1` or `0`) on five small trees. Pass `bst` or
`equal-paths` to run only one of the two parts (`all` is the default).

## What it does not do

The trees live in memory only: there is no saving to or loading from files,
and the command runs fixed demonstrations rather than taking trees as input.