import io

from searchtrees.bst import BinarySearchTree, Node
from searchtrees.pretty import (
    MAX_HEIGHT,
    node_depth,
    print_tree,
    render_tree,
    subtree_height,
)


def _tree(keys):
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key, key * 2)
    return tree


def _legend(text):
    _, _, legend = text.partition("Tree Placeholders:------------------\n")
    return [line for line in legend.splitlines() if line]


def test_empty_tree_text():
    tree = BinarySearchTree()
    assert render_tree(tree, tree.root) == "<empty tree>\n"


def test_single_node_rendering():
    tree = BinarySearchTree()
    tree.insert("a", 1)
    text = render_tree(tree, tree.root)
    assert text == "[01]\n\nTree Placeholders:------------------\n[01] -> (a, 1)\n"


def test_three_node_tree_draws_branches():
    tree = _tree([2, 1, 3])
    text = render_tree(tree, tree.root)
    assert "[01]  [03]" in text
    assert "\u250c\u2518  \u2514\u2510" in text
    assert text.splitlines()[0].strip() == "[02]"


def test_legend_lists_every_node_in_order():
    keys = [8, 4, 12, 2, 6, 10, 14, 1]
    tree = _tree(keys)
    legend = _legend(render_tree(tree, tree.root))
    assert len(legend) == len(keys)
    for number, key in enumerate(sorted(keys), start=1):
        assert legend[number - 1] == f"[{number:02d}] -> ({key}, {key * 2})"


def test_missing_left_child_draws_no_left_branch():
    tree = _tree([1, 2])
    text = render_tree(tree, tree.root)
    assert "\u250c" not in text
    assert "\u2514" in text


def test_deep_tree_legend_stops_at_max_height():
    tree = _tree(range(10))
    legend = _legend(render_tree(tree, tree.root))
    assert len(legend) == MAX_HEIGHT


def test_print_tree_adds_trailing_newline():
    tree = _tree([5, 3, 7])
    buffer = io.StringIO()
    print_tree(tree, buffer)
    assert buffer.getvalue() == render_tree(tree, tree.root) + "\n"


def test_print_tree_empty():
    buffer = io.StringIO()
    print_tree(BinarySearchTree(), buffer)
    assert buffer.getvalue() == "<empty tree>\n\n"


def test_node_depth_root_and_child():
    tree = _tree([5, 3, 7])
    assert node_depth(tree.root, tree.root) == 1
    assert node_depth(tree.root, tree.root.left) == 2


def test_node_depth_unreachable_node():
    tree = _tree([5, 3])
    stray = Node(99, 0)
    assert node_depth(tree.root, stray) == -2


def test_node_depth_too_deep():
    tree = _tree(range(10))
    deepest = tree.find(9)
    assert node_depth(tree.root, deepest) == -1
    assert node_depth(tree.root, tree.find(MAX_HEIGHT - 1)) == MAX_HEIGHT


def test_subtree_height_is_capped():
    tree = _tree(range(10))
    assert subtree_height(tree.root) == MAX_HEIGHT
    assert subtree_height(None) == 0


def test_subtree_height_small_tree():
    tree = _tree([2, 1, 3])
    assert subtree_height(tree.root) == 2
    assert subtree_height(tree.root.left) == 1