from hypothesis import given
from hypothesis import strategies as st

from searchtrees.equal_paths import TreeNode, equal_paths, has_children


def _perfect(depth, counter=None):
    counter = counter if counter is not None else [0]
    counter[0] += 1
    node = TreeNode(counter[0])
    if depth > 0:
        node.left = _perfect(depth - 1, counter)
        node.right = _perfect(depth - 1, counter)
    return node


def _leaves(node):
    if node is None:
        return []
    if not has_children(node):
        return [node]
    return _leaves(node.left) + _leaves(node.right)


def test_single_node():
    assert equal_paths(TreeNode(1))


def test_only_left_child():
    assert equal_paths(TreeNode(1, TreeNode(2)))


def test_two_children():
    assert equal_paths(TreeNode(1, TreeNode(2), TreeNode(3)))


def test_only_right_child():
    assert equal_paths(TreeNode(1, None, TreeNode(3)))


def test_uneven_leaves():
    root = TreeNode(1, TreeNode(2, None, TreeNode(4)), TreeNode(3))
    assert not equal_paths(root)


def test_empty_tree():
    assert equal_paths(None)


def test_has_children():
    assert not has_children(TreeNode(1))
    assert has_children(TreeNode(1, TreeNode(2)))
    assert has_children(TreeNode(1, None, TreeNode(3)))


@given(st.integers(0, 6))
def test_perfect_trees_have_equal_paths(depth):
    assert equal_paths(_perfect(depth))


@given(st.integers(0, 6), st.data())
def test_one_deeper_leaf_breaks_equality(depth, data):
    root = _perfect(depth)
    leaves = _leaves(root)
    leaf = data.draw(st.sampled_from(leaves))
    if data.draw(st.booleans()):
        leaf.left = TreeNode(-1)
    else:
        leaf.right = TreeNode(-1)
    expected = len(leaves) == 1
    assert equal_paths(root) == expected


@given(st.integers(1, 6))
def test_chain_has_equal_paths(length):
    root = TreeNode(0)
    node = root
    for key in range(1, length):
        node.right = TreeNode(key)
        node = node.right
    assert equal_paths(root)