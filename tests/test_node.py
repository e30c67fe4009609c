import pytest

from bstmap.node import BSTNode, extract_min, find_min, remove_min


def _chain():
    r"""
            50
          /    \
        30      70
          \
           40
          /
        35
    """
    n35 = BSTNode(35, 'c')
    n40 = BSTNode(40, 'd', left=n35)
    n30 = BSTNode(30, 'b', right=n40)
    n70 = BSTNode(70, 'e')
    return BSTNode(50, 'a', left=n30, right=n70)


def test_new_node_is_leaf():
    node = BSTNode('k', 'v')
    assert node.is_leaf
    assert node.children == []
    assert repr(node) == "<BSTNode key='k'>"


def test_find_min_single_node():
    assert find_min(BSTNode(1, 'one')) == (1, 'one')


def test_find_min_left_spine():
    assert find_min(_chain()) == (30, 'b')


def test_find_min_empty_subtree():
    with pytest.raises(ValueError):
        find_min(None)
    with pytest.raises(ValueError):
        extract_min(None)


def test_remove_min_root_is_minimum():
    right = BSTNode(9, 'nine')
    root = BSTNode(5, 'five', right=right)
    assert remove_min(root) is right
    assert remove_min(BSTNode(1, 'one')) is None


def test_remove_min_splices_right_child():
    root = _chain()
    left_before = root.left.right
    rest = remove_min(root)
    # subtree root and its right child are kept
    assert rest is root
    assert rest.right.key == 70
    # 30's right child takes its place
    assert rest.left is left_before
    assert rest.left.key == 40
    assert rest.left.left.key == 35


def test_extract_min_agrees_with_find_and_remove():
    expected = find_min(_chain())
    key, value, rest = extract_min(_chain())
    assert (key, value) == expected
    assert find_min(rest) == (35, 'c')


def test_extract_min_deep_spine():
    root = BSTNode(1000, 1000)
    node = root
    for key in range(999, -1, -1):
        node.left = BSTNode(key, key)
        node = node.left
    key, value, rest = extract_min(root)
    assert (key, value) == (0, 0)
    assert find_min(rest) == (1, 1)
