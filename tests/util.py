"""
Helpers shared by the test suites, they look into the tree structure directly.
"""


def inorder_keys(tree_map) -> list:
    """Keys of tree_map in in-order (left, node, right) sequence."""
    keys, stack, node = [], [], tree_map._root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        keys.append(node.key)
        node = node.right
    return keys


def assert_bst(tree_map):
    """
    Check every node lies strictly inside the bounds set by its ancestors and the
    node count matches len().
    """
    count = 0
    stack = [(tree_map._root, None, None)] if tree_map._root is not None else []
    while stack:
        node, low, high = stack.pop()
        count += 1
        assert low is None or low < node.key, '{key!r} not above {low!r}'.format(key=node.key, low=low)
        assert high is None or node.key < high, '{key!r} not below {high!r}'.format(key=node.key, high=high)
        if node.left is not None:
            stack.append((node.left, low, node.key))
        if node.right is not None:
            stack.append((node.right, node.key, high))
    assert count == len(tree_map)
    keys = inorder_keys(tree_map)
    assert all(a < b for a, b in zip(keys, keys[1:]))


def build(pairs):
    """Insert pairs into a fresh BinaryTreeMap, in the given order."""
    from bstmap.tree import BinaryTreeMap
    tree_map = BinaryTreeMap()
    for key, value in pairs:
        tree_map.insert(key, value)
    return tree_map
