"""
Node of the binary search tree and the helpers used by successor promotion.
- BSTNode: one key-value pair plus two exclusively owned children.
- find_min / remove_min / extract_min: locate and excise the minimum of a subtree.
"""


class BSTNode(object):
    """
    A leaf when created. Every key in the left subtree is strictly smaller than `key`,
    every key in the right subtree strictly greater.
    """
    __slots__ = ('key', 'value', 'left', 'right')

    def __init__(self, key, value, left=None, right=None):
        self.key = key
        self.value = value
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def children(self) -> list:
        return [child for child in (self.left, self.right) if child is not None]

    def __repr__(self):
        return '<{name} key={key!r}>'.format(name=self.__class__.__name__, key=self.key)


def find_min(node: BSTNode) -> tuple:
    """
    :return: (key, value) of the left-most node in the subtree rooted at `node`.
    """
    if node is None:
        raise ValueError('find_min requires a non-empty subtree')
    while node.left is not None:
        node = node.left
    return node.key, node.value


def remove_min(node: BSTNode):
    """
    Remove the node find_min() would locate.
    :return: root of the remaining subtree, None if nothing is left.
    """
    return extract_min(node)[2]


def extract_min(node: BSTNode) -> tuple:
    """
    find_min() and remove_min() in a single descent.
    :return: (key, value, remaining subtree)
    """
    if node is None:
        raise ValueError('extract_min requires a non-empty subtree')
    if node.left is None:
        # subtree root is the minimum, its right child takes its place
        return node.key, node.value, node.right

    parent, current = node, node.left
    while current.left is not None:
        parent, current = current, current.left
    parent.left = current.right
    return current.key, current.value, node
