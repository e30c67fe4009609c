"""
This file include the concrete implementation of the ordered map, an unbalanced
binary search tree. No rebalancing is performed, so the shape of the tree only
depends on insertion order and a sorted insertion sequence degenerates it into
a linked list. Every descent is iterative, deep trees never hit the recursion limit.
"""
import logging

from bstmap.constants import DEFAULT_LOGGER_NAME
from bstmap.node import BSTNode, extract_min

logger = logging.getLogger(DEFAULT_LOGGER_NAME)

# marks a lookup miss, so that a stored None stays a legal value
_MISSING = object()


class KeyNotFoundError(KeyError):
    """Raise when a key is required to exist in the map but it doesn't"""

    def __init__(self, key):
        super(KeyNotFoundError, self).__init__(key)
        self.key = key

    def __str__(self):
        return '{key!r} not found'.format(key=self.key)


class BinaryTreeMap(object):
    """
    In-memory ordered key-value map. Keys must be totally ordered with each other,
    values are opaque. The map exclusively owns its nodes and is mutated in place,
    mutating methods hand the map back so calls can be chained.
    """
    NODE = BSTNode

    def __init__(self):
        self._root = None
        self._size = 0

    def _path_to(self, key):
        """
        Descend from root towards key.
        :return: (node holding key or None, ancestry) where ancestry is the list of
                 (parent, side) pairs walked through, side is 'left' or 'right'.
        """
        current = self._root
        ancestry = []
        while current is not None:
            if key < current.key:
                ancestry.append((current, 'left'))
                current = current.left
            elif key > current.key:
                ancestry.append((current, 'right'))
                current = current.right
            else:
                break
        return current, ancestry

    def _relink(self, ancestry, subtree):
        """Hang subtree in the slot the last step of ancestry points at."""
        if ancestry:
            parent, side = ancestry[-1]
            setattr(parent, side, subtree)
        else:
            self._root = subtree

    def _lookup(self, key):
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current.value
        return _MISSING

    def get(self, key, default=None):
        """
        :param key: key expected to be searched in the map.
        :param default: if key doesn't exist, return default.
        :return: value corresponding to the key if key exists.
        """
        value = self._lookup(key)
        return default if value is _MISSING else value

    def get_result(self, key):
        """
        Same lookup as get(), but a miss raises KeyNotFoundError instead of
        returning a default, so a stored None can't be mistaken for a miss.
        """
        value = self._lookup(key)
        if value is _MISSING:
            raise KeyNotFoundError(key)
        return value

    def insert(self, key, value):
        """
        :param key: key to be inserted, a new leaf is created if it doesn't exist yet.
        :param value: value to be set corresponding to the key, replaces the old one if
                      key has existed.
        """
        node, ancestry = self._path_to(key)
        if node is not None:
            node.value = value
        else:
            self._relink(ancestry, self.NODE(key, value))
            self._size += 1
        return self

    @classmethod
    def _unlink(cls, node):
        """
        :return: the subtree taking the place of node once node is removed.
        """
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        # two children: promote the in-order successor
        successor_key, successor_value, right = extract_min(node.right)
        logger.debug('Promote successor {successor!r} over {key!r}.'.format(successor=successor_key, key=node.key))
        return cls.NODE(successor_key, successor_value, node.left, right)

    def _pop(self, key):
        node, ancestry = self._path_to(key)
        if node is None:
            return _MISSING
        self._relink(ancestry, self._unlink(node))
        self._size -= 1
        return node.value

    def delete(self, key, default=None):
        """
        Remove key if it exists, a missing key leaves the map untouched.
        :return: (this map, value stored at key or default if key was absent)
        """
        value = self._pop(key)
        return self, default if value is _MISSING else value

    def remove(self, key):
        """
        Remove target key, raise KeyNotFoundError if key doesn't exist.
        :return: value which was stored at key.
        """
        value = self._pop(key)
        if value is _MISSING:
            raise KeyNotFoundError(key)
        return value

    def clear(self):
        """Release the whole tree."""
        self._root = None
        self._size = 0
        logger.debug('{name} cleared.'.format(name=self.__class__.__name__))
        return self

    @property
    def size(self) -> int:
        """Number of total key-value pairs."""
        return self._size

    @property
    def is_empty(self) -> bool:
        return self._root is None

    @property
    def depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path, 0 for an empty map."""
        deepest = 0
        stack = [(self._root, 1)] if self._root is not None else []
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children)
        return deepest

    def __contains__(self, key):
        """Support for keyword 'in' operator."""
        return self._lookup(key) is not _MISSING

    def __len__(self):
        """Support for len() built-in function."""
        return self._size

    def __repr__(self):
        if self._root is None:
            return '<{name} (empty)>'.format(name=self.__class__.__name__)
        lines = []
        stack = [(self._root, 0)]
        while stack:
            node, level = stack.pop()
            lines.append(('  ' * level) + repr(node))
            # right pushed first so the left subtree is printed first
            stack.extend((child, level + 1) for child in reversed(node.children))
        return '\n'.join(lines)

    __getitem__ = get_result
    __delitem__ = remove

    def __setitem__(self, key, value):
        self.insert(key, value)

    """
    __enter__ & __exit__ support for `with...as`(context manager) syntax.
    """

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.clear()
