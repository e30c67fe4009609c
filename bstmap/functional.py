"""
Function-style surface over BinaryTreeMap. Maps are updated in place, the map passed
in is the one handed back.
"""
from bstmap.tree import BinaryTreeMap

__all__ = ['empty', 'get', 'get_result', 'insert', 'delete']


def empty() -> BinaryTreeMap:
    """Construct a map with no entries."""
    return BinaryTreeMap()


def get(tree_map: BinaryTreeMap, key):
    """:return: value at key, None if key is absent."""
    return tree_map.get(key)


def get_result(tree_map: BinaryTreeMap, key):
    """:return: value at key, raise KeyNotFoundError if key is absent."""
    return tree_map.get_result(key)


def insert(tree_map: BinaryTreeMap, key, value) -> BinaryTreeMap:
    return tree_map.insert(key, value)


def delete(tree_map: BinaryTreeMap, key) -> tuple:
    """:return: (updated map, removed value or None if key was absent)"""
    return tree_map.delete(key)
