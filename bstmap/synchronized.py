"""
Map shared between threads. The tree itself has no notion of concurrency, so the
whole map sits behind one reader-writer lock: lookups may run side by side, every
mutation runs alone.
"""
import rwlock

from bstmap.tree import BinaryTreeMap


class SynchronizedTreeMap(object):
    """
    Wrap a BinaryTreeMap, each operation is done in a read or write transaction.
    """

    def __init__(self, tree_map: BinaryTreeMap = None):
        self._map = tree_map if tree_map is not None else BinaryTreeMap()
        self._lock = rwlock.RWLock()

    @property
    def write_transaction(self):
        class WriteTransaction:
            def __enter__(_self):
                self._lock.writer_lock.acquire()

            def __exit__(_self, exc_type, exc_val, exc_tb):
                self._lock.writer_lock.release()

        return WriteTransaction()

    @property
    def read_transaction(self):
        class ReadTransaction:
            def __enter__(_self):
                self._lock.reader_lock.acquire()

            def __exit__(_self, exc_type, exc_val, exc_tb):
                self._lock.reader_lock.release()

        return ReadTransaction()

    def get(self, key, default=None):
        with self.read_transaction:
            return self._map.get(key, default)

    def get_result(self, key):
        with self.read_transaction:
            return self._map.get_result(key)

    def insert(self, key, value):
        with self.write_transaction:
            self._map.insert(key, value)
        return self

    def delete(self, key, default=None):
        with self.write_transaction:
            _, value = self._map.delete(key, default)
        return self, value

    def remove(self, key):
        with self.write_transaction:
            return self._map.remove(key)

    def clear(self):
        with self.write_transaction:
            self._map.clear()
        return self

    @property
    def size(self) -> int:
        with self.read_transaction:
            return self._map.size

    @property
    def is_empty(self) -> bool:
        with self.read_transaction:
            return self._map.is_empty

    @property
    def depth(self) -> int:
        with self.read_transaction:
            return self._map.depth

    def __contains__(self, key):
        with self.read_transaction:
            return key in self._map

    def __len__(self):
        return self.size

    def __repr__(self):
        with self.read_transaction:
            return repr(self._map)

    __getitem__ = get_result
    __delitem__ = remove

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.clear()
