"""
-------------
jsondir.locks
-------------

Per-collection locks.
"""
from threading import Lock


class CollectionLocks:
    """Registry of mutual-exclusion locks, one per collection name.

    Locks are created lazily on first use and are kept for the lifetime of the registry, so the same
    collection name always maps to the same lock. The registry itself is guarded by a lock, which makes
    the lazy creation safe when several threads ask for the same collection at the same time.

    Each :class:`jsondir.filestore.FileStore` owns its own registry.
    """
    def __init__(self):
        self._lock = Lock()
        self._locks = {}

    def lock_for(self, collection):
        """Returns the lock for the given collection, creating it if needed.

        :param collection: ``str``, the collection name.

        Returns a :class:`threading.Lock`.
        """
        lock = self._locks.get(collection)
        if lock is not None:
            return lock
        with self._lock:
            lock = self._locks.get(collection)
            if lock is None:
                lock = Lock()
                self._locks[collection] = lock
            return lock

    def __contains__(self, collection):
        return collection in self._locks

    def __len__(self):
        return len(self._locks)
