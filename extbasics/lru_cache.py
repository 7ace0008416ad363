"""A thread-safe least-recently-used cache with a fixed capacity."""

import threading
from collections import OrderedDict


class LruCache:
    """Map keys to values and evict the least recently used entry when full.

    Storing a value or reading it with :meth:`get_update` makes the entry the
    most recently used one. A plain :meth:`get` leaves the order unchanged.
    Callbacks run while the cache is locked and must not call back into it.
    """

    def __init__(self, max_size):
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self._max_size = max_size
        # Most recently used entries sit at the end.
        self._entries = OrderedDict()
        self._lock = threading.Lock()

    @property
    def max_size(self):
        return self._max_size

    def put(self, key, value):
        """Store ``value`` under ``key`` and mark it most recently used."""
        with self._lock:
            if key in self._entries:
                self._entries[key] = value
                self._entries.move_to_end(key)
                return
            if len(self._entries) + 1 > self._max_size:
                self._entries.popitem(last=False)
            self._entries[key] = value

    def get(self, key):
        """Return the value for ``key`` or None, without changing the order."""
        with self._lock:
            return self._entries.get(key)

    def get_update(self, key, update=None):
        """Apply ``update`` to the stored value in place, mark it used and return it.

        Returns None, without calling ``update``, when ``key`` is absent.
        """
        with self._lock:
            if key not in self._entries:
                return None
            value = self._entries[key]
            if update is not None:
                update(value)
            self._entries.move_to_end(key)
            return value

    def get_remove(self, key):
        """Remove ``key`` and return its value, or None when it is absent."""
        with self._lock:
            return self._entries.pop(key, None)

    def remove(self, key):
        """Remove ``key``; return True if it was present."""
        with self._lock:
            if key in self._entries:
                del self._entries[key]
                return True
            return False

    def remove_all_matching(self, predicate):
        """Remove every entry whose value satisfies ``predicate``; return the count."""
        with self._lock:
            doomed = [key for key, value in reversed(self._entries.items()) if predicate(value)]
            for key in doomed:
                del self._entries[key]
            return len(doomed)

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def __contains__(self, key):
        with self._lock:
            return key in self._entries

    def __repr__(self):
        return f"{type(self).__name__}(max_size={self._max_size}, size={len(self)})"