"""Per-site mutual exclusion for write operations.

Generation and build both recreate a directory keyed by site name.  Two
concurrent writers for the same site would interleave their delete and copy
phases, so every write path holds the lock for its ``(scope, site_name)``
key.  Different sites never contend.

Locks are held weakly by the registry: an entry disappears once no thread
holds or waits on it.
"""

import threading
import weakref
from contextlib import contextmanager
from typing import Iterator, Tuple

_registry_lock = threading.Lock()
_locks: "weakref.WeakValueDictionary[Tuple[str, str], threading.Lock]" = weakref.WeakValueDictionary()


def _lock_for(scope: str, site_name: str) -> threading.Lock:
    key = (scope, site_name)
    with _registry_lock:
        lock = _locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _locks[key] = lock
        return lock


@contextmanager
def site_lock(scope: str, site_name: str) -> Iterator[None]:
    """Hold the lock for *site_name* within *scope* (``"generate"`` or ``"build"``)."""
    lock = _lock_for(scope, site_name)
    with lock:
        yield
