"""
UCDrive Client - Directory Cache

Caches folder listings keyed by account and normalized path so that path
resolution does not re-list every folder it walks through.

The cache never invalidates entries on its own. Hosts that mutate the drive
and need fresh listings clear entries through the store.

Author: UCDrive Project
"""

import logging
import threading
from typing import Any, Dict, Hashable, Optional, Protocol, Sequence, Tuple

from models import Account, RemoteEntry

# Configure logging
logger = logging.getLogger(__name__)


class CacheStore(Protocol):
    """Key/value store backing a DirectoryCache."""

    def get(self, key: Hashable) -> Tuple[Any, bool]:
        """Return (value, found)."""
        ...

    def set(self, key: Hashable, value: Any) -> None:
        ...


class MemoryCacheStore:
    """
    In-process CacheStore.

    Reads and writes are guarded by a lock so one store can be shared by
    several threads.
    """

    def __init__(self):
        self._entries: Dict[Hashable, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Tuple[Any, bool]:
        with self._lock:
            if key in self._entries:
                return self._entries[key], True
            return None, False

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._entries[key] = value

    def delete(self, key: Hashable) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


class DirectoryCache:
    """
    Maps (account, normalized path) to that folder's children.

    Responsibilities:
    - Build cache keys scoped per account
    - Store listings as immutable tuples
    - Delegate storage to an injectable CacheStore
    """

    def __init__(self, store: Optional[CacheStore] = None):
        """
        Initialize directory cache.

        Args:
            store: Backing store. A private MemoryCacheStore is used if None.
        """
        self.store = store if store is not None else MemoryCacheStore()

    @staticmethod
    def make_key(account: Account, path: str) -> Tuple[str, str]:
        return (account.name, path)

    def get(self, account: Account, path: str) -> Optional[Tuple[RemoteEntry, ...]]:
        """
        Look up a cached listing.

        Args:
            account: Account the listing belongs to
            path: Normalized folder path

        Returns:
            The cached children, or None on a miss
        """
        value, found = self.store.get(self.make_key(account, path))
        if not found:
            return None
        logger.debug(f"Directory cache hit: {account.name}:{path}")
        return value

    def set(self, account: Account, path: str, entries: Sequence[RemoteEntry]) -> None:
        self.store.set(self.make_key(account, path), tuple(entries))
        logger.debug(f"Directory cache stored {len(entries)} entries for {account.name}:{path}")
