"""
Key-value store protocol and in-memory implementation.

The resolver only needs three reads from a store: exact lookup, full key
enumeration, and lookup of a previously enumerated key.
"""
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class KeyValueStore(ABC):
    """
    Protocol for flat string-keyed stores.

    Implementations must be safe for concurrent reads and writes.
    Enumeration order is implementation-defined and may change between calls.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Exact, case-sensitive lookup.

        :param key: Key to look up
        :return: Stored value, or None if the key does not exist
        :raises StoreUnavailableError: If the store cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Create or overwrite a key."""
        pass

    @abstractmethod
    def scan_keys(self) -> List[str]:
        """
        List every key currently in the store.

        Paginated backends drain their cursor before returning.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a key. Returns True if it existed."""
        pass

    def ping(self) -> bool:
        """Check that the store is reachable."""
        return True

    def close(self) -> None:
        """Release connections held by the store."""
        return None


class InMemoryKeyValueStore(KeyValueStore):
    """
    Dictionary-backed store.

    Enumerates in insertion order. Used for tests and the interactive demo.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def scan_keys(self) -> List[str]:
        with self._lock:
            return list(self._data.keys())

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
