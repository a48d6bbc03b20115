"""
In-memory key-value store with an optional size quota.
"""

import logging
from typing import Dict, Optional

from ..errors import StoreQuotaExceededError
from .base import KeyValueStore


class MemoryStore(KeyValueStore):
    """
    Dict-backed store.

    When ``quota_bytes`` is set, a write that would push the total size of
    all stored keys and values past it is rejected, the way browser storage
    rejects writes once its quota is used up.
    """

    def __init__(self, quota_bytes: Optional[int] = None):
        self.quota_bytes = quota_bytes
        self.logger = logging.getLogger(__name__)
        self._data: Dict[str, str] = {}

    def _size_with(self, key: str, value: str) -> int:
        size = len(key.encode("utf-8")) + len(value.encode("utf-8"))
        for other_key, other_value in self._data.items():
            if other_key != key:
                size += len(other_key.encode("utf-8")) + len(other_value.encode("utf-8"))
        return size

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            size = self._size_with(key, value)
            if size > self.quota_bytes:
                raise StoreQuotaExceededError(key, size, self.quota_bytes)
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
