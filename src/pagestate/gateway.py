"""
Persistence gateway: the only component that talks to the key-value store.

Keeps the fingerprint of the last document it read or wrote so unchanged
snapshots are not written again.
"""

import json
import logging
from typing import Optional

from .errors import DeserializationError, PersistenceError, StoreError
from .hashing import SnapshotHasher
from .store.base import KeyValueStore
from .types.record import Snapshot, snapshot_from_document, snapshot_to_document


class PersistenceGateway:
    """Reads and writes one snapshot document under a single storage key."""

    def __init__(
        self,
        store: KeyValueStore,
        storage_key: str,
        hasher: Optional[SnapshotHasher] = None,
    ):
        """
        Args:
            store: Backing key-value store
            storage_key: Key the snapshot document lives under
            hasher: Fingerprint implementation (default SnapshotHasher)
        """
        self.store = store
        self.storage_key = storage_key
        self.hasher = hasher or SnapshotHasher()
        self.logger = logging.getLogger(__name__)
        self._last_fingerprint: Optional[str] = None

    @property
    def last_fingerprint(self) -> Optional[str]:
        return self._last_fingerprint

    def load(self) -> Optional[Snapshot]:
        """
        Load the stored snapshot.

        Returns:
            Snapshot, or None if nothing is stored

        Raises:
            PersistenceError: The store rejected the read
            DeserializationError: The stored document is not a snapshot
        """
        try:
            raw = self.store.get(self.storage_key)
        except StoreError as e:
            self.logger.error(f"Error loading {self.storage_key!r}: {e}")
            raise PersistenceError(f"Failed to load saved data: {e}") from e

        if not raw:
            self._last_fingerprint = None
            self.logger.debug(f"No stored document for {self.storage_key!r}")
            return None

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            raise DeserializationError(self.storage_key, str(e)) from e
        if not isinstance(document, dict):
            raise DeserializationError(
                self.storage_key, f"expected an object, got {type(document).__name__}"
            )

        snapshot = snapshot_from_document(document)
        self._last_fingerprint = self.hasher.fingerprint(document)
        self.logger.debug(
            f"Loaded {len(snapshot)} records from {self.storage_key!r} "
            f"(fingerprint {self._last_fingerprint})"
        )
        return snapshot

    def save(self, snapshot: Snapshot) -> bool:
        """
        Write the snapshot unless it matches the last one read or written.

        Returns:
            True if a write happened, False if the content was unchanged

        Raises:
            PersistenceError: The store rejected the write; the cached
                fingerprint is left as it was
        """
        document = snapshot_to_document(snapshot)
        current = self.hasher.fingerprint(document)

        if current == self._last_fingerprint:
            self.logger.debug(f"Snapshot unchanged ({current}), skipping write")
            return False

        try:
            self.store.set(self.storage_key, json.dumps(document, ensure_ascii=False))
        except StoreError as e:
            self.logger.error(f"Error saving {self.storage_key!r}: {e}")
            raise PersistenceError(f"Failed to save data: {e}") from e

        self._last_fingerprint = current
        self.logger.info(f"Saved {len(document)} records to {self.storage_key!r}")
        return True

    def reset_cache(self) -> None:
        """Force the next save to write."""
        self._last_fingerprint = None

    def clear(self) -> None:
        """Delete the stored document."""
        try:
            self.store.delete(self.storage_key)
        except StoreError as e:
            raise PersistenceError(f"Failed to clear data: {e}") from e
        self._last_fingerprint = None
        self.logger.info(f"Cleared {self.storage_key!r}")
