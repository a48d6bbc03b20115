"""
Key-value stores the gateway can persist snapshots into.
"""

from .base import KeyValueStore
from .memory import MemoryStore
from .sql import SQLAlchemyKeyValueStore


def create_store(url: str) -> KeyValueStore:
    """Store for a URL: ``memory://`` for a MemoryStore, anything else is a SQLAlchemy URL."""
    if url == "memory://":
        return MemoryStore()
    return SQLAlchemyKeyValueStore(url=url)


__all__ = ["KeyValueStore", "MemoryStore", "SQLAlchemyKeyValueStore", "create_store"]
