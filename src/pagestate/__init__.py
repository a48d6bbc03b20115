"""
pagestate: persist and restore the editable regions of an HTML page.
"""

from .errors import (
    DeserializationError,
    PageStateError,
    PersistenceError,
    StoreError,
    StoreQuotaExceededError,
)
from .gateway import PersistenceGateway
from .hashing import SnapshotHasher, canonicalize, fingerprint
from .keys import TRANSIENT_CLASSES, ElementKeyDeriver, derive_region_key
from .manager import DataManager
from .page import EditablePage
from .store import MemoryStore, SQLAlchemyKeyValueStore
from .types import (
    ListRecord,
    NumericGaugeRecord,
    PlainRecord,
    Region,
    RegionKind,
    Snapshot,
    SoupRegion,
)

__all__ = [
    "DataManager",
    "DeserializationError",
    "EditablePage",
    "ElementKeyDeriver",
    "ListRecord",
    "MemoryStore",
    "NumericGaugeRecord",
    "PageStateError",
    "PersistenceError",
    "PersistenceGateway",
    "PlainRecord",
    "Region",
    "RegionKind",
    "SQLAlchemyKeyValueStore",
    "Snapshot",
    "SnapshotHasher",
    "SoupRegion",
    "StoreError",
    "StoreQuotaExceededError",
    "TRANSIENT_CLASSES",
    "canonicalize",
    "derive_region_key",
    "fingerprint",
]
