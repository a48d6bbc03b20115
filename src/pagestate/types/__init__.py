"""
Region and record types shared by the codecs, the gateway and the manager.
"""

from .record import (
    ListRecord,
    NumericGaugeRecord,
    PlainRecord,
    RegionRecord,
    Snapshot,
    record_from_dict,
    snapshot_from_document,
    snapshot_to_document,
)
from .region import Region, RegionKind, SoupRegion

__all__ = [
    "ListRecord",
    "NumericGaugeRecord",
    "PlainRecord",
    "Region",
    "RegionKind",
    "RegionRecord",
    "Snapshot",
    "SoupRegion",
    "record_from_dict",
    "snapshot_from_document",
    "snapshot_to_document",
]
