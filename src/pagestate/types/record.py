"""
Region records: the serializable form of one region's state, and the
mapping between records and the persisted JSON document.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..percent import clamp_percentage, format_percentage, parse_percentage

logger = logging.getLogger(__name__)


@dataclass
class PlainRecord:
    html: str

    def to_dict(self) -> Dict[str, Any]:
        return {"data": self.html}


@dataclass
class ListRecord:
    items: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "list", "data": list(self.items)}


@dataclass
class NumericGaugeRecord:
    display_text: str
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "number",
            "originalValue": self.display_text,
            "percentageValue": format_percentage(self.percentage),
        }


RegionRecord = Union[PlainRecord, ListRecord, NumericGaugeRecord]
Snapshot = Dict[str, RegionRecord]


def record_from_dict(raw: Any) -> Optional[RegionRecord]:
    """
    Build a record from one persisted entry.

    Returns None for entries that cannot describe any variant; codecs treat a
    missing record as "leave the region alone".
    """
    if not isinstance(raw, dict):
        return None

    record_type = raw.get("type")
    data = raw.get("data")

    if record_type == "list":
        if not isinstance(data, list):
            return None
        return ListRecord(items=[item for item in data if isinstance(item, str)])

    if record_type == "number":
        return _numeric_from_dict(raw)

    if record_type is None:
        if not isinstance(data, str):
            return None
        return PlainRecord(html=data)

    return None


def _numeric_from_dict(raw: Dict[str, Any]) -> Optional[NumericGaugeRecord]:
    display = raw.get("originalValue")
    if not isinstance(display, str) or not display:
        display = None

    percentage = None
    pct_raw = raw.get("percentageValue")
    if isinstance(pct_raw, (str, int, float)) and not isinstance(pct_raw, bool):
        try:
            percentage = float(pct_raw)
        except ValueError:
            percentage = None
        if percentage is not None and not math.isfinite(percentage):
            percentage = None

    if percentage is None and display is not None:
        percentage = parse_percentage(display)
    if percentage is None:
        return None

    percentage = clamp_percentage(percentage)
    if display is None:
        display = f"{format_percentage(percentage)}%"
    return NumericGaugeRecord(display_text=display, percentage=percentage)


def snapshot_to_document(snapshot: Snapshot) -> Dict[str, Dict[str, Any]]:
    """Persisted JSON form of a snapshot."""
    return {key: record.to_dict() for key, record in snapshot.items()}


def snapshot_from_document(document: Dict[str, Any]) -> Snapshot:
    """Records for every well-formed entry; malformed entries are dropped."""
    snapshot: Snapshot = {}
    for key, raw in document.items():
        record = record_from_dict(raw)
        if record is None:
            logger.debug(f"Skipping malformed record for key {key!r}")
            continue
        snapshot[key] = record
    return snapshot
