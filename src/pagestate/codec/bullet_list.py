"""
Codec for ordered list regions.

Items are persisted as plain text; markup typed into an item never comes
back as markup.
"""

import html
from typing import Iterable, List

from ..types.record import ListRecord
from ..types.region import Region, RegionKind, node_text
from .base import RegionCodec


def list_items(region: Region) -> List[str]:
    """Trimmed, non-empty text of each immediate child, in order."""
    items = []
    for node in region.children():
        text = node_text(node).strip()
        if text:
            items.append(text)
    return items


def render_items(items: Iterable) -> str:
    return "".join(
        f"<li>{html.escape(item, quote=False)}</li>"
        for item in items
        if isinstance(item, str) and item.strip()
    )


class ListCodec(RegionCodec):
    kind = RegionKind.LIST
    record_type = ListRecord

    def encode(self, region: Region) -> ListRecord:
        return ListRecord(items=list_items(region))

    def _apply(self, region: Region, record: ListRecord) -> bool:
        if not isinstance(record.items, list):
            return False
        region.inner_html = render_items(record.items)
        return True
