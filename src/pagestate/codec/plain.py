"""
Codec for free-form rich text regions.
"""

from bs4 import BeautifulSoup

from ..keys import RIPPLE_CLASS
from ..types.record import PlainRecord
from ..types.region import Region, RegionKind
from .base import RegionCodec


def strip_ripples(markup: str) -> str:
    """Remove ripple effect subtrees from a markup fragment."""
    if RIPPLE_CLASS not in markup:
        return markup
    soup = BeautifulSoup(markup, "html.parser")
    for ripple in soup.find_all(class_=RIPPLE_CLASS):
        ripple.decompose()
    return soup.decode()


class PlainCodec(RegionCodec):
    kind = RegionKind.PLAIN
    record_type = PlainRecord

    def encode(self, region: Region) -> PlainRecord:
        return PlainRecord(html=strip_ripples(region.inner_html))

    def _apply(self, region: Region, record: PlainRecord) -> bool:
        if not isinstance(record.html, str):
            return False
        region.inner_html = record.html
        return True
