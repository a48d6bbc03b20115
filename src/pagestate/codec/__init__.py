"""
Region codecs, one per region kind.
"""

from typing import Dict

from ..types.region import RegionKind
from .base import RegionCodec
from .bullet_list import ListCodec
from .gauge import NumericGaugeCodec
from .plain import PlainCodec


def default_codecs() -> Dict[RegionKind, RegionCodec]:
    """Fresh codec instance for every region kind."""
    return {
        RegionKind.PLAIN: PlainCodec(),
        RegionKind.LIST: ListCodec(),
        RegionKind.NUMERIC: NumericGaugeCodec(),
    }


__all__ = [
    "ListCodec",
    "NumericGaugeCodec",
    "PlainCodec",
    "RegionCodec",
    "default_codecs",
]
