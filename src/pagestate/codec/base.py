"""
Base class for region codecs.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Type

from ..types.record import RegionRecord
from ..types.region import Region, RegionKind


class RegionCodec(ABC):
    """
    Encode/decode pair for one region kind.

    Subclasses declare the ``kind`` they serve and the ``record_type`` they
    produce. ``decode`` never raises on bad input: a missing record or one of
    another variant leaves the region as it is.
    """

    kind: RegionKind
    record_type: Type

    def __init__(self):
        self.logger = logging.getLogger(type(self).__module__)

    @abstractmethod
    def encode(self, region: Region) -> RegionRecord:
        """Read the region's live state into a record."""
        pass

    def decode(self, region: Region, record: Optional[RegionRecord]) -> bool:
        """
        Write a record back into the region.

        Args:
            region: Region to mutate
            record: Stored record, possibly None

        Returns:
            True if the region was updated
        """
        if not isinstance(record, self.record_type):
            if record is not None:
                self.logger.debug(
                    f"Ignoring {type(record).__name__} for {self.kind.value} region {region!r}"
                )
            return False
        return self._apply(region, record)

    @abstractmethod
    def _apply(self, region: Region, record) -> bool:
        pass
