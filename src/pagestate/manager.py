"""
Data manager: collects region state into snapshots, restores it, and
normalizes single regions after an edit session.
"""

import logging
from typing import Dict, Optional, Sequence

from .codec import RegionCodec, default_codecs
from .codec.gauge import (
    ORIGINAL_VALUE_ATTR,
    PERCENTAGE_VALUE_ATTR,
    NumericGaugeCodec,
    apply_progress_mode,
    cached_percentage,
    default_percentage,
    remove_progress_mode,
)
from .gateway import PersistenceGateway
from .keys import PROGRESS_CLASS, ElementKeyDeriver
from .store.base import KeyValueStore
from .types.record import Snapshot
from .types.region import Region, RegionKind

DEFAULT_STORAGE_KEY = "resume-data"


class DataManager:
    """
    Orchestrates key derivation, codecs and the persistence gateway.

    Collect and restore must see the regions in the same traversal order,
    since the index is part of every region key.
    """

    def __init__(
        self,
        store: KeyValueStore,
        storage_key: str = DEFAULT_STORAGE_KEY,
        deriver: Optional[ElementKeyDeriver] = None,
        codecs: Optional[Dict[RegionKind, RegionCodec]] = None,
    ):
        """
        Args:
            store: Backing key-value store
            storage_key: Key the snapshot document is stored under
            deriver: Region key deriver (default transient class set)
            codecs: Codec per region kind (default: one of each built-in)
        """
        self.logger = logging.getLogger(__name__)
        self.gateway = PersistenceGateway(store, storage_key)
        self.deriver = deriver or ElementKeyDeriver()
        self.codecs = {**default_codecs(), **(codecs or {})}

    def codec_for(self, region: Region) -> RegionCodec:
        return self.codecs[region.kind]

    # -------- Snapshots --------

    def collect_snapshot(self, regions: Sequence[Region]) -> Snapshot:
        snapshot: Snapshot = {}
        for index, region in enumerate(regions):
            key = self.deriver.derive(region, index)
            snapshot[key] = self.codec_for(region).encode(region)
        self.logger.debug(f"Collected {len(snapshot)} region records")
        return snapshot

    def restore_snapshot(self, regions: Sequence[Region], snapshot: Snapshot) -> int:
        """
        Decode stored records into the regions.

        Returns:
            Number of regions that were updated
        """
        restored = 0
        for index, region in enumerate(regions):
            key = self.deriver.derive(region, index)
            record = snapshot.get(key)
            if record is None:
                continue
            if self.codec_for(region).decode(region, record):
                restored += 1
        self.logger.debug(f"Restored {restored}/{len(regions)} regions")
        return restored

    # -------- Persistence --------

    def load(self) -> Optional[Snapshot]:
        return self.gateway.load()

    def save(self, snapshot: Snapshot) -> bool:
        return self.gateway.save(snapshot)

    def reset_cache(self) -> None:
        self.gateway.reset_cache()

    # -------- Single-region normalization --------

    def normalize_list_region(self, region: Region) -> None:
        codec = self.codecs[RegionKind.LIST]
        codec.decode(region, codec.encode(region))

    def normalize_numeric_region(self, region: Region) -> None:
        """Parse what the user typed, cache it, and show the gauge."""
        codec: NumericGaugeCodec = self.codecs[RegionKind.NUMERIC]
        record = codec.encode(region, prefer_cached=False)
        codec.decode(region, record)
        apply_progress_mode(region, record.percentage)

    def restore_numeric_text(self, region: Region) -> None:
        """Leave gauge presentation and show the editable text again."""
        remove_progress_mode(region)

        original = region.get_attribute(ORIGINAL_VALUE_ATTR)
        percentage = region.get_attribute(PERCENTAGE_VALUE_ATTR)
        if original is not None:
            region.text = original
        elif percentage is not None:
            region.text = f"{percentage}%"
        else:
            region.text = f"{default_percentage(region)}%"

    def initialize_numeric_regions(self, regions: Sequence[Region]) -> None:
        """
        Put every numeric region into gauge mode.

        Regions already showing a gauge are redrawn from their cached
        percentage, since a restore may have replaced it.
        """
        for region in regions:
            if region.kind is not RegionKind.NUMERIC:
                continue
            percentage = cached_percentage(region)
            if percentage is not None:
                apply_progress_mode(region, percentage)
            elif not region.has_class(PROGRESS_CLASS):
                self.normalize_numeric_region(region)

