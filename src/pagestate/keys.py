"""
Stable keys for anonymous editable regions.

A key is built from the region's structure, not its content, so the same
region maps to the same record across page loads as long as the traversal
order and its identity-relevant classes do not change.
"""

from typing import Iterable

from .types.region import Region

# Classes added and removed at runtime by the ripple effect, the edit session
# and the gauge presentation. Must match what those components toggle.
RIPPLE_HOST_CLASS = "material-wave"
RIPPLE_CLASS = "material-wave-ripple"
EDITING_CLASS = "editing"
PROGRESS_CLASS = "progress-mode"

TRANSIENT_CLASSES = frozenset({RIPPLE_HOST_CLASS, RIPPLE_CLASS, EDITING_CLASS, PROGRESS_CLASS})

NO_CLASS = "no-class"
NO_ID = "no-id"


class ElementKeyDeriver:
    """Derives ``<tag>-<classes>-<id>-<index>`` keys for regions."""

    def __init__(self, transient_classes: Iterable[str] = TRANSIENT_CLASSES):
        self.transient_classes = frozenset(transient_classes)

    def stable_classes(self, region: Region) -> str:
        kept = sorted(c for c in region.classes if c not in self.transient_classes)
        return " ".join(kept) or NO_CLASS

    def derive(self, region: Region, index: int) -> str:
        """
        Compute the key for a region at a traversal position.

        Args:
            region: Region handle
            index: Position of the region in traversal order

        Returns:
            Region key string
        """
        tag_name = region.tag_name.lower()
        element_id = region.element_id or NO_ID
        return f"{tag_name}-{self.stable_classes(region)}-{element_id}-{index}"


_default_deriver = ElementKeyDeriver()


def derive_region_key(region: Region, index: int) -> str:
    """Module-level shortcut using the default transient class set."""
    return _default_deriver.derive(region, index)
