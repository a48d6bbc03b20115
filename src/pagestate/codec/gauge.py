"""
Codec for percentage-style numeric gauge regions.

A gauge region shows a bar while idle and the raw text while being edited.
The text the user typed and the parsed percentage are cached on the region
as ``data-original-value`` / ``data-percentage-value`` so the bar can be
rebuilt without reparsing.
"""

from typing import Optional

from ..keys import PROGRESS_CLASS
from ..percent import format_percentage, parse_percentage
from ..types.record import NumericGaugeRecord
from ..types.region import Region, RegionKind
from .base import RegionCodec

ORIGINAL_VALUE_ATTR = "data-original-value"
PERCENTAGE_VALUE_ATTR = "data-percentage-value"
PROGRESS_WIDTH_PROPERTY = "--progress-width"

LANGUAGE_LEVEL_CLASS = "language-box__level"
SKILL_GROUP_CLASSES = ("tools-box", "skills-box")

LANGUAGE_DEFAULT = 50
SKILL_DEFAULT = 30
FALLBACK_DEFAULT = 60


def default_percentage(region: Region) -> int:
    """Contextual default used when the region's text is not a number."""
    if region.has_class(LANGUAGE_LEVEL_CLASS):
        return LANGUAGE_DEFAULT
    if region.closest_class(*SKILL_GROUP_CLASSES):
        return SKILL_DEFAULT
    return FALLBACK_DEFAULT


def cached_percentage(region: Region) -> Optional[float]:
    raw = region.get_attribute(PERCENTAGE_VALUE_ATTR)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def apply_progress_mode(region: Region, percentage: float) -> None:
    region.add_class(PROGRESS_CLASS)
    region.set_style_property(PROGRESS_WIDTH_PROPERTY, f"{format_percentage(percentage)}%")
    region.text = ""


def remove_progress_mode(region: Region) -> None:
    region.remove_class(PROGRESS_CLASS)
    region.remove_style_property(PROGRESS_WIDTH_PROPERTY)


class NumericGaugeCodec(RegionCodec):
    kind = RegionKind.NUMERIC
    record_type = NumericGaugeRecord

    def parse_text(self, region: Region, text: str) -> NumericGaugeRecord:
        """Parse live text, falling back to the contextual default."""
        percentage = parse_percentage(text)
        if percentage is None:
            percentage = default_percentage(region)
            self.logger.warning(f"Invalid number input {text!r}, using default: {percentage}%")
            return NumericGaugeRecord(display_text=f"{percentage}%", percentage=float(percentage))
        return NumericGaugeRecord(display_text=text, percentage=percentage)

    def encode(self, region: Region, prefer_cached: bool = True) -> NumericGaugeRecord:
        """
        Read the gauge state.

        Args:
            region: Numeric region
            prefer_cached: Use the cached attributes when present instead of
                parsing the live text

        Returns:
            NumericGaugeRecord
        """
        text = region.text.strip()
        if prefer_cached:
            display = region.get_attribute(ORIGINAL_VALUE_ATTR) or text
            percentage = cached_percentage(region)
            if percentage is None and display:
                percentage = parse_percentage(display)
            if percentage is not None:
                display = display or f"{format_percentage(percentage)}%"
                return NumericGaugeRecord(display_text=display, percentage=percentage)
        return self.parse_text(region, text)

    def _apply(self, region: Region, record: NumericGaugeRecord) -> bool:
        display = record.display_text or f"{format_percentage(record.percentage)}%"
        region.set_attribute(ORIGINAL_VALUE_ATTR, display)
        region.set_attribute(PERCENTAGE_VALUE_ATTR, format_percentage(record.percentage))
        region.text = display
        return True
