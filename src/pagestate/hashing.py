"""
Change detection for snapshots.

The fingerprint is a 32-bit rolling hash of the canonical JSON form. It is
only used to skip writes whose content has not changed; a collision means a
skipped write, never a corrupted one.
"""

import json
from typing import Any


def canonicalize(value: Any) -> Any:
    """Recursively sort mapping keys; sequences keep their order."""
    if isinstance(value, dict):
        return {key: canonicalize(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [canonicalize(item) for item in value]
    return value


def rolling_hash(text: str) -> str:
    """
    ``hash * 31 + code`` over UTF-16 code units, wrapped to signed 32 bits.

    Returns:
        Absolute value of the hash as a decimal string
    """
    value = 0
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        value = (value * 31 + code) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return str(abs(value))


class SnapshotHasher:
    """Canonical serialization plus rolling hash."""

    def serialize(self, value: Any) -> str:
        return json.dumps(canonicalize(value), separators=(",", ":"), ensure_ascii=False)

    def fingerprint(self, value: Any) -> str:
        return rolling_hash(self.serialize(value))


_default_hasher = SnapshotHasher()


def fingerprint(value: Any) -> str:
    return _default_hasher.fingerprint(value)
