"""Mechanical offset lookups into the token stream."""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

from crlvreader.models import RawExtraction, VehicleField


def lookup(tokens: Sequence[str], index: int) -> Optional[str]:
    """Bounds-checked indexing; negative or past-the-end indexes give ``None``."""
    if 0 <= index < len(tokens):
        return tokens[index]
    return None


def extract_raw(
    tokens: Sequence[str],
    anchor: Optional[int],
    offsets: Mapping[VehicleField, int],
) -> RawExtraction:
    """Copy the token at ``anchor + offset`` for every entry of ``offsets``."""
    if anchor is None:
        return RawExtraction()

    values: Dict[VehicleField, Optional[str]] = {}
    for target, offset in offsets.items():
        values[target] = lookup(tokens, anchor + offset)
    return RawExtraction.from_fields(values)
