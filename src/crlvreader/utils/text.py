"""Text helpers for turning PDF fragments into clean field values."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

_NON_WORD = re.compile(r"[^\w\s]")
_ASCII_DIGITS = re.compile(r"[0-9]+")


def tokenize(fragments: Iterable[str]) -> List[str]:
    """Strip fragments and drop the ones left empty.

    Layout artifacts (grid lines, spacing glyphs) come through as blank
    fragments; keeping them would shift every positional offset.
    """
    return [fragment.strip() for fragment in fragments if fragment and fragment.strip()]


def clean_upper(value: Optional[str]) -> Optional[str]:
    """Trim and upper-case, mapping blank values to ``None``."""
    if value is None:
        return None
    cleaned = value.strip().upper()
    return cleaned or None


def strip_punctuation(value: Optional[str]) -> Optional[str]:
    """Remove every character that is neither a word character nor whitespace."""
    if value is None:
        return None
    return _NON_WORD.sub("", value)


def parse_int(value: object) -> Optional[int]:
    """Parse a plain run of ASCII digits, returning ``None`` for anything else."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if _ASCII_DIGITS.fullmatch(text) is None:
        return None
    return int(text, 10)
