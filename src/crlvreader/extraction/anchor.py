"""Locate the RENAVAM token every field offset is relative to."""

from __future__ import annotations

import re
from typing import Optional, Sequence

RENAVAM_PATTERN = re.compile(r"[0-9]{11}")


def is_renavam(token: str) -> bool:
    return RENAVAM_PATTERN.fullmatch(token) is not None


def find_anchor(tokens: Sequence[str]) -> Optional[int]:
    """Return the index of the first eleven-digit token, or ``None``.

    A CRLV carries no other eleven-digit field, so the first match is the
    registration number.
    """
    for index, token in enumerate(tokens):
        if is_renavam(token):
            return index
    return None
