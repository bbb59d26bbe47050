"""PDF loading utilities.

Uses PyMuPDF (fitz) to read the text layer of a CRLV page as the ordered
sequence of text spans it was drawn with.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Dict, Iterable, Iterator, List

import fitz  # PyMuPDF

from crlvreader.errors import DocumentReadError

LOGGER = logging.getLogger(__name__)

DUMP_SEPARATOR = " | "


def decode_base64_document(payload: str) -> bytes:
    """Decode the base64 document string sent by clients.

    A ``data:application/pdf;base64,`` prefix is accepted and discarded.
    """
    if payload.startswith("data:") and "," in payload:
        payload = payload.split(",", 1)[1]
    try:
        return base64.b64decode("".join(payload.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        LOGGER.error("Invalid base64 document payload: %s", exc)
        raise DocumentReadError(f"invalid base64: {exc}") from exc


def open_document(data: bytes) -> fitz.Document:
    if not data:
        raise DocumentReadError("empty document")
    try:
        return fitz.open(stream=data, filetype="pdf")
    except Exception as exc:
        LOGGER.error("Failed to open PDF (%d bytes): %s", len(data), exc)
        raise DocumentReadError(str(exc)) from exc


def iter_spans(content: Dict[str, Any]) -> Iterator[str]:
    """Yield span texts from a ``page.get_text("dict")`` structure."""
    for block in content.get("blocks", []):
        # Image blocks carry no lines.
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                yield span.get("text", "")


def extract_fragments(data: bytes, *, page_number: int = 0) -> List[str]:
    """Return the raw text fragments of one page, in drawing order."""
    doc = open_document(data)
    try:
        page_count = len(doc)
        if not 0 <= page_number < page_count:
            raise DocumentReadError(f"page {page_number} out of range ({page_count} pages)")
        try:
            content = doc[page_number].get_text("dict")
        except Exception as exc:
            LOGGER.error("Failed to read page %s: %s", page_number, exc)
            raise DocumentReadError(str(exc)) from exc
    finally:
        doc.close()

    fragments = list(iter_spans(content))
    LOGGER.debug("Read %d fragments from page %d", len(fragments), page_number)
    return fragments


def render_fragment_dump(fragments: Iterable[str]) -> str:
    """Join fragments with a pipe so visual columns stay distinguishable."""
    return DUMP_SEPARATOR.join(fragments)
