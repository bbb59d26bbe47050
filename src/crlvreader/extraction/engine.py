"""CRLV extraction pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from crlvreader.errors import ExtractionFailed
from crlvreader.extraction.anchor import find_anchor
from crlvreader.extraction.layout import CRLV_DIGITAL, LayoutProfile
from crlvreader.extraction.normalizer import normalize_raw
from crlvreader.extraction.positional import extract_raw
from crlvreader.ingestion.pdf_loader import extract_fragments
from crlvreader.models import ParsedVehicleDocument, RawExtraction
from crlvreader.utils.text import tokenize

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Outcome of one pipeline run, successful or not."""

    document: ParsedVehicleDocument
    raw: RawExtraction
    anchor_index: Optional[int]
    token_count: int
    layout: str
    layout_verified: bool

    @property
    def succeeded(self) -> bool:
        return is_valid(self.document)


def is_valid(document: ParsedVehicleDocument) -> bool:
    """A document is usable when at least one identifier was recovered."""
    return document.has_identifier


def assemble(document: ParsedVehicleDocument) -> ParsedVehicleDocument:
    if not is_valid(document):
        raise ExtractionFailed()
    return document


class CrlvExtractor:
    """Runs tokenization, anchoring, offset lookup and normalization."""

    def __init__(
        self,
        layout: LayoutProfile = CRLV_DIGITAL,
        *,
        page_number: int = 0,
        verify_layout: bool = True,
    ) -> None:
        self.layout = layout
        self.page_number = page_number
        self.verify_layout = verify_layout

    def run(self, tokens: Sequence[str]) -> ExtractionResult:
        """Extract from an already tokenized stream."""
        anchor = find_anchor(tokens)
        if anchor is None:
            LOGGER.warning("No RENAVAM anchor among %d tokens", len(tokens))
            raw = RawExtraction()
            return ExtractionResult(
                document=normalize_raw(raw),
                raw=raw,
                anchor_index=None,
                token_count=len(tokens),
                layout=self.layout.name,
                layout_verified=False,
            )

        LOGGER.debug("RENAVAM anchor at token %d of %d", anchor, len(tokens))
        verified = True
        if self.verify_layout:
            verified = self.layout.matches(tokens, anchor)
            if not verified:
                LOGGER.warning(
                    "Tokens around anchor %d do not fit layout %s; fields may be shifted",
                    anchor,
                    self.layout.name,
                )

        raw = extract_raw(tokens, anchor, self.layout.offsets)
        return ExtractionResult(
            document=normalize_raw(raw),
            raw=raw,
            anchor_index=anchor,
            token_count=len(tokens),
            layout=self.layout.name,
            layout_verified=verified,
        )

    def run_fragments(self, fragments: Iterable[str]) -> ExtractionResult:
        return self.run(tokenize(fragments))

    def run_bytes(self, data: bytes) -> ExtractionResult:
        fragments: List[str] = extract_fragments(data, page_number=self.page_number)
        return self.run_fragments(fragments)

    def parse_tokens(self, tokens: Sequence[str]) -> ParsedVehicleDocument:
        return assemble(self.run(tokens).document)

    def parse(self, data: bytes) -> ParsedVehicleDocument:
        """Extract a document from PDF bytes.

        Raises ``DocumentReadError`` when the PDF cannot be read and
        ``ExtractionFailed`` when no plate, chassis or renavam was found.
        """
        return assemble(self.run_bytes(data).document)


def parse_crlv(data: bytes, *, layout: LayoutProfile = CRLV_DIGITAL) -> ParsedVehicleDocument:
    return CrlvExtractor(layout).parse(data)
