"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass

from crlvreader.extraction.layout import DEFAULT_LAYOUT, LayoutProfile, get_layout

MAX_DOCUMENT_BYTES = 10 * 1024 * 1024


@dataclass(slots=True)
class AppConfig:
    layout_name: str = DEFAULT_LAYOUT
    page_number: int = 0
    max_document_bytes: int = MAX_DOCUMENT_BYTES
    verify_layout: bool = True

    def __post_init__(self) -> None:
        if self.page_number < 0:
            raise ValueError("page_number must be >= 0")
        if self.max_document_bytes <= 0:
            raise ValueError("max_document_bytes must be positive")

    def resolve_layout(self) -> LayoutProfile:
        return get_layout(self.layout_name)
