"""Exceptions raised by the CRLV reader."""

from __future__ import annotations

READ_FAILURE_MESSAGE = "document could not be read"
NO_DATA_MESSAGE = "no recognizable registration data found in document"


class CrlvReaderError(Exception):
    """Base class for every error surfaced by crlvreader."""


class DocumentReadError(CrlvReaderError):
    """The document bytes could not be decoded into text fragments."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(READ_FAILURE_MESSAGE)
        self.detail = detail


class ExtractionFailed(CrlvReaderError):
    """No identifying field (plate, chassis, renavam) could be recovered."""

    def __init__(self) -> None:
        super().__init__(NO_DATA_MESSAGE)


class UnknownLayoutError(CrlvReaderError, KeyError):
    """Requested layout profile is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown layout: {self.name}"
