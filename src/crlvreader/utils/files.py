"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from crlvreader.errors import DocumentReadError


def iter_pdf_paths(inputs: Iterable[Path]) -> Iterator[Path]:
    """Yield PDF paths from input paths, descending into directories."""
    for item in inputs:
        if item.is_dir():
            yield from iter_pdf_paths(sorted(item.rglob("*.pdf")))
        elif item.is_file() and item.suffix.lower() == ".pdf":
            yield item


def read_document(path: Path, *, max_bytes: int) -> bytes:
    """Read a document from disk, refusing files over ``max_bytes``."""
    try:
        size = path.stat().st_size
        if size > max_bytes:
            raise DocumentReadError(f"{path} is {size} bytes, limit is {max_bytes}")
        return path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(str(exc)) from exc
