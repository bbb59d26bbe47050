"""Tests for file utility functions."""

from __future__ import annotations

from pathlib import Path

import pytest

from crlvreader.errors import DocumentReadError
from crlvreader.utils.files import iter_pdf_paths, read_document


class TestIterPdfPaths:
    """Test iter_pdf_paths function."""

    def test_single_pdf_file(self, tmp_path: Path) -> None:
        """Should yield single PDF file."""
        pdf = tmp_path / "crlv.pdf"
        pdf.write_text("dummy")

        paths = list(iter_pdf_paths([pdf]))

        assert paths == [pdf]

    def test_directory_with_pdfs(self, tmp_path: Path) -> None:
        """Should find all PDFs in directory."""
        (tmp_path / "a.pdf").write_text("dummy1")
        (tmp_path / "notes.txt").write_text("text")

        paths = list(iter_pdf_paths([tmp_path]))

        assert [p.name for p in paths] == ["a.pdf"]

    def test_nested_directories(self, tmp_path: Path) -> None:
        """Should find PDFs in nested directories, sorted."""
        subdir = tmp_path / "2024"
        subdir.mkdir()
        (tmp_path / "z.pdf").write_text("root")
        (subdir / "a.pdf").write_text("nested")

        paths = list(iter_pdf_paths([tmp_path]))

        assert paths == sorted([tmp_path / "z.pdf", subdir / "a.pdf"])

    def test_uppercase_suffix_file(self, tmp_path: Path) -> None:
        """Should accept explicitly passed files regardless of suffix case."""
        pdf = tmp_path / "CRLV.PDF"
        pdf.write_text("dummy")

        assert list(iter_pdf_paths([pdf])) == [pdf]

    def test_missing_path(self, tmp_path: Path) -> None:
        """Should skip paths that do not exist."""
        assert list(iter_pdf_paths([tmp_path / "missing.pdf"])) == []


class TestReadDocument:
    """Test read_document function."""

    def test_reads_bytes(self, tmp_path: Path) -> None:
        pdf = tmp_path / "crlv.pdf"
        pdf.write_bytes(b"%PDF-1.4")

        assert read_document(pdf, max_bytes=1024) == b"%PDF-1.4"

    def test_rejects_large_files(self, tmp_path: Path) -> None:
        pdf = tmp_path / "big.pdf"
        pdf.write_bytes(b"x" * 100)

        with pytest.raises(DocumentReadError) as excinfo:
            read_document(pdf, max_bytes=10)
        assert "limit is 10" in (excinfo.value.detail or "")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentReadError) as excinfo:
            read_document(tmp_path / "missing.pdf", max_bytes=10)
        assert isinstance(excinfo.value.__cause__, OSError)
