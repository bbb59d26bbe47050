"""Shared fixtures: a reference CRLV token stream and PDFs built from it."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import fitz
import pytest

ANCHOR_INDEX = 2

CRLV_TOKENS: List[str] = [
    "REPUBLICA FEDERATIVA DO BRASIL",
    "CODIGO RENAVAM",
    "12345678901",  # +0 renavam
    "ABC1D23",  # +1 placa
    "2024",
    "2020",  # +3 ano fabricacao
    "2021",  # +4 ano modelo
    "223344556",
    "PARTICULAR",
    "CATEGORIA",
    "TOYOTA/COROLLA SEG18VVT",  # +8 marca/modelo/versao
    "PASSAGEIRO AUTOMOVEL",  # +9 tipo
    "X",
    "9BWZZZ377VT004251",  # +11 chassi
    "PRETO",  # +12 cor
    "GASOLINA",  # +13 combustivel
    "5P",
    "1.8",
    "1250",
    "0",
    "BEM",
    "LOCAL",
    "DATA",
    "MOTOR",
    "CMT",
    "PBT",
    "OBSERVACOES",
    "SAO PAULO SP",  # +25 local registro
    "ASSINADO DIGITALMENTE",
]


def build_pdf(lines: Sequence[str], *, pages: int = 1) -> bytes:
    """Render each line on its own baseline so it becomes one text span."""
    doc = fitz.open()
    try:
        for page_index in range(pages):
            page = doc.new_page()
            if page_index == 0:
                for i, line in enumerate(lines):
                    page.insert_text((40, 40 + i * 14), line, fontsize=9)
            else:
                page.insert_text((40, 40), f"Page {page_index + 1}", fontsize=9)
        return doc.tobytes()
    finally:
        doc.close()


@pytest.fixture
def crlv_tokens() -> List[str]:
    return list(CRLV_TOKENS)


@pytest.fixture
def crlv_pdf_bytes() -> bytes:
    return build_pdf(CRLV_TOKENS)


@pytest.fixture
def unrelated_pdf_bytes() -> bytes:
    return build_pdf(["Meeting notes", "Agenda", "1. Budget", "2. Hiring"])


@pytest.fixture
def crlv_pdf_file(tmp_path: Path, crlv_pdf_bytes: bytes) -> Path:
    path = tmp_path / "crlv.pdf"
    path.write_bytes(crlv_pdf_bytes)
    return path
