"""Tests for positional field lookups."""

from __future__ import annotations

from typing import List

import pytest

from crlvreader.extraction.layout import CRLV_DIGITAL
from crlvreader.extraction.positional import extract_raw, lookup
from crlvreader.models import RawExtraction, VehicleField

from conftest import ANCHOR_INDEX


class TestLookup:
    """Test lookup function."""

    def test_in_range(self) -> None:
        assert lookup(["a", "b", "c"], 1) == "b"

    @pytest.mark.parametrize("index", [-1, -5, 3, 100])
    def test_out_of_range(self, index: int) -> None:
        """Should return None rather than raise or wrap around."""
        assert lookup(["a", "b", "c"], index) is None


class TestExtractRaw:
    """Test extract_raw function."""

    def test_reference_stream(self, crlv_tokens: List[str]) -> None:
        """Should copy the token at each offset."""
        raw = extract_raw(crlv_tokens, ANCHOR_INDEX, CRLV_DIGITAL.offsets)

        assert raw.renavam == "12345678901"
        assert raw.placa == "ABC1D23"
        assert raw.ano_fabricacao == "2020"
        assert raw.ano_modelo == "2021"
        assert raw.marca_modelo_versao == "TOYOTA/COROLLA SEG18VVT"
        assert raw.tipo == "PASSAGEIRO AUTOMOVEL"
        assert raw.chassi == "9BWZZZ377VT004251"
        assert raw.cor == "PRETO"
        assert raw.combustivel == "GASOLINA"
        assert raw.local_registro == "SAO PAULO SP"

    def test_no_anchor(self, crlv_tokens: List[str]) -> None:
        """Should give an all-null extraction without an anchor."""
        assert extract_raw(crlv_tokens, None, CRLV_DIGITAL.offsets) == RawExtraction()

    def test_truncated_stream(self) -> None:
        """Missing trailing fields should become None."""
        tokens = ["12345678901", "ABC1D23", "2024", "2020", "2021"]

        raw = extract_raw(tokens, 0, CRLV_DIGITAL.offsets)

        assert raw.renavam == "12345678901"
        assert raw.ano_modelo == "2021"
        assert raw.marca_modelo_versao is None
        assert raw.chassi is None
        assert raw.local_registro is None

    def test_negative_offsets(self) -> None:
        """Offsets before the start of the stream should become None."""
        offsets = {VehicleField.RENAVAM: 0, VehicleField.PLACA: -3}

        raw = extract_raw(["12345678901", "ABC1D23"], 0, offsets)

        assert raw.renavam == "12345678901"
        assert raw.placa is None

    @pytest.mark.parametrize("anchor", [-50, -1, 0, 3, 7, 1000])
    @pytest.mark.parametrize("length", [0, 1, 8, 40])
    def test_never_raises(self, anchor: int, length: int) -> None:
        """Any anchor and stream length should be safe."""
        tokens = [f"T{i}" for i in range(length)]

        raw = extract_raw(tokens, anchor, CRLV_DIGITAL.offsets)

        for target, offset in CRLV_DIGITAL.offsets.items():
            index = anchor + offset
            expected = tokens[index] if 0 <= index < length else None
            assert raw.get(target) == expected
