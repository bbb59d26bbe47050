"""Field normalization from raw tokens to a ParsedVehicleDocument."""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from crlvreader.extraction.splitter import split_make_model_trim
from crlvreader.models import ParsedVehicleDocument, RawExtraction
from crlvreader.utils.text import clean_upper, parse_int, strip_punctuation


def normalize_fields(
    *,
    placa: Optional[str] = None,
    renavam: Optional[str] = None,
    chassi: Optional[str] = None,
    marca: Optional[str] = None,
    modelo: Optional[str] = None,
    versao: Optional[str] = None,
    cor: Optional[str] = None,
    combustivel: Optional[str] = None,
    tipo: Optional[str] = None,
    local_registro: Optional[str] = None,
    ano_fabricacao: object = None,
    ano_modelo: object = None,
) -> ParsedVehicleDocument:
    return ParsedVehicleDocument(
        placa=clean_upper(placa),
        renavam=renavam,
        chassi=clean_upper(chassi),
        marca=clean_upper(marca),
        modelo=clean_upper(modelo),
        versao=clean_upper(versao),
        cor=clean_upper(cor),
        combustivel=clean_upper(combustivel),
        tipo=clean_upper(strip_punctuation(tipo)),
        local_registro=clean_upper(local_registro),
        ano_fabricacao=parse_int(ano_fabricacao),
        ano_modelo=parse_int(ano_modelo),
    )


def normalize_raw(raw: RawExtraction) -> ParsedVehicleDocument:
    """Split the compound make/model/trim token and normalize every field."""
    marca, modelo, versao = split_make_model_trim(raw.marca_modelo_versao)
    return normalize_fields(
        placa=raw.placa,
        renavam=raw.renavam,
        chassi=raw.chassi,
        marca=marca,
        modelo=modelo,
        versao=versao,
        cor=raw.cor,
        combustivel=raw.combustivel,
        tipo=raw.tipo,
        local_registro=raw.local_registro,
        ano_fabricacao=raw.ano_fabricacao,
        ano_modelo=raw.ano_modelo,
    )


def normalize_document(document: ParsedVehicleDocument) -> ParsedVehicleDocument:
    """Re-apply normalization; a normalized document comes back unchanged."""
    return normalize_fields(**asdict(document))
