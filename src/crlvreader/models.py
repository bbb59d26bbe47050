"""Core crlvreader data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class VehicleField(str, Enum):
    """Fields read straight from the token stream by position."""

    RENAVAM = "renavam"
    PLACA = "placa"
    ANO_FABRICACAO = "ano_fabricacao"
    ANO_MODELO = "ano_modelo"
    MARCA_MODELO_VERSAO = "marca_modelo_versao"
    TIPO = "tipo"
    CHASSI = "chassi"
    COR = "cor"
    COMBUSTIVEL = "combustivel"
    LOCAL_REGISTRO = "local_registro"

    @property
    def wire_name(self) -> str:
        return _camel_case(self.value)


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True, slots=True)
class RawExtraction:
    """Untouched token per positional field, ``None`` when out of range."""

    renavam: Optional[str] = None
    placa: Optional[str] = None
    ano_fabricacao: Optional[str] = None
    ano_modelo: Optional[str] = None
    marca_modelo_versao: Optional[str] = None
    tipo: Optional[str] = None
    chassi: Optional[str] = None
    cor: Optional[str] = None
    combustivel: Optional[str] = None
    local_registro: Optional[str] = None

    @classmethod
    def from_fields(cls, values: Mapping[VehicleField, Optional[str]]) -> "RawExtraction":
        return cls(**{field.value: value for field, value in values.items()})

    def get(self, field: VehicleField) -> Optional[str]:
        return getattr(self, field.value)


@dataclass(frozen=True, slots=True)
class ParsedVehicleDocument:
    """Normalized registration data recovered from one CRLV."""

    placa: Optional[str] = None
    renavam: Optional[str] = None
    chassi: Optional[str] = None
    marca: Optional[str] = None
    modelo: Optional[str] = None
    versao: Optional[str] = None
    cor: Optional[str] = None
    combustivel: Optional[str] = None
    tipo: Optional[str] = None
    local_registro: Optional[str] = None
    ano_fabricacao: Optional[int] = None
    ano_modelo: Optional[int] = None

    @property
    def has_identifier(self) -> bool:
        """True when plate, chassis or renavam was recovered."""
        return any(value is not None for value in (self.placa, self.chassi, self.renavam))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used by the RPC contract."""
        return {_camel_case(key): value for key, value in asdict(self).items()}
