"""Offset tables describing where each field sits relative to the anchor."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

from crlvreader.errors import UnknownLayoutError
from crlvreader.extraction.positional import lookup
from crlvreader.models import VehicleField

LOGGER = logging.getLogger(__name__)

PLATE_PATTERN = re.compile(r"[A-Z]{3}[0-9][A-Z0-9][0-9]{2}")
YEAR_PATTERN = re.compile(r"(19|20)[0-9]{2}")


@dataclass(frozen=True)
class LayoutProfile:
    """Named offset table plus the neighbour patterns that confirm it fits.

    ``signature`` lists fields whose token is expected to match a pattern
    when the document really follows this layout. It is only used to flag
    drift; extraction itself never depends on it.
    """

    name: str
    offsets: Mapping[VehicleField, int]
    signature: Mapping[VehicleField, re.Pattern[str]] = field(default_factory=dict)
    threshold: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "offsets", MappingProxyType(dict(self.offsets)))
        object.__setattr__(self, "signature", MappingProxyType(dict(self.signature)))

    def token_at(self, tokens: Sequence[str], anchor: int, target: VehicleField) -> Optional[str]:
        return lookup(tokens, anchor + self.offsets[target])

    def signature_score(self, tokens: Sequence[str], anchor: int) -> float:
        """Fraction of signature checks satisfied around ``anchor``."""
        if not self.signature:
            return 1.0
        passed = 0
        for target, pattern in self.signature.items():
            token = self.token_at(tokens, anchor, target)
            if token is not None and pattern.fullmatch(token.strip().upper()):
                passed += 1
            else:
                LOGGER.debug("Layout %s: %s token %r does not match", self.name, target.value, token)
        return passed / len(self.signature)

    def matches(self, tokens: Sequence[str], anchor: int) -> bool:
        return self.signature_score(tokens, anchor) >= self.threshold

    def describe(self) -> Dict[str, int]:
        return {target.wire_name: offset for target, offset in self.offsets.items()}


CRLV_DIGITAL = LayoutProfile(
    name="crlv-digital",
    offsets={
        VehicleField.RENAVAM: 0,
        VehicleField.PLACA: 1,
        VehicleField.ANO_FABRICACAO: 3,
        VehicleField.ANO_MODELO: 4,
        VehicleField.MARCA_MODELO_VERSAO: 8,
        VehicleField.TIPO: 9,
        VehicleField.CHASSI: 11,
        VehicleField.COR: 12,
        VehicleField.COMBUSTIVEL: 13,
        VehicleField.LOCAL_REGISTRO: 25,
    },
    signature={
        VehicleField.PLACA: PLATE_PATTERN,
        VehicleField.ANO_FABRICACAO: YEAR_PATTERN,
        VehicleField.ANO_MODELO: YEAR_PATTERN,
    },
)

DEFAULT_LAYOUT = CRLV_DIGITAL.name

LAYOUTS: Dict[str, LayoutProfile] = {CRLV_DIGITAL.name: CRLV_DIGITAL}


def get_layout(name: str) -> LayoutProfile:
    try:
        return LAYOUTS[name]
    except KeyError:
        raise UnknownLayoutError(name) from None


def layout_names() -> List[str]:
    return sorted(LAYOUTS)
