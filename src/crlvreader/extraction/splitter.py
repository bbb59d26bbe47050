"""Split the packed "MARCA/MODELO VERSAO" token."""

from __future__ import annotations

from typing import NamedTuple, Optional


class MakeModelTrim(NamedTuple):
    marca: Optional[str]
    modelo: Optional[str]
    versao: Optional[str]


def _blank_to_none(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


def split_make_model_trim(value: Optional[str]) -> MakeModelTrim:
    """Break a make/model/trim token into its parts.

    Make and the remainder are separated by the first ``/``; model and trim
    by the first space of the remainder. Trims may contain further spaces,
    so only the first occurrence of each delimiter counts.
    """
    if value is None:
        return MakeModelTrim(None, None, None)

    if "/" not in value:
        return MakeModelTrim(_blank_to_none(value), None, None)

    marca, rest = value.split("/", 1)
    if " " in rest:
        modelo, versao = rest.split(" ", 1)
        return MakeModelTrim(_blank_to_none(marca), _blank_to_none(modelo), _blank_to_none(versao))
    return MakeModelTrim(_blank_to_none(marca), _blank_to_none(rest), None)
