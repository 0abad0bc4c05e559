"""Domain models for boleto generation and parsing."""

from boleto_codec.models.account import AccountIdentity
from boleto_codec.models.base import Pessoa
from boleto_codec.models.boleto import Boleto, validate_byte
from boleto_codec.models.campo_livre import CAMPO_LIVRE_LENGTH, CampoLivreParts
from boleto_codec.models.derived import DerivedField
from boleto_codec.models.enums import (
    LayoutRemessa,
    Situacao,
    TipoCobranca,
    TipoImpressao,
    TipoPessoa,
)
from boleto_codec.models.nosso_numero import NossoNumero

__all__ = [
    "AccountIdentity",
    "Boleto",
    "CAMPO_LIVRE_LENGTH",
    "CampoLivreParts",
    "DerivedField",
    "LayoutRemessa",
    "NossoNumero",
    "Pessoa",
    "Situacao",
    "TipoCobranca",
    "TipoImpressao",
    "TipoPessoa",
    "validate_byte",
]
