"""Enumeration types for boleto entities."""

from enum import Enum


class Situacao(str, Enum):
    ABERTO = "ABERTO"
    PAGO = "PAGO"
    BAIXADO = "BAIXADO"
    PROTESTADO = "PROTESTADO"


class TipoPessoa(str, Enum):
    PESSOA_FISICA = "PESSOA_FISICA"
    PESSOA_JURIDICA = "PESSOA_JURIDICA"


class TipoCobranca(str, Enum):
    NORMAL = "NORMAL"
    HIBRIDO = "HIBRIDO"


class TipoImpressao(str, Enum):
    NORMAL = "A"
    CARNE = "B"


class LayoutRemessa(int, Enum):
    CNAB240 = 240
    CNAB400 = 400
