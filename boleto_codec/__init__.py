"""Boleto field encoding, check digits and bank API payload mapping."""

from boleto_codec.banks import BankRegistry, BankVariant, SicrediBank, create_default_registry
from boleto_codec.codecs import CampoLivreCodec
from boleto_codec.generators import NossoNumeroGenerator
from boleto_codec.mappers import SicrediApiMapper
from boleto_codec.models import AccountIdentity, Boleto, NossoNumero, Pessoa

__version__ = "0.1.0"

__all__ = [
    "AccountIdentity",
    "BankRegistry",
    "BankVariant",
    "Boleto",
    "CampoLivreCodec",
    "NossoNumero",
    "NossoNumeroGenerator",
    "Pessoa",
    "SicrediApiMapper",
    "SicrediBank",
    "create_default_registry",
]
