"""Bank variants and their registry."""

from boleto_codec.banks.base import BankVariant
from boleto_codec.banks.registry import BankRegistry, create_default_registry
from boleto_codec.banks.sicredi import SicrediBank

__all__ = ["BankRegistry", "BankVariant", "SicrediBank", "create_default_registry"]
