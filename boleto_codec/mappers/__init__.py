"""Bank API payload mappers."""

from boleto_codec.mappers.sicredi_api import SicrediApiMapper, dotted_get, tipo_pessoa

__all__ = ["SicrediApiMapper", "dotted_get", "tipo_pessoa"]
