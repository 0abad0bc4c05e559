"""Campo livre codecs."""

from boleto_codec.codecs.campo_livre import CampoLivreCodec

__all__ = ["CampoLivreCodec"]
