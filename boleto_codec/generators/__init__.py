"""Nosso Número generation and sample data generators."""

from boleto_codec.generators.boleto import BoletoGenerator
from boleto_codec.generators.nosso_numero import NossoNumeroGenerator
from boleto_codec.generators.pessoa import PessoaGenerator

__all__ = ["BoletoGenerator", "NossoNumeroGenerator", "PessoaGenerator"]
