"""Sicredi (748) bank variant."""

from typing import Any, Mapping

from boleto_codec.banks.base import BankVariant
from boleto_codec.codecs.campo_livre import CampoLivreCodec
from boleto_codec.config import SicrediConfig
from boleto_codec.exceptions import InvalidArgumentError
from boleto_codec.formatting import pad
from boleto_codec.generators.nosso_numero import NossoNumeroGenerator
from boleto_codec.logging import get_logger
from boleto_codec.mappers.sicredi_api import SicrediApiMapper
from boleto_codec.models.boleto import Boleto, validate_byte
from boleto_codec.models.campo_livre import CampoLivreParts
from boleto_codec.models.enums import LayoutRemessa, TipoImpressao
from boleto_codec.models.nosso_numero import NossoNumero

logger = get_logger(__name__)

CARTEIRAS = ("A", "1", "2", "3")

ESPECIES_CNAB240: dict[str, str] = {
    "DMI": "03",
    "DM": "05",
    "DR": "06",
    "NP": "12",
    "NR": "13",
    "NS": "16",
    "RC": "17",
    "LC": "07",
    "ND": "19",
    "DSI": "99",
    "OS": "99",
}

ESPECIES_CNAB400: dict[str, str] = {
    "DMI": "A",
    "DM": "A",
    "DR": "B",
    "NP": "C",
    "NR": "D",
    "NS": "E",
    "RC": "G",
    "LC": "H",
    "ND": "I",
    "DSI": "J",
    "OS": "K",
}


class SicrediBank(BankVariant):
    """Boleto encoding for Banco Cooperativo Sicredi.

    Parameters
    ----------
    config : SicrediConfig | None
        Defaults for byte, carteira, tipo de cobrança and tipo de impressão.
    """

    def __init__(self, config: SicrediConfig | None = None) -> None:
        self.config = config or SicrediConfig()
        self._generator = NossoNumeroGenerator()
        self._codec = CampoLivreCodec()
        self._mapper = SicrediApiMapper(tipo_cobranca=self.config.tipo_cobranca)

    @property
    def bank_code(self) -> str:
        return "748"

    @property
    def bank_name(self) -> str:
        return "SICREDI"

    @property
    def local_pagamento(self) -> str:
        return self.config.local_pagamento

    def carteira(self, boleto: Boleto) -> str:
        """Carteira code as encoded; ``A`` is written as ``1``."""
        carteira = str(boleto.carteira or self.config.carteira).upper()
        if carteira not in CARTEIRAS:
            raise InvalidArgumentError(
                f"Carteira {carteira!r} not accepted by Sicredi, use one of {CARTEIRAS}"
            )
        return "1" if carteira == "A" else carteira

    def byte(self, boleto: Boleto) -> int:
        return validate_byte(boleto.byte if boleto.byte is not None else self.config.byte)

    def nosso_numero(self, boleto: Boleto) -> NossoNumero:
        digits = boleto.nosso_numero.get_or_derive(lambda: self._generate(boleto).digits)
        return NossoNumero.from_digits(digits)

    def nosso_numero_boleto(self, boleto: Boleto) -> str:
        """Nosso Número as printed on the slip, e.g. ``23/200001-0``."""
        return self.nosso_numero(boleto).formatted()

    def campo_livre(self, boleto: Boleto) -> str:
        return boleto.campo_livre.get_or_derive(lambda: self._encode(boleto))

    def parse_campo_livre(self, raw: str, strict: bool = False) -> CampoLivreParts:
        return self._codec.parse(raw, strict=strict)

    def agencia_codigo_beneficiario(self, boleto: Boleto) -> str:
        """Agência/código do beneficiário field, ``AAAA.PP.CCCCC``."""
        account = boleto.account
        return f"{pad(account.agencia, 4)}.{pad(account.posto, 2)}.{pad(account.codigo_cliente, 5)}"

    def especie_codigo(self, especie_doc: str, layout: int = LayoutRemessa.CNAB240) -> str | None:
        """Espécie code used in CNAB remessa files, ``None`` if unmapped."""
        if layout == LayoutRemessa.CNAB240:
            return ESPECIES_CNAB240.get(especie_doc)
        if layout == LayoutRemessa.CNAB400:
            return ESPECIES_CNAB400.get(especie_doc)
        raise InvalidArgumentError(f"Unknown remessa layout {layout!r}")

    def to_remote(self, boleto: Boleto) -> dict[str, Any]:
        return self._mapper.to_remote(boleto)

    def from_remote(
        self, payload: Mapping[str, Any], context: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        return self._mapper.from_remote(payload, context)

    def _generate(self, boleto: Boleto) -> NossoNumero:
        sequencia_txt = boleto.numero.strip()
        if not sequencia_txt.isdecimal():
            raise InvalidArgumentError(
                f"Boleto numero must be numeric to derive Nosso Número, got {boleto.numero!r}"
            )
        nosso_numero = self._generator.generate(
            boleto.account,
            ano=boleto.data_documento.strftime("%y"),
            byte=self.byte(boleto),
            sequencia=int(sequencia_txt),
        )
        logger.info(
            "Generated Nosso Número %s for boleto %s",
            nosso_numero.formatted(),
            boleto.numero,
            extra={
                "bank_code": self.bank_code,
                "numero": boleto.numero,
                "nosso_numero": nosso_numero.digits,
            },
        )
        return nosso_numero

    def _encode(self, boleto: Boleto) -> str:
        self._check_required(boleto)
        carteira = self.carteira(boleto)
        return self._codec.encode(
            registered=boleto.registro,
            carteira=carteira,
            nosso_numero=self.nosso_numero(boleto),
            account=boleto.account,
        )

    def _check_required(self, boleto: Boleto) -> None:
        tipo_impressao = boleto.tipo_impressao or self.config.tipo_impressao
        tipo_impressao = getattr(tipo_impressao, "value", tipo_impressao)
        if tipo_impressao not in {t.value for t in TipoImpressao}:
            raise InvalidArgumentError(
                f"Tipo de impressão must be A (normal) or B (carnê), got {tipo_impressao!r}"
            )
        self.byte(boleto)
