"""Mapping between :class:`Boleto` and the Sicredi cobrança API payload."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from boleto_codec.exceptions import MalformedInputError, MissingContextError
from boleto_codec.formatting import format_amount, only_numbers
from boleto_codec.logging import get_logger
from boleto_codec.mappers.serialization import compact, serialize_value
from boleto_codec.models.base import Pessoa
from boleto_codec.models.boleto import Boleto
from boleto_codec.models.enums import Situacao, TipoCobranca, TipoPessoa

logger = get_logger(__name__)

ESPECIE_OUTROS = "OUTROS"

ESPECIES_API: dict[str, str] = {
    "DMI": "DUPLICATA_MERCANTIL_INDICACAO",
    "DM": "DUPLICATA_MERCANTIL_INDICACAO",
    "DR": "DUPLICATA_RURAL",
    "NP": "NOTA_PROMISSORIA",
    "NR": "NOTA_PROMISSORIA_RURAL",
    "NS": "NOTA_SEGUROS",
    "RC": "RECIBO",
    "LC": "LETRA_CAMBIO",
    "ND": "NOTA_DEBITO",
    "DSI": "DUPLICATA_SERVICO_INDICACAO",
    "OS": "OUTROS",
    "BP": "BOLETO_PROPOSTA",
    "CC": "CARTAO_CREDITO",
    "BD": "BOLETO_DEPOSITO",
}

SITUACOES_API: dict[str, Situacao] = {
    "LIQUIDADO": Situacao.PAGO,
    "BAIXADO": Situacao.BAIXADO,
    "EM_ABERTO": Situacao.ABERTO,
    "VENCIDO": Situacao.ABERTO,
    "PROTESTADO": Situacao.PROTESTADO,
}

REQUIRED_CONTEXT = ("beneficiario", "account")


def tipo_pessoa(documento: str) -> TipoPessoa:
    """CNPJ (14 digits) is a legal entity; anything else a natural person."""
    if len(only_numbers(documento)) == 14:
        return TipoPessoa.PESSOA_JURIDICA
    return TipoPessoa.PESSOA_FISICA


def dotted_get(data: Mapping[str, Any], path: str) -> Any:
    """Read ``a.b.c`` from nested mappings; missing leaves give ``None``.

    Flat keys that already contain dots (``{"pagador.nome": ...}``) are
    honoured before walking the nested structure.
    """
    if path in data:
        return data[path]
    current: Any = data
    for segment in path.split("."):
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]
    return current


class SicrediApiMapper:
    """Translate boletos to and from the Sicredi API vocabulary.

    Parameters
    ----------
    tipo_cobranca : str
        Charge type sent when the boleto does not set one.
    """

    def __init__(self, tipo_cobranca: str = TipoCobranca.HIBRIDO.value) -> None:
        self.tipo_cobranca = tipo_cobranca

    def especie_documento(self, especie_doc: str) -> str:
        """API espécie for an internal espécie code, ``OUTROS`` if unknown."""
        especie = ESPECIES_API.get(especie_doc)
        if especie is None:
            logger.debug("Espécie %r has no API code, using %s", especie_doc, ESPECIE_OUTROS)
            return ESPECIE_OUTROS
        return especie

    def to_remote(self, boleto: Boleto) -> dict[str, Any]:
        """Build the request payload for registering ``boleto``.

        Keys whose value is ``None`` or empty are left out. The
        ``beneficiarioFinal`` block is present only when the boleto has a
        sacador/avalista.
        """
        pagador = self._pagador_block(boleto.pagador) if boleto.pagador else None
        beneficiario_final = (
            self._beneficiario_final_block(boleto.sacador_avalista)
            if boleto.sacador_avalista
            else None
        )
        vencimento = boleto.data_vencimento.isoformat() if boleto.data_vencimento else None

        return compact(
            [
                ("codigoBeneficiario", boleto.account.codigo_cliente),
                ("seuNumero", boleto.numero),
                ("valor", format_amount(boleto.valor)),
                ("dataVencimento", vencimento),
                ("especieDocumento", self.especie_documento(boleto.especie_doc)),
                ("tipoCobranca", serialize_value(boleto.tipo_cobranca or self.tipo_cobranca)),
                ("pagador", pagador),
                ("beneficiarioFinal", beneficiario_final),
                ("informativos", [line for line in boleto.descricao_demonstrativo if line]),
                ("mensagens", [line for line in boleto.instrucoes if line]),
            ]
        )

    def from_remote(
        self,
        payload: Mapping[str, Any],
        context: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Turn an API response into :class:`Boleto` constructor parameters.

        Parameters
        ----------
        payload : Mapping[str, Any]
            Decoded API response, nested or with dotted keys.
        context : Mapping[str, Any] | None
            Values the payload cannot provide. Must include ``beneficiario``
            and ``account``; entries override values read from the payload.

        Returns
        -------
        dict[str, Any]
            Keyword arguments for ``Boleto(**params)``.

        Raises
        ------
        MissingContextError
            If ``beneficiario`` or ``account`` is missing from ``context``.
        MalformedInputError
            If ``valor`` or ``dataVencimento`` cannot be parsed.
        """
        context = context or {}
        missing = [key for key in REQUIRED_CONTEXT if key not in context]
        if missing:
            raise MissingContextError(f"Missing context: {', '.join(missing)}")

        pagador = compact(
            [
                ("nome", dotted_get(payload, "pagador.nome")),
                ("documento", dotted_get(payload, "pagador.documento")),
                ("endereco", dotted_get(payload, "pagador.endereco")),
                ("cidade", dotted_get(payload, "pagador.cidade")),
                ("uf", dotted_get(payload, "pagador.uf")),
                ("cep", dotted_get(payload, "pagador.cep")),
            ]
        )
        seu_numero = dotted_get(payload, "seuNumero")

        params = compact(
            [
                ("situacao", self._situacao(dotted_get(payload, "situacao"))),
                ("nosso_numero", dotted_get(payload, "nossoNumero")),
                ("valor", self._valor(dotted_get(payload, "valor"))),
                ("numero", seu_numero),
                ("numero_documento", seu_numero),
                ("data_vencimento", self._data(dotted_get(payload, "dataVencimento"))),
                ("pagador", Pessoa.from_dict(pagador) if pagador else None),
            ]
        )
        params.update(context)
        return params

    def _pagador_block(self, pessoa: Pessoa) -> dict[str, Any]:
        return compact(
            [
                ("tipoPessoa", tipo_pessoa(pessoa.documento).value),
                ("documento", pessoa.documento_numerico),
                ("nome", pessoa.nome),
                ("endereco", pessoa.endereco),
                ("cidade", pessoa.cidade),
                ("uf", pessoa.uf),
                ("cep", only_numbers(pessoa.cep)),
            ]
        )

    def _beneficiario_final_block(self, pessoa: Pessoa) -> dict[str, Any]:
        cep = only_numbers(pessoa.cep)
        return compact(
            [
                ("tipoPessoa", tipo_pessoa(pessoa.documento).value),
                ("documento", pessoa.documento_numerico),
                ("nome", pessoa.nome),
                ("logradouro", pessoa.endereco),
                ("cidade", pessoa.cidade),
                ("uf", pessoa.uf),
                # The API takes this CEP as a number.
                ("cep", int(cep) if cep else None),
            ]
        )

    @staticmethod
    def _situacao(raw: Any) -> Situacao | str | None:
        if raw is None:
            return None
        situacao = SITUACOES_API.get(raw)
        if situacao is None:
            logger.warning(
                "Unknown situacao %r passed through unchanged", raw, extra={"situacao": raw}
            )
            return raw
        return situacao

    @staticmethod
    def _valor(raw: Any) -> Decimal | None:
        if raw is None or raw == "":
            return None
        try:
            return Decimal(str(raw))
        except InvalidOperation as exc:
            raise MalformedInputError(f"Invalid valor {raw!r}") from exc

    @staticmethod
    def _data(raw: Any) -> date | None:
        if not raw:
            return None
        try:
            return datetime.strptime(str(raw), "%Y-%m-%d").date()
        except ValueError as exc:
            raise MalformedInputError(f"Invalid dataVencimento {raw!r}") from exc
