"""Boleto model carried between the bank variants and callers."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from boleto_codec.exceptions import InvalidArgumentError
from boleto_codec.models.account import AccountIdentity
from boleto_codec.models.base import Pessoa
from boleto_codec.models.derived import DerivedField
from boleto_codec.models.enums import Situacao

BYTE_MIN = 1
BYTE_MAX = 9


@dataclass
class Boleto:
    """Payment slip issued for one beneficiary account.

    ``nosso_numero`` and ``campo_livre`` are derived slots. They accept a
    plain string at construction (a value returned by the bank API or set by
    the caller), in which case they start frozen and are never recomputed.
    A blank string counts as unset. Otherwise the bank variant derives them
    on first use.

    ``carteira``, ``byte``, ``tipo_cobranca`` and ``tipo_impressao`` left as
    ``None`` are filled from the bank variant configuration.
    """

    account: AccountIdentity
    beneficiario: Pessoa
    bank_code: str = "748"
    numero: str = ""
    numero_documento: str = ""
    valor: Decimal = Decimal("0")
    data_documento: date = field(default_factory=date.today)
    data_vencimento: date | None = None
    especie_doc: str = "DM"
    pagador: Pessoa | None = None
    sacador_avalista: Pessoa | None = None
    descricao_demonstrativo: list[str] = field(default_factory=list)
    instrucoes: list[str] = field(default_factory=list)
    carteira: str | None = None
    byte: int | None = None
    registro: bool = True
    tipo_cobranca: str | None = None
    tipo_impressao: str | None = None
    situacao: Situacao | str | None = None
    nosso_numero: DerivedField[str] = field(default_factory=DerivedField)
    campo_livre: DerivedField[str] = field(default_factory=DerivedField)

    def __post_init__(self) -> None:
        if not isinstance(self.nosso_numero, DerivedField):
            self.nosso_numero = DerivedField(_as_text(self.nosso_numero))
        if not isinstance(self.campo_livre, DerivedField):
            self.campo_livre = DerivedField(_as_text(self.campo_livre))
        if not isinstance(self.valor, Decimal):
            self.valor = Decimal(str(self.valor))
        if self.byte is not None:
            validate_byte(self.byte)
        self.numero = str(self.numero)
        if not self.numero_documento:
            self.numero_documento = self.numero


def validate_byte(byte: int) -> int:
    """Check that ``byte`` is an integer in 1-9."""
    if isinstance(byte, bool) or not isinstance(byte, int) or not BYTE_MIN <= byte <= BYTE_MAX:
        raise InvalidArgumentError(
            f"Byte must be between {BYTE_MIN} and {BYTE_MAX}, got {byte!r}"
        )
    return byte


def _as_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
