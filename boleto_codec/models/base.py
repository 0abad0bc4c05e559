"""Base models shared by every bank variant."""

from dataclasses import dataclass, fields
from typing import Any

from boleto_codec.formatting import only_numbers


@dataclass
class Pessoa:
    """Party named on a boleto: payer, beneficiary or guarantor.

    Fields follow the Brazilian registry layout:
    - documento: CPF (11 digits) or CNPJ (14 digits), masked or not
    - uf: state abbreviation (SP, RS, ...)
    - cep: postal code, masked or not
    """

    nome: str
    documento: str = ""
    endereco: str = ""
    bairro: str = ""
    cidade: str = ""
    uf: str = ""
    cep: str = ""

    @property
    def documento_numerico(self) -> str:
        """Document digits only."""
        return only_numbers(self.documento)

    @property
    def is_pessoa_juridica(self) -> bool:
        """True when the document is a CNPJ (14 digits)."""
        return len(self.documento_numerico) == 14

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Pessoa":
        """Build from a mapping, ignoring unknown keys and ``None`` values."""
        known = {f.name for f in fields(cls)}
        values = {k: str(v) for k, v in data.items() if k in known and v is not None}
        values.setdefault("nome", "")
        return cls(**values)
