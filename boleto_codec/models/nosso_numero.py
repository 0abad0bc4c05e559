"""Nosso Número value object."""

from dataclasses import dataclass

from boleto_codec.exceptions import MalformedInputError
from boleto_codec.formatting import mask

NOSSO_NUMERO_LENGTH = 9
NOSSO_NUMERO_MASK = "##/######-#"


@dataclass(frozen=True)
class NossoNumero:
    """Issuer document identifier: year, byte, sequence and check digit."""

    ano: str  # 2 digits
    byte: str  # 1 digit, 1-9
    sequencia: str  # 5 digits, zero padded
    dv: str  # 1 digit

    @property
    def body(self) -> str:
        """The 8 digits before the check digit."""
        return f"{self.ano}{self.byte}{self.sequencia}"

    @property
    def digits(self) -> str:
        """All 9 digits as embedded in the campo livre."""
        return self.body + self.dv

    def formatted(self) -> str:
        """Display form, e.g. ``23/200001-0``."""
        return mask(self.digits, NOSSO_NUMERO_MASK)

    def __str__(self) -> str:
        return self.digits

    @classmethod
    def from_digits(cls, raw: str) -> "NossoNumero":
        """Split a 9-digit Nosso Número into its parts."""
        if not isinstance(raw, str) or len(raw) != NOSSO_NUMERO_LENGTH or not raw.isdecimal():
            raise MalformedInputError(
                f"Nosso Número must be {NOSSO_NUMERO_LENGTH} digits, got {raw!r}"
            )
        return cls(ano=raw[0:2], byte=raw[2], sequencia=raw[3:8], dv=raw[8])
