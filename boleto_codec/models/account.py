"""Account identity bound to a boleto."""

from dataclasses import dataclass

from boleto_codec.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class AccountIdentity:
    """Beneficiary account at the cooperative.

    Sicredi identifies the beneficiary by three codes:
    - agencia: cooperative branch (4 digits)
    - posto: service post inside the branch (2 digits)
    - codigo_cliente: beneficiary code, usually the account number
      without its check digit (up to 5 digits)
    """

    agencia: str
    posto: str
    codigo_cliente: str

    def __post_init__(self) -> None:
        for name, width in (("agencia", 4), ("posto", 2), ("codigo_cliente", 5)):
            value = str(getattr(self, name))
            if not value.isdecimal() or len(value) > width:
                raise InvalidArgumentError(
                    f"{name} must have at most {width} digits, got {value!r}"
                )
            # Normalise ints passed by callers to their digit string.
            object.__setattr__(self, name, value)
