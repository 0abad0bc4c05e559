"""Registry of bank variants keyed by bank code.

Adding a bank means writing a :class:`BankVariant` subclass and registering
it in :func:`create_default_registry`.
"""

from boleto_codec.banks.base import BankVariant
from boleto_codec.config import BoletoCodecConfig
from boleto_codec.exceptions import BankNotRegisteredError, InvalidArgumentError


class BankRegistry:
    """Available bank variants."""

    def __init__(self) -> None:
        self._variants: dict[str, BankVariant] = {}

    def register(self, variant: BankVariant) -> None:
        """Register a variant under its bank code.

        Raises
        ------
        InvalidArgumentError
            If a variant is already registered for that code.
        """
        code = variant.bank_code
        if code in self._variants:
            raise InvalidArgumentError(
                f"Bank {code} already registered as {type(self._variants[code]).__name__}; "
                f"cannot register {type(variant).__name__}"
            )
        self._variants[code] = variant

    def get(self, bank_code: str) -> BankVariant:
        """Variant for ``bank_code``.

        Raises
        ------
        BankNotRegisteredError
            If no variant handles that code.
        """
        try:
            return self._variants[str(bank_code).zfill(3)]
        except KeyError:
            raise BankNotRegisteredError(f"No bank variant registered for {bank_code!r}") from None

    @property
    def available_banks(self) -> list[str]:
        """Registered bank codes, sorted."""
        return sorted(self._variants)

    def __contains__(self, bank_code: object) -> bool:
        return str(bank_code).zfill(3) in self._variants

    def __len__(self) -> int:
        return len(self._variants)


def create_default_registry(config: BoletoCodecConfig | None = None) -> BankRegistry:
    """Registry with every bank variant shipped in the package."""
    config = config or BoletoCodecConfig()
    registry = BankRegistry()

    from boleto_codec.banks.sicredi import SicrediBank

    registry.register(SicrediBank(config.sicredi))

    return registry
