"""Base class for bank variants."""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from boleto_codec.models.boleto import Boleto
from boleto_codec.models.campo_livre import CampoLivreParts
from boleto_codec.models.nosso_numero import NossoNumero


class BankVariant(ABC):
    """Capability set every bank implementation provides.

    One variant exists per institution. Variants are looked up by bank code
    through :class:`~boleto_codec.banks.registry.BankRegistry`.
    """

    @property
    @abstractmethod
    def bank_code(self) -> str:
        """Three-digit FEBRABAN code, e.g. ``"748"``."""
        ...

    @property
    @abstractmethod
    def bank_name(self) -> str:
        """Upper-case institution name."""
        ...

    @abstractmethod
    def nosso_numero(self, boleto: Boleto) -> NossoNumero:
        """Return the boleto's Nosso Número, deriving it on first use."""
        ...

    @abstractmethod
    def campo_livre(self, boleto: Boleto) -> str:
        """Return the boleto's 25-digit campo livre, deriving it on first use."""
        ...

    @abstractmethod
    def parse_campo_livre(self, raw: str, strict: bool = False) -> CampoLivreParts:
        """Split a campo livre produced by this bank."""
        ...

    @abstractmethod
    def to_remote(self, boleto: Boleto) -> dict[str, Any]:
        """Build the bank API request payload for ``boleto``."""
        ...

    @abstractmethod
    def from_remote(
        self, payload: Mapping[str, Any], context: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Turn a bank API payload into ``Boleto`` constructor parameters."""
        ...

    def build_from_remote(
        self, payload: Mapping[str, Any], context: Mapping[str, Any] | None = None
    ) -> Boleto:
        """Build a :class:`Boleto` from a bank API payload."""
        params = self.from_remote(payload, context)
        params.setdefault("bank_code", self.bank_code)
        return Boleto(**params)
