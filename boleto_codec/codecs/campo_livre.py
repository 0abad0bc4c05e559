"""Campo livre codec for Sicredi (bank 748).

The campo livre fills positions 20-44 of the barcode. Sicredi lays it out
as::

    [0]      1 = registered, 3 = unregistered
    [1]      carteira
    [2:11]   Nosso Número (year, byte, sequence, dv)
    [11:15]  agencia
    [15:17]  posto
    [17:22]  codigo_cliente
    [22:24]  "10"
    [24]     modulo-11 dv over [0:24]
"""

from boleto_codec.checksum import modulo11
from boleto_codec.exceptions import MalformedInputError
from boleto_codec.formatting import pad
from boleto_codec.logging import get_logger
from boleto_codec.models.account import AccountIdentity
from boleto_codec.models.campo_livre import CAMPO_LIVRE_LENGTH, CampoLivreParts
from boleto_codec.models.nosso_numero import NossoNumero

logger = get_logger(__name__)

FLAG_REGISTRADO = "1"
FLAG_SEM_REGISTRO = "3"
FILLER = "10"


class CampoLivreCodec:
    """Assemble and parse the 25-digit Sicredi campo livre."""

    def encode(
        self,
        registered: bool,
        carteira: str,
        nosso_numero: NossoNumero,
        account: AccountIdentity,
    ) -> str:
        """Build the campo livre.

        Parameters
        ----------
        registered : bool
            Whether the boleto is registered with the bank.
        carteira : str
            One-digit wallet code.
        nosso_numero : NossoNumero
            Identifier from :class:`NossoNumeroGenerator`.
        account : AccountIdentity
            Beneficiary account.

        Returns
        -------
        str
            25 digits.
        """
        campo = FLAG_REGISTRADO if registered else FLAG_SEM_REGISTRO
        campo += pad(carteira, 1)
        campo += nosso_numero.digits
        campo += pad(account.agencia, 4)
        campo += pad(account.posto, 2)
        campo += pad(account.codigo_cliente, 5)
        campo += FILLER
        campo += str(modulo11(campo))

        logger.debug("Encoded campo livre %s", campo, extra={"campo_livre": campo})
        return campo

    def parse(self, raw: str, strict: bool = False) -> CampoLivreParts:
        """Split a campo livre into its fields.

        Fields are read by offset only. With ``strict`` the registration
        flag, the "10" filler and the trailing check digit are verified too.

        Raises
        ------
        MalformedInputError
            If ``raw`` is not 25 ASCII digits, or ``strict`` is set and one
            of the structural checks fails.
        """
        _check_digits(raw)
        if strict:
            self.validate(raw)

        return CampoLivreParts(
            registrado=raw[0] == FLAG_REGISTRADO,
            carteira=raw[1],
            nosso_numero=raw[2:10],
            nosso_numero_dv=raw[10],
            nosso_numero_full=raw[2:11],
            agencia=raw[11:15],
            posto=raw[15:17],
            codigo_cliente=raw[17:22],
            dv=raw[24],
        )

    def validate(self, raw: str) -> None:
        """Check the flag, filler and check digit of a campo livre."""
        _check_digits(raw)
        if raw[0] not in (FLAG_REGISTRADO, FLAG_SEM_REGISTRO):
            raise MalformedInputError(f"Unknown registration flag {raw[0]!r} in {raw}")
        if raw[22:24] != FILLER:
            raise MalformedInputError(f"Expected {FILLER!r} at offsets 22-23 in {raw}")

        expected = str(modulo11(raw[:24]))
        if raw[24] != expected:
            raise MalformedInputError(
                f"Campo livre check digit mismatch: got {raw[24]}, expected {expected}"
            )


def _check_digits(raw: str) -> None:
    if not isinstance(raw, str) or len(raw) != CAMPO_LIVRE_LENGTH or not (
        raw.isascii() and raw.isdecimal()
    ):
        raise MalformedInputError(
            f"Campo livre must be {CAMPO_LIVRE_LENGTH} digits, got {raw!r}"
        )
