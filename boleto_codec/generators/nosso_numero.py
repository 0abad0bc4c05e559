"""Nosso Número generator for Sicredi boletos."""

from boleto_codec.checksum import modulo11
from boleto_codec.exceptions import InvalidArgumentError, OutOfRangeError
from boleto_codec.formatting import pad
from boleto_codec.logging import get_logger
from boleto_codec.models.account import AccountIdentity
from boleto_codec.models.boleto import validate_byte
from boleto_codec.models.nosso_numero import NossoNumero

logger = get_logger(__name__)

SEQUENCIA_WIDTH = 5
SEQUENCIA_MAX = 10**SEQUENCIA_WIDTH - 1


class NossoNumeroGenerator:
    """Derive the 9-digit Nosso Número from account and document data.

    Layout: ``YY`` issue year, ``B`` byte (1-9), ``NNNNN`` document sequence,
    ``D`` modulo-11 check digit computed over
    ``agencia + posto + codigo_cliente + YY + B + NNNNN``.
    """

    def generate(
        self,
        account: AccountIdentity,
        ano: str,
        byte: int,
        sequencia: int,
    ) -> NossoNumero:
        """Generate a Nosso Número.

        Parameters
        ----------
        account : AccountIdentity
            Beneficiary account.
        ano : str
            Two-digit issue year.
        byte : int
            Byte tag, 1-9.
        sequencia : int
            Document sequence, 0-99999.

        Returns
        -------
        NossoNumero
            Identifier with its check digit.

        Raises
        ------
        InvalidArgumentError
            If ``byte`` or ``ano`` are invalid, or ``sequencia`` is negative.
        OutOfRangeError
            If ``sequencia`` has more than five digits.
        """
        validate_byte(byte)
        if not isinstance(ano, str) or len(ano) != 2 or not ano.isdecimal():
            raise InvalidArgumentError(f"Issue year must be 2 digits, got {ano!r}")
        sequencia_txt = self._format_sequencia(sequencia)

        payload = (
            pad(account.agencia, 4)
            + pad(account.posto, 2)
            + pad(account.codigo_cliente, 5)
            + ano
            + str(byte)
            + sequencia_txt
        )
        dv = modulo11(payload)
        logger.debug("Nosso Número dv %s computed over %s", dv, payload)

        return NossoNumero(ano=ano, byte=str(byte), sequencia=sequencia_txt, dv=str(dv))

    @staticmethod
    def _format_sequencia(sequencia: int) -> str:
        if isinstance(sequencia, bool) or not isinstance(sequencia, int):
            raise InvalidArgumentError(f"Sequence must be an integer, got {sequencia!r}")
        if sequencia < 0:
            raise InvalidArgumentError(f"Sequence must not be negative, got {sequencia}")
        if sequencia > SEQUENCIA_MAX:
            raise OutOfRangeError(
                f"Sequence {sequencia} exceeds {SEQUENCIA_WIDTH} digits"
            )
        return pad(sequencia, SEQUENCIA_WIDTH)
