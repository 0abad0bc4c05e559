"""Configuration management for boleto-codec."""

from dataclasses import dataclass, field

from boleto_codec.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class SicrediConfig:
    """Defaults applied to Sicredi boletos that leave a field unset."""

    byte: int = 2
    carteira: str = "1"
    tipo_cobranca: str = "HIBRIDO"
    tipo_impressao: str = "A"
    local_pagamento: str = "Pagável preferencialmente nas cooperativas de crédito do sicredi"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format_type: str = "standard"


@dataclass
class BoletoCodecConfig:
    """Main configuration for boleto-codec."""

    sicredi: SicrediConfig = field(default_factory=SicrediConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    default_bank_code: str = "748"

    @classmethod
    def from_env(cls) -> "BoletoCodecConfig":
        """Create config from environment variables.

        Raises
        ------
        ConfigurationError
            If a variable holds a value of the wrong type or outside its
            allowed set.
        """
        import os

        byte_str = os.getenv("BOLETO_SICREDI_BYTE", "2")
        try:
            byte = int(byte_str)
        except ValueError as exc:
            raise ConfigurationError(f"BOLETO_SICREDI_BYTE must be an integer, got {byte_str!r}") from exc
        if not 1 <= byte <= 9:
            raise ConfigurationError(f"BOLETO_SICREDI_BYTE must be between 1 and 9, got {byte}")

        sicredi = SicrediConfig(
            byte=byte,
            carteira=os.getenv("BOLETO_SICREDI_CARTEIRA", "1"),
            tipo_cobranca=os.getenv("BOLETO_SICREDI_TIPO_COBRANCA", "HIBRIDO"),
            tipo_impressao=os.getenv("BOLETO_SICREDI_TIPO_IMPRESSAO", "A"),
        )

        format_type = os.getenv("BOLETO_LOG_FORMAT", "standard").lower()
        if format_type not in LOG_FORMATS:
            raise ConfigurationError(
                f"BOLETO_LOG_FORMAT must be one of {LOG_FORMATS}, got {format_type!r}"
            )

        return cls(
            sicredi=sicredi,
            logging=LoggingConfig(
                level=os.getenv("BOLETO_LOG_LEVEL", "INFO"),
                format_type=format_type,
            ),
            default_bank_code=os.getenv("BOLETO_DEFAULT_BANK", "748"),
        )
