"""Parsed campo livre components."""

from dataclasses import dataclass

CAMPO_LIVRE_LENGTH = 25


@dataclass(frozen=True)
class CampoLivreParts:
    """Fields recovered from a 25-digit Sicredi campo livre.

    ``convenio``, ``agencia_dv`` and ``conta_corrente_dv`` do not exist in
    this layout and are always ``None``.
    """

    registrado: bool
    carteira: str
    nosso_numero: str  # 8-digit body
    nosso_numero_dv: str
    nosso_numero_full: str  # body + dv
    agencia: str
    posto: str
    codigo_cliente: str
    dv: str
    convenio: str | None = None
    agencia_dv: str | None = None
    conta_corrente_dv: str | None = None
