"""Logging setup for boleto-codec.

Modules log through ``get_logger(__name__)``, which keeps every logger under
the ``boleto_codec`` namespace. Boleto identifiers passed with ``extra=``
(see :data:`CONTEXT_FIELDS`) become top-level keys in JSON output.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

LOGGER_NAME = "boleto_codec"

CONTEXT_FIELDS = (
    "bank_code",
    "numero",
    "nosso_numero",
    "campo_livre",
    "situacao",
)

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Configure the root handler and the ``boleto_codec`` logger.

    Parameters
    ----------
    level : str
        Log level name. Unknown names fall back to INFO.
    format_type : str
        "standard" or "json".
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger(LOGGER_NAME).setLevel(log_level)

    # Faker logs every provider lookup at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with boleto context fields lifted out."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``boleto_codec`` namespace.

    Names already inside the package (``__name__`` of a package module) are
    used as-is; anything else, such as a script's ``__main__``, is nested
    below :data:`LOGGER_NAME`.
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
