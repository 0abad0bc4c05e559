"""Fixed-width and display formatting helpers."""

import re
from decimal import Decimal, InvalidOperation

from boleto_codec.exceptions import InvalidArgumentError

_NON_DIGITS = re.compile(r"\D")


def only_numbers(value: object) -> str:
    """Strip every non-digit character from ``value``."""
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))


def pad(value: object, width: int) -> str:
    """Zero-left-pad ``value`` to ``width`` digits, keeping the rightmost ones.

    Parameters
    ----------
    value : object
        Integer or digit string.
    width : int
        Declared field width (must be positive).

    Returns
    -------
    str
        Exactly ``width`` digits.

    Raises
    ------
    InvalidArgumentError
        If ``width`` is not positive or ``value`` has non-digit characters.
    """
    if not isinstance(width, int) or width <= 0:
        raise InvalidArgumentError(f"Width must be a positive integer, got {width!r}")

    text = str(value).strip() if value is not None else ""
    if text and not text.isdecimal():
        raise InvalidArgumentError(f"Value {value!r} is not numeric")

    return text.rjust(width, "0")[-width:]


def mask(digits: str, pattern: str) -> str:
    """Render ``digits`` through a ``#`` placeholder pattern.

    Example: ``mask("232000010", "##/######-#")`` gives ``"23/200001-0"``.
    Placeholders beyond the available digits are dropped.
    """
    chars = iter(digits)
    out = []
    for token in pattern:
        if token == "#":
            char = next(chars, None)
            if char is None:
                break
            out.append(char)
        else:
            out.append(token)
    return "".join(out)


def format_amount(value: object) -> str:
    """Format an amount with two decimals and no thousands separator."""
    try:
        amount = Decimal(str(value)).quantize(Decimal("0.01"))
    except InvalidOperation as exc:
        raise InvalidArgumentError(f"Invalid amount: {value!r}") from exc
    return str(amount)
