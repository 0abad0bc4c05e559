"""Weighted modulo-11 check digit shared by every bank variant."""


def modulo11(digits: str, base: int = 9) -> int:
    """Compute the modulo-11 check digit of a digit string.

    Weights run from 2 up to ``base`` starting at the rightmost digit and
    wrap back to 2. The digit is ``(sum * 10) % 11``; a result of 10 maps
    to 0.

    Parameters
    ----------
    digits : str
        Digit string to check.
    base : int
        Highest weight before the cycle restarts (default 9).

    Returns
    -------
    int
        Single check digit in the range 0-9.

    Raises
    ------
    TypeError
        If ``digits`` is not a string.
    ValueError
        If ``digits`` is empty or has non-digit characters.
    """
    if not isinstance(digits, str):
        raise TypeError(f"modulo11 expects str, got {type(digits).__name__}")
    if not digits or not digits.isdecimal():
        raise ValueError(f"modulo11 expects a digit string, got {digits!r}")

    total = 0
    factor = 2
    for char in reversed(digits):
        total += int(char) * factor
        factor = 2 if factor == base else factor + 1

    digit = (total * 10) % 11
    return 0 if digit == 10 else digit
