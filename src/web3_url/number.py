"""Exact exponential notation for wei amounts."""

from __future__ import annotations

from web3_url.errors import InvalidAmountError

__all__ = ["to_exponential"]


def to_exponential(amount: int) -> str:
    """Render a non-negative integer in minimal scientific notation.

    Works on the decimal digit string, so arbitrarily large amounts keep
    every significant digit.

    Args:
        amount: Non-negative integer (wei)

    Returns:
        Notation with a single leading digit, lowercase ``e`` and no ``+``

    Raises:
        InvalidAmountError: If amount is negative or not an integer

    Example:
        >>> to_exponential(2014000000000000000)
        '2.014e18'
        >>> to_exponential(0)
        '0e0'
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmountError("amount", amount, "must be an integer")
    if amount < 0:
        raise InvalidAmountError("amount", amount, "cannot be negative")

    digits = str(amount)
    exponent = len(digits) - 1
    significant = digits.rstrip("0") or "0"
    head, tail = significant[0], significant[1:]
    if tail:
        return f"{head}.{tail}e{exponent}"
    return f"{head}e{exponent}"
