from __future__ import annotations
from typing import Tuple

from .table import weight_of

INT_BITS = 64
INT_MAX = (1 << (INT_BITS - 1)) - 1
INT_MIN = -(1 << (INT_BITS - 1))

class GematriaOverflowError(OverflowError):
    """The running sum left the range of the accumulator.

    `value` is the wrapped partial sum at the failing step. It is only
    useful for diagnostics.
    """

    def __init__(self, value: int, message: str = "string is too long"):
        super().__init__(message)
        self.value = value

def _wrap(n: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((n + half) % (1 << bits)) - half

def checked_add(a: int, b: int, *, bits: int = INT_BITS) -> Tuple[int, bool]:
    """Two's complement add of `a` and `b` in a `bits`-wide signed integer.

    Returns (result, ok). ok is False when the result overflowed, in which
    case result is the truncated value.
    """
    result = _wrap(a + b, bits)
    # Overflow iff both operands have the opposite sign of the result.
    if ((a ^ result) & (b ^ result)) < 0:
        return result, False
    return result, True

def value(text: str, *, bits: int = INT_BITS) -> int:
    """
    Gematria value of `text` using the standard encoding.

    Letters are worth 1-9, 10-90, 100-400 in order; final letters are worth
    the same as the non-final form. Non Hebrew characters are ignored.

    Raises GematriaOverflowError if the sum does not fit in `bits` bits.

    Example:
      value("אמת") == 441
    """
    total = 0
    for ch in text:
        total, ok = checked_add(total, weight_of(ch), bits=bits)
        if not ok:
            raise GematriaOverflowError(total)
    return total
