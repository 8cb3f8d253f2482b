"""Convert canonical literals to each supported numeric width.

Widths:
- ``decimal``: fixed point with a 96-bit coefficient and at most 28
  fractional digits. Digits beyond that capacity are rounded half-to-even;
  values whose integer part does not fit are rejected.
- ``float64``: Python ``float``, correctly rounded from the decimal text.
- ``float32``: IEEE-754 binary32, correctly rounded from the decimal text.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Callable
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from ..models.literal import NumericWidth, ParseError
from .errors import LiteralRejected

DECIMAL_MAX = Decimal(2**96 - 1)
DECIMAL_MAX_SCALE = 28

# Enough room for a 29-digit integer part plus 28 fractional digits
_QUANTIZE_PRECISION = 64

_FLOAT32 = struct.Struct("<f")
_FLOAT32_BITS = struct.Struct("<I")
_FLOAT32_MAX = _FLOAT32.unpack(_FLOAT32_BITS.pack(0x7F7FFFFF))[0]
# Halfway between the largest binary32 value and 2**128
_FLOAT32_OVERFLOW_EDGE = 2.0**128 - 2.0**103


def to_decimal(canonical: str) -> Decimal:
    value = Decimal(canonical)
    if value.copy_abs() > DECIMAL_MAX:
        raise LiteralRejected(ParseError.OVERFLOW)

    exponent = value.as_tuple().exponent
    scale = min(-exponent, DECIMAL_MAX_SCALE) if exponent < 0 else 0

    with localcontext() as ctx:
        ctx.prec = _QUANTIZE_PRECISION
        while scale > 0:
            fitted = value.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_EVEN)
            if fitted.scaleb(scale).copy_abs() <= DECIMAL_MAX:
                return fitted
            scale -= 1
        # |value| <= DECIMAL_MAX, so its nearest integer fits as well
        return value.quantize(Decimal(1), rounding=ROUND_HALF_EVEN)


def to_float64(canonical: str) -> float:
    value = float(canonical)
    if math.isinf(value):
        raise LiteralRejected(ParseError.OVERFLOW)
    return value


def _float32_neighbour(magnitude: float, upward: bool) -> float:
    """Next binary32 value after the non-negative ``magnitude``."""
    bits = _FLOAT32_BITS.unpack(_FLOAT32.pack(magnitude))[0]
    return _FLOAT32.unpack(_FLOAT32_BITS.pack(bits + 1 if upward else bits - 1))[0]


def to_float32(canonical: str) -> float:
    """Round the decimal text to the nearest binary32 value, ties to even.

    Narrowing the float64 value is exact unless that value sits on a binary32
    halfway point; only then is the decimal text consulted to pick a side.
    """
    double = to_float64(canonical)
    magnitude = abs(double)
    try:
        single = _FLOAT32.unpack(_FLOAT32.pack(magnitude))[0]
    except OverflowError:
        if magnitude != _FLOAT32_OVERFLOW_EDGE or Decimal(canonical).copy_abs() >= Decimal(magnitude):
            raise LiteralRejected(ParseError.OVERFLOW) from None
        single = _FLOAT32_MAX

    if single != magnitude:
        other = _float32_neighbour(single, upward=magnitude > single)
        if (single + other) / 2 == magnitude:
            exact = Decimal(canonical).copy_abs()
            halfway = Decimal(magnitude)
            if exact != halfway:
                single = max(single, other) if exact > halfway else min(single, other)
    return math.copysign(single, double)


CONVERTERS: dict[NumericWidth, Callable[[str], Decimal | float]] = {
    NumericWidth.DECIMAL: to_decimal,
    NumericWidth.FLOAT32: to_float32,
    NumericWidth.FLOAT64: to_float64,
}

DEFAULTS: dict[NumericWidth, Decimal | float] = {
    NumericWidth.DECIMAL: Decimal(0),
    NumericWidth.FLOAT32: 0.0,
    NumericWidth.FLOAT64: 0.0,
}


def convert(canonical: str, width: NumericWidth) -> Decimal | float:
    """Convert ``canonical`` to ``width`` or raise ``LiteralRejected``."""
    return CONVERTERS[width](canonical)


def default_value(width: NumericWidth) -> Decimal | float:
    """Value returned alongside a failed parse for ``width``."""
    return DEFAULTS[width]
