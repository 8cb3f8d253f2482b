"""Locale-free number parsing for literals using ``.`` or ``,`` as decimal separator.

Handles:
- Decimal point: "0.74", "15,019.33" -> 15019.33
- Decimal comma: "000,7832" -> 0.7832, "1.943.100,84" -> 1943100.84
- Grouped integers: "239.482.392.923", "21,500,000"
- Negative: "-0,499"

No locale, currency or whitespace handling: the separator pattern of the
literal alone decides. Malformed input never raises; it yields
``(False, default)`` where the default is ``Decimal(0)`` or ``0.0``.
"""

from __future__ import annotations

from decimal import Decimal

from ..models.literal import NumericWidth, ParseError, ParseOutcome
from .canonical import canonicalize
from .errors import LiteralRejected
from .text_view import TextSource, TextView
from .widths import convert, default_value

ParseInput = TextView | TextSource | None


def _parse(text: ParseInput, width: NumericWidth) -> Decimal | float:
    if text is None:
        raise LiteralRejected(ParseError.EMPTY_OR_NULL)
    canonical, _ = canonicalize(TextView.of(text))
    return convert(canonical, width)


def try_parse(text: ParseInput, width: NumericWidth = NumericWidth.DECIMAL) -> tuple[bool, Decimal | float]:
    """Parse ``text`` into ``width``. Returns ``(success, value)``."""
    try:
        return True, _parse(text, width)
    except LiteralRejected:
        return False, default_value(width)


def try_parse_decimal(text: ParseInput) -> tuple[bool, Decimal]:
    return try_parse(text, NumericWidth.DECIMAL)


def try_parse_float32(text: ParseInput) -> tuple[bool, float]:
    return try_parse(text, NumericWidth.FLOAT32)


def try_parse_float64(text: ParseInput) -> tuple[bool, float]:
    return try_parse(text, NumericWidth.FLOAT64)


def parse_number(text: ParseInput, width: NumericWidth = NumericWidth.DECIMAL) -> ParseOutcome:
    """Like ``try_parse`` but also reports why a literal was rejected.

    On success the outcome carries the canonical literal and the separator
    decision, which ingestion code uses to spot columns mixing conventions.
    """
    if text is None:
        return ParseOutcome(
            success=False, value=default_value(width), width=width, error=ParseError.EMPTY_OR_NULL,
        )
    try:
        canonical, decision = canonicalize(TextView.of(text))
        value = convert(canonical, width)
    except LiteralRejected as exc:
        return ParseOutcome(success=False, value=default_value(width), width=width, error=exc.code)
    return ParseOutcome(
        success=True, value=value, width=width, canonical=canonical, decision=decision,
    )
