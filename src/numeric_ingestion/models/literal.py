"""Data types shared by the separator classifier, normalizer and converters.

A literal such as ``"1.943.100,84"`` carries no locale hint; the parser infers
the role of ``.`` and ``,`` from their positions and records that inference as
a ``SeparatorDecision``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class NumericWidth(StrEnum):
    DECIMAL = "decimal"
    FLOAT32 = "float32"
    FLOAT64 = "float64"


class ParseError(StrEnum):
    EMPTY_OR_NULL = "empty_or_null"
    INVALID_CHARACTER = "invalid_character"
    MALFORMED_SEPARATORS = "malformed_separators"
    NO_DIGITS = "no_digits"
    OVERFLOW = "overflow"


class DecisionKind(StrEnum):
    NO_SEPARATOR = "no_separator"
    SINGLE_KIND = "single_kind"
    BOTH_KINDS = "both_kinds"


class NumberConvention(StrEnum):
    DECIMAL_POINT = "decimal_point"
    DECIMAL_COMMA = "decimal_comma"
    INTEGRAL = "integral"


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class SeparatorDecision(BaseModel):
    """How ``.`` and ``,`` are used inside one literal.

    ``decimal_position`` indexes into the scanned literal (sign included) and
    is ``None`` when the literal is integral.
    """

    model_config = ConfigDict(frozen=True)

    kind: DecisionKind
    decimal_separator: str | None = None
    thousands_separator: str | None = None
    decimal_position: int | None = None
    separator_count: int = 0

    @property
    def convention(self) -> NumberConvention:
        if self.decimal_separator == ".":
            return NumberConvention.DECIMAL_POINT
        if self.decimal_separator == ",":
            return NumberConvention.DECIMAL_COMMA
        return NumberConvention.INTEGRAL


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class ParseOutcome(BaseModel, Generic[T]):
    """Detailed result of parsing one literal.

    ``value`` holds the width's default when ``success`` is false, so callers
    that ignore ``error`` still get a well-defined number.
    """

    success: bool
    value: T
    width: NumericWidth
    error: ParseError | None = None
    canonical: str | None = None
    decision: SeparatorDecision | None = None
