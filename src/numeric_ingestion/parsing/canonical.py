"""Rewrite a classified literal into ``[-]digits[.digits]``."""

from __future__ import annotations

from ..models.literal import ParseError, SeparatorDecision
from .errors import LiteralRejected
from .separators import DIGITS, SIGN, classify_separators
from .text_view import TextView


def to_canonical(view: TextView, decision: SeparatorDecision) -> str:
    """Drop thousands separators and turn the decimal separator into ``.``.

    ``view`` must already have passed ``classify_separators``; every
    non-digit character after the sign is then a separator.
    """
    parts: list[str] = []
    has_digits = False
    for position, char in enumerate(view):
        if char in DIGITS:
            parts.append(char)
            has_digits = True
        elif position == 0 and char == SIGN:
            parts.append(char)
        elif position == decision.decimal_position:
            parts.append(".")

    if not has_digits:
        raise LiteralRejected(ParseError.NO_DIGITS)
    return "".join(parts)


def canonicalize(view: TextView) -> tuple[str, SeparatorDecision]:
    """Classify and normalize ``view`` in one call."""
    decision = classify_separators(view)
    return to_canonical(view, decision), decision
