"""Infer the role of ``.`` and ``,`` from their positions in a literal.

Algorithm (one left-to-right scan):
- Collect every separator occurrence as ``(char, position)``
- No separator: plain integer
- Only one separator character:
    - once: it is the decimal separator (``"000,7832"`` -> 0.7832)
    - several times: all are thousands separators (``"239.482.392.923"``)
- Both characters: the last occurrence is the decimal separator and its
  character must not appear anywhere else (``"1.943.100,84"``)

Group sizes are never checked, so ``"1,5"`` and ``"1.2.3"`` are accepted.
"""

from __future__ import annotations

from typing import NamedTuple

from ..models.literal import DecisionKind, ParseError, SeparatorDecision
from .errors import LiteralRejected
from .text_view import TextView

DIGITS = frozenset("0123456789")
SEPARATORS = frozenset(".,")
SIGN = "-"


class SeparatorOccurrence(NamedTuple):
    char: str
    position: int


def scan_separators(view: TextView) -> list[SeparatorOccurrence]:
    """Validate the literal's shape and return its separator occurrences.

    Raises ``LiteralRejected`` for the first defect found in reading order.
    """
    if not len(view):
        raise LiteralRejected(ParseError.EMPTY_OR_NULL)

    occurrences: list[SeparatorOccurrence] = []
    digit_count = 0
    body_start = 1 if view[0] == SIGN else 0
    previous_was_separator = False

    for position, char in enumerate(view):
        if position < body_start:
            continue
        if char in DIGITS:
            digit_count += 1
            previous_was_separator = False
        elif char in SEPARATORS:
            if position == body_start or previous_was_separator:
                raise LiteralRejected(ParseError.MALFORMED_SEPARATORS, position)
            occurrences.append(SeparatorOccurrence(char, position))
            previous_was_separator = True
        else:
            raise LiteralRejected(ParseError.INVALID_CHARACTER, position)

    if previous_was_separator:
        raise LiteralRejected(ParseError.MALFORMED_SEPARATORS, len(view) - 1)
    if digit_count == 0:
        raise LiteralRejected(ParseError.NO_DIGITS)
    return occurrences


def decide(occurrences: list[SeparatorOccurrence]) -> SeparatorDecision:
    """Turn the separator occurrences of a well-shaped literal into a decision."""
    if not occurrences:
        return SeparatorDecision(kind=DecisionKind.NO_SEPARATOR)

    last = occurrences[-1]
    count = len(occurrences)
    same_as_last = sum(1 for occurrence in occurrences if occurrence.char == last.char)

    if same_as_last == count:
        if count == 1:
            return SeparatorDecision(
                kind=DecisionKind.SINGLE_KIND,
                decimal_separator=last.char,
                decimal_position=last.position,
                separator_count=1,
            )
        return SeparatorDecision(
            kind=DecisionKind.SINGLE_KIND,
            thousands_separator=last.char,
            separator_count=count,
        )

    # Both characters present: a repeated decimal character means two candidates
    if same_as_last > 1:
        raise LiteralRejected(ParseError.MALFORMED_SEPARATORS, last.position)
    return SeparatorDecision(
        kind=DecisionKind.BOTH_KINDS,
        decimal_separator=last.char,
        thousands_separator="," if last.char == "." else ".",
        decimal_position=last.position,
        separator_count=count,
    )


def classify_separators(view: TextView) -> SeparatorDecision:
    """Classify separator usage in ``view`` or raise ``LiteralRejected``."""
    return decide(scan_separators(view))
