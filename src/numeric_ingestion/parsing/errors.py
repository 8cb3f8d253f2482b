"""Internal rejection signal raised while classifying or converting a literal."""

from __future__ import annotations

from ..models.literal import ParseError


class LiteralRejected(ValueError):
    """A literal cannot be read as a number.

    Raised by the classifier, normalizer and converters; the public
    ``try_parse*`` functions turn it into a failed result.
    """

    def __init__(self, code: ParseError, position: int | None = None):
        self.code = code
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"{code.value}{where}")
