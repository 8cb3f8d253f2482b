"""Bulk parsing of one tabular column of raw numeric cells.

The parser never logs or judges a failure; this layer does. It keeps row
order, records each rejected cell with its reason, counts which decimal
convention every parsed literal revealed, and logs a warning when a column
fails too often or mixes decimal points with decimal commas (a typical sign
of merged exports from differently configured systems).
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from decimal import Decimal

from pydantic import BaseModel, Field

from ..config import Settings
from ..models.literal import NumberConvention, NumericWidth, ParseError
from ..parsing.number_parsing import ParseInput, parse_number
from ..utils.logging import get_logger

logger = get_logger(__name__)


class CellFailure(BaseModel):
    """A cell that could not be read as a number."""

    row_index: int
    raw: str | None = None
    error: ParseError


class ColumnParseReport(BaseModel):
    """Parsed values and diagnostics for a single column."""

    column: str | None = None
    width: NumericWidth
    values: list[Decimal | float | None] = Field(default_factory=list)
    failures: list[CellFailure] = Field(default_factory=list)
    convention_counts: dict[NumberConvention, int] = Field(default_factory=dict)

    @property
    def row_count(self) -> int:
        return len(self.values)

    @property
    def failure_ratio(self) -> float:
        if not self.values:
            return 0.0
        return len(self.failures) / len(self.values)

    @property
    def dominant_convention(self) -> NumberConvention | None:
        """Most frequent decimal convention, ignoring integral literals."""
        decimal_counts = {
            convention: count
            for convention, count in self.convention_counts.items()
            if convention != NumberConvention.INTEGRAL and count
        }
        if not decimal_counts:
            return None
        return max(decimal_counts, key=decimal_counts.get)

    @property
    def has_mixed_conventions(self) -> bool:
        return (
            self.convention_counts.get(NumberConvention.DECIMAL_POINT, 0) > 0
            and self.convention_counts.get(NumberConvention.DECIMAL_COMMA, 0) > 0
        )


def _raw_text(cell: ParseInput) -> str | None:
    if cell is None:
        return None
    if isinstance(cell, (bytes, bytearray, memoryview)):
        return bytes(cell).decode("latin-1")
    return str(cell)


def _is_blank(cell: ParseInput) -> bool:
    return cell is None or len(cell) == 0


def parse_column(
    cells: Iterable[ParseInput],
    width: NumericWidth | None = None,
    column: str | None = None,
    settings: Settings | None = None,
) -> ColumnParseReport:
    """Parse every cell of a column and summarise the outcome.

    Blank cells become ``None`` values; unless
    ``settings.treat_blank_as_missing`` is false they are not failures.
    """
    settings = settings or Settings()
    width = width or settings.default_width

    values: list[Decimal | float | None] = []
    failures: list[CellFailure] = []
    conventions: Counter[NumberConvention] = Counter()

    for row_index, cell in enumerate(cells):
        if _is_blank(cell) and settings.treat_blank_as_missing:
            values.append(None)
            continue

        outcome = parse_number(cell, width)
        if outcome.success:
            values.append(outcome.value)
            conventions[outcome.decision.convention] += 1
            continue

        values.append(None)
        failures.append(CellFailure(row_index=row_index, raw=_raw_text(cell), error=outcome.error))
        logger.debug("cell_rejected", column=column, row_index=row_index, error=outcome.error.value)

    report = ColumnParseReport(
        column=column,
        width=width,
        values=values,
        failures=failures,
        convention_counts=dict(conventions),
    )

    logger.info(
        "column_parsed",
        column=column,
        width=width.value,
        rows=report.row_count,
        failures=len(failures),
        dominant_convention=report.dominant_convention.value if report.dominant_convention else None,
    )
    if report.failure_ratio > settings.max_failure_ratio:
        logger.warning(
            "column_failure_ratio_exceeded",
            column=column,
            failure_ratio=round(report.failure_ratio, 4),
            max_failure_ratio=settings.max_failure_ratio,
        )
    if report.has_mixed_conventions:
        logger.warning(
            "column_mixed_number_conventions",
            column=column,
            decimal_point=conventions[NumberConvention.DECIMAL_POINT],
            decimal_comma=conventions[NumberConvention.DECIMAL_COMMA],
        )
    return report
