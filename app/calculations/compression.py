"""
Row Compression

Groups a long series of yearly rows into a bounded number of table rows.
Used by both the rent and the mortgage compact tables.
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Sequence, TypeVar

from app.calculations.amortization import (
    AmortizationYear,
    MortgageAmortizationData,
    yearly_summary,
)
from app.calculations.rent import YearData
from app.calculations.rounding import RoundMode, apply_rounding

Row = TypeVar("Row")
Compact = TypeVar("Compact")


@dataclass(frozen=True)
class CompactRow:
    """Compressed rent table row."""

    year_range: str
    total: float
    cumulative_total: float


@dataclass(frozen=True)
class CompactMortgageRow:
    """Compressed mortgage table row."""

    year_range: str
    payment: float
    principal: float
    interest: float
    balance_end: float
    cumulative_principal: float
    cumulative_interest: float


def year_range_label(start_year: int, end_year: int) -> str:
    """Label for a group of years: "2024" or "2024-2026"."""
    if start_year == end_year:
        return str(start_year)
    return f"{start_year}-{end_year}"


def compress(
    rows: Sequence[Row],
    max_rows: int,
    aggregate: Callable[[str, Sequence[Row]], Compact],
) -> List[Compact]:
    """
    Compress an ordered series of yearly rows into at most max_rows rows.

    Years are grouped from the earliest forward in fixed-size chunks of
    ceil(len(rows) / max_rows); the last chunk takes the remainder and may
    be smaller. A max_rows of zero or less disables compression.

    Args:
        rows: Rows in chronological order, each with a ``year`` attribute
        max_rows: Maximum number of rows to return
        aggregate: Builds one compact row from a year-range label and the
            group of rows it covers

    Returns:
        Compact rows in chronological order
    """
    if not rows:
        return []

    if max_rows <= 0 or len(rows) <= max_rows:
        group_size = 1
    else:
        group_size = math.ceil(len(rows) / max_rows)

    compact_rows = []
    for start in range(0, len(rows), group_size):
        group = rows[start : start + group_size]
        label = year_range_label(group[0].year, group[-1].year)
        compact_rows.append(aggregate(label, group))

    return compact_rows


def compress_rent_years(
    years: Sequence[YearData],
    max_rows: int,
    round_to: RoundMode = "none",
) -> List[CompactRow]:
    """Compress a rent projection's years for the compact rent table."""

    def aggregate(label: str, group: Sequence[YearData]) -> CompactRow:
        # Cumulative totals are running sums already: take the group's last
        return CompactRow(
            year_range=label,
            total=apply_rounding(sum(y.year_total for y in group), round_to),
            cumulative_total=apply_rounding(group[-1].cumulative_total, round_to),
        )

    return compress(years, max_rows, aggregate)


def compress_mortgage_years(
    data: MortgageAmortizationData,
    max_rows: int,
    round_mode: RoundMode = "none",
) -> List[CompactMortgageRow]:
    """Compress an amortization schedule by loan year for the compact table."""

    def aggregate(label: str, group: Sequence[AmortizationYear]) -> CompactMortgageRow:
        last = group[-1]
        return CompactMortgageRow(
            year_range=label,
            payment=apply_rounding(sum(y.payment for y in group), round_mode),
            principal=apply_rounding(sum(y.principal for y in group), round_mode),
            interest=apply_rounding(sum(y.interest for y in group), round_mode),
            balance_end=last.balance_end,
            cumulative_principal=last.cumulative_principal,
            cumulative_interest=last.cumulative_interest,
        )

    return compress(yearly_summary(data, round_mode), max_rows, aggregate)
