"""
Rent Projection Calculations

Projects monthly rent over an analysis period using compound annual
increases, producing per-year totals and running cumulative totals.
"""

import logging
import math
from dataclasses import asdict, dataclass
from datetime import date
from typing import List, Optional, Tuple

from app.calculations.rounding import RoundMode, apply_rounding, is_finite_number

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
MAX_ANALYSIS_YEARS = 120


@dataclass(frozen=True)
class YearData:
    """Rent paid during one calendar year of the projection."""

    year: int
    months: Tuple[float, ...]
    year_total: float
    cumulative_total: float


@dataclass(frozen=True)
class MonthlyRentData:
    """Complete rent projection."""

    years: Tuple[YearData, ...]
    total_paid: float

    def to_dict(self) -> dict:
        return asdict(self)


def rent_for_year(
    base_rent: float,
    year_index: int,
    annual_increase_percent: float,
    round_to: RoundMode = "none",
) -> float:
    """
    Calculate the monthly rent for a given year of the projection.

    Increases compound at year boundaries:
    rent(i) = base_rent * (1 + annual_increase_percent / 100) ** i

    Args:
        base_rent: Initial monthly rent
        year_index: Year index (0 = first year)
        annual_increase_percent: Annual increase as a percentage (e.g. 2.5
            for 2.5%); negative values model declining rent
        round_to: Rounding mode for the returned amount

    Returns:
        Monthly rent for the year, or infinity once growth exceeds the
        float range
    """
    if year_index == 0:
        return apply_rounding(base_rent, round_to)
    growth = 1 + annual_increase_percent / 100
    try:
        rent = base_rent * growth ** year_index
    except OverflowError:
        if base_rent == 0:
            return 0.0
        negative = (base_rent < 0) != (growth < 0 and year_index % 2 == 1)
        return -math.inf if negative else math.inf
    return apply_rounding(rent, round_to)


def _months_for_year(
    monthly_rent: float,
    year_index: int,
    annual_rent_increase: float,
    round_to: RoundMode,
    increase_month: Optional[int],
) -> List[float]:
    """Monthly rent values for one year, honouring an anniversary month."""
    current = rent_for_year(monthly_rent, year_index, annual_rent_increase, round_to)
    if increase_month is None or year_index == 0:
        return [current] * MONTHS_PER_YEAR

    previous = rent_for_year(
        monthly_rent, year_index - 1, annual_rent_increase, round_to
    )
    before = increase_month - 1
    return [previous] * before + [current] * (MONTHS_PER_YEAR - before)


def project_rent(
    monthly_rent: float,
    analysis_years: int,
    annual_rent_increase: float,
    *,
    start_year: Optional[int] = None,
    round_to: RoundMode = "none",
    increase_month: Optional[int] = None,
) -> Optional[MonthlyRentData]:
    """
    Project rent for every year of the analysis period.

    Inputs that cannot be projected yet (zero or negative rent or years,
    NaN, more than MAX_ANALYSIS_YEARS years, a bad increase month) and
    growth that pushes totals past the float range return None rather
    than raising.

    Args:
        monthly_rent: Initial monthly rent (must be > 0)
        analysis_years: Number of years to project (1 to MAX_ANALYSIS_YEARS)
        annual_rent_increase: Annual increase percentage (may be negative)
        start_year: Calendar year of the first projected year; defaults to
            the current year
        round_to: "none" (default) or "cents"
        increase_month: Month (1-12) in which each annual increase takes
            effect. Months before it keep the previous year's rent.

    Returns:
        MonthlyRentData, or None if the inputs are not computable
    """
    values = (monthly_rent, analysis_years, annual_rent_increase)
    if not all(is_finite_number(v) for v in values):
        logger.debug(f"Rent projection rejected non-finite input: {values}")
        return None

    if monthly_rent <= 0 or analysis_years <= 0:
        return None

    if analysis_years > MAX_ANALYSIS_YEARS or not float(analysis_years).is_integer():
        logger.debug(f"Rent projection rejected analysis_years={analysis_years}")
        return None

    if increase_month is not None and (
        not isinstance(increase_month, int)
        or isinstance(increase_month, bool)
        or not 1 <= increase_month <= MONTHS_PER_YEAR
    ):
        logger.debug(f"Rent projection rejected increase_month={increase_month}")
        return None

    if start_year is None:
        start_year = date.today().year

    years = []
    total_paid = 0.0

    for i in range(int(analysis_years)):
        months = _months_for_year(
            monthly_rent, i, annual_rent_increase, round_to, increase_month
        )
        if increase_month is None:
            year_total = apply_rounding(months[0] * MONTHS_PER_YEAR, round_to)
        else:
            year_total = apply_rounding(sum(months), round_to)

        total_paid = apply_rounding(total_paid + year_total, round_to)
        if not math.isfinite(total_paid):
            logger.debug(
                f"Rent projection overflowed in year index {i}: "
                f"rent={monthly_rent}, increase={annual_rent_increase}"
            )
            return None

        years.append(
            YearData(
                year=start_year + i,
                months=tuple(months),
                year_total=year_total,
                cumulative_total=total_paid,
            )
        )

    return MonthlyRentData(years=tuple(years), total_paid=total_paid)
