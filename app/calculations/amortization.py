"""
Mortgage Amortization Calculations

Implements the fixed-payment mortgage schedule: monthly payment, the
interest/principal split of every payment, and running totals. The final
month always pays off exactly the remaining balance, so a schedule ends at
zero by construction.
"""

import logging
import math
from dataclasses import asdict, dataclass
from typing import List, Optional, Tuple

from app.calculations.rounding import RoundMode, apply_rounding, is_finite_number

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class AmortizationMonth:
    """One month of the amortization schedule."""

    index: int  # 1..total months
    year: int  # 1..amortization years
    month_in_year: int  # 1..12
    payment: float
    interest: float
    principal: float
    balance_start: float
    balance_end: float
    cumulative_principal: float
    cumulative_interest: float


@dataclass(frozen=True)
class MortgageAmortizationData:
    """Complete amortization schedule with summary totals."""

    monthly_payment: float
    total_principal_paid: float
    total_interest_paid: float
    total_paid: float
    months: Tuple[AmortizationMonth, ...]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AmortizationYear:
    """Schedule totals for one loan year."""

    year: int
    payment: float
    principal: float
    interest: float
    balance_end: float
    cumulative_principal: float
    cumulative_interest: float


def calculate_monthly_payment(
    loan_amount: float,
    monthly_rate: float,
    total_months: int,
    round_mode: RoundMode = "none",
) -> float:
    """
    Calculate the fixed monthly payment.

    - If rate > 0: M = P * [r(1+r)^n] / [(1+r)^n - 1]
    - If rate = 0: M = P / n

    Args:
        loan_amount: Principal borrowed
        monthly_rate: Monthly rate as decimal (e.g. 0.05 / 12 for 5% APR)
        total_months: Number of payments
        round_mode: "none" or "cents"

    Returns:
        Monthly payment amount

    Raises:
        OverflowError: If (1 + r)^n exceeds the float range
    """
    if monthly_rate == 0:
        return apply_rounding(loan_amount / total_months, round_mode)

    growth = (1 + monthly_rate) ** total_months
    payment = loan_amount * (monthly_rate * growth / (growth - 1))
    return apply_rounding(payment, round_mode)


def _validate(
    purchase_price: float,
    down_payment_percentage: float,
    annual_interest_rate: float,
    amortization_years: int,
) -> bool:
    values = (
        purchase_price,
        down_payment_percentage,
        annual_interest_rate,
        amortization_years,
    )
    if not all(is_finite_number(v) for v in values):
        return False
    if purchase_price <= 0 or amortization_years <= 0:
        return False
    if not 0 <= down_payment_percentage <= 100:
        return False
    if annual_interest_rate < 0:
        return False
    # Fractional terms are rejected, never truncated
    return float(amortization_years).is_integer()


def amortize(
    purchase_price: float,
    down_payment_percentage: float,
    annual_interest_rate: float,
    amortization_years: int,
    round_mode: RoundMode = "cents",
) -> Optional[MortgageAmortizationData]:
    """
    Generate the full month-by-month amortization schedule.

    In "cents" mode every amount is rounded as soon as it is computed and
    the rounded value feeds the next step, so the schedule matches what a
    lender would actually book. The final month takes the whole remaining
    balance as principal and its payment is recomputed as principal plus
    interest.

    Args:
        purchase_price: Property price (must be > 0)
        down_payment_percentage: Down payment as percentage (0-100)
        annual_interest_rate: Annual rate as percentage (e.g. 5.0 for 5%)
        amortization_years: Loan term in whole years (must be > 0)
        round_mode: "cents" (default) or "none"

    Returns:
        MortgageAmortizationData, or None if the inputs are invalid or the
        schedule exceeds the float range
    """
    if not _validate(
        purchase_price,
        down_payment_percentage,
        annual_interest_rate,
        amortization_years,
    ):
        logger.debug(
            f"Amortization rejected inputs: price={purchase_price}, "
            f"down={down_payment_percentage}, rate={annual_interest_rate}, "
            f"years={amortization_years}"
        )
        return None

    loan_amount = purchase_price * (1 - down_payment_percentage / 100)
    monthly_rate = annual_interest_rate / 12 / 100 if annual_interest_rate > 0 else 0.0
    total_months = int(amortization_years) * MONTHS_PER_YEAR

    try:
        monthly_payment = calculate_monthly_payment(
            loan_amount, monthly_rate, total_months, round_mode
        )
    except OverflowError:
        logger.debug(
            f"Amortization payment overflowed: rate={annual_interest_rate}, "
            f"years={amortization_years}"
        )
        return None

    months: List[AmortizationMonth] = []
    balance = loan_amount
    cumulative_principal = 0.0
    cumulative_interest = 0.0

    for index in range(1, total_months + 1):
        balance_start = balance
        interest = apply_rounding(balance_start * monthly_rate, round_mode)

        if index == total_months:
            # Absorb accumulated rounding residue
            principal = balance_start
            payment = principal + interest
            balance = 0.0
        else:
            principal = apply_rounding(monthly_payment - interest, round_mode)
            payment = monthly_payment
            balance = apply_rounding(balance_start - principal, round_mode)

        cumulative_principal += principal
        cumulative_interest += interest

        months.append(
            AmortizationMonth(
                index=index,
                year=math.ceil(index / MONTHS_PER_YEAR),
                month_in_year=(index - 1) % MONTHS_PER_YEAR + 1,
                payment=apply_rounding(payment, round_mode),
                interest=interest,
                principal=apply_rounding(principal, round_mode),
                balance_start=apply_rounding(balance_start, round_mode),
                balance_end=balance,
                cumulative_principal=apply_rounding(cumulative_principal, round_mode),
                cumulative_interest=apply_rounding(cumulative_interest, round_mode),
            )
        )

    total_principal_paid = apply_rounding(loan_amount, round_mode)
    total_interest_paid = apply_rounding(cumulative_interest, round_mode)
    total_paid = apply_rounding(total_principal_paid + total_interest_paid, round_mode)

    if not (math.isfinite(total_paid) and math.isfinite(cumulative_principal)):
        logger.debug(f"Amortization totals overflowed: price={purchase_price}")
        return None

    return MortgageAmortizationData(
        monthly_payment=monthly_payment,
        total_principal_paid=total_principal_paid,
        total_interest_paid=total_interest_paid,
        total_paid=total_paid,
        months=tuple(months),
    )


def yearly_summary(
    data: MortgageAmortizationData, round_mode: RoundMode = "none"
) -> List[AmortizationYear]:
    """
    Aggregate an amortization schedule by loan year.

    Payment, principal and interest are summed over the year's months.
    Balance and cumulative fields come from the year's last month.
    """
    yearly: List[AmortizationYear] = []
    year_months: List[AmortizationMonth] = []

    for month in data.months:
        year_months.append(month)
        if month.month_in_year == MONTHS_PER_YEAR or month is data.months[-1]:
            last = year_months[-1]
            yearly.append(
                AmortizationYear(
                    year=last.year,
                    payment=apply_rounding(sum(m.payment for m in year_months), round_mode),
                    principal=apply_rounding(
                        sum(m.principal for m in year_months), round_mode
                    ),
                    interest=apply_rounding(
                        sum(m.interest for m in year_months), round_mode
                    ),
                    balance_end=last.balance_end,
                    cumulative_principal=last.cumulative_principal,
                    cumulative_interest=last.cumulative_interest,
                )
            )
            year_months = []

    return yearly
