"""
Financial calculation API endpoints.

These endpoints accept raw numeric inputs and return the calculated
projection together with the compact table rows the frontend renders.
Inputs that cannot be computed yet come back as a null result, not an
error.
"""

import logging
from dataclasses import asdict
from datetime import date
from typing import List, Literal, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.calculations import amortization, compression, rent
from app.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter()


class RentInput(BaseModel):
    """Input for rent projection."""

    monthly_rent: float
    analysis_years: int
    annual_rent_increase: float = 0.0
    start_year: Optional[int] = None
    round_to: Literal["none", "cents"] = "none"
    increase_month: Optional[int] = None
    max_rows: Optional[int] = Field(
        None, description="Row budget for the compact table; <= 0 disables compression"
    )


class YearDataOut(BaseModel):
    year: int
    months: List[float]
    year_total: float
    cumulative_total: float


class RentProjectionOut(BaseModel):
    years: List[YearDataOut]
    total_paid: float


class CompactRowOut(BaseModel):
    year_range: str
    total: float
    cumulative_total: float


class RentResponse(BaseModel):
    """Rent projection and compact table rows."""

    projection: Optional[RentProjectionOut] = None
    compact_rows: List[CompactRowOut] = []


@router.post("/rent", response_model=RentResponse)
async def calculate_rent(inputs: RentInput):
    """Project rent over the analysis period."""
    start_year = inputs.start_year if inputs.start_year is not None else date.today().year
    max_rows = inputs.max_rows if inputs.max_rows is not None else settings.default_max_rows

    projection = rent.project_rent(
        inputs.monthly_rent,
        inputs.analysis_years,
        inputs.annual_rent_increase,
        start_year=start_year,
        round_to=inputs.round_to,
        increase_month=inputs.increase_month,
    )
    logger.info(
        f"Rent projection: rent={inputs.monthly_rent}, years={inputs.analysis_years}, "
        f"computed={projection is not None}"
    )

    if projection is None:
        return RentResponse()

    compact_rows = compression.compress_rent_years(
        projection.years, max_rows, inputs.round_to
    )
    return RentResponse(
        projection=projection.to_dict(),
        compact_rows=[asdict(row) for row in compact_rows],
    )


class MortgageInput(BaseModel):
    """Input for mortgage amortization."""

    purchase_price: float
    down_payment_percentage: float
    annual_interest_rate: float
    amortization_years: float
    round_mode: Literal["none", "cents"] = settings.default_round_mode
    max_rows: Optional[int] = Field(
        None, description="Row budget for the compact table; <= 0 disables compression"
    )


class AmortizationMonthOut(BaseModel):
    index: int
    year: int
    month_in_year: int
    payment: float
    interest: float
    principal: float
    balance_start: float
    balance_end: float
    cumulative_principal: float
    cumulative_interest: float


class AmortizationOut(BaseModel):
    monthly_payment: float
    total_principal_paid: float
    total_interest_paid: float
    total_paid: float
    months: List[AmortizationMonthOut]


class AmortizationYearOut(BaseModel):
    year: int
    payment: float
    principal: float
    interest: float
    balance_end: float
    cumulative_principal: float
    cumulative_interest: float


class CompactMortgageRowOut(BaseModel):
    year_range: str
    payment: float
    principal: float
    interest: float
    balance_end: float
    cumulative_principal: float
    cumulative_interest: float


class MortgageResponse(BaseModel):
    """Amortization schedule, yearly totals and compact table rows."""

    amortization: Optional[AmortizationOut] = None
    yearly: List[AmortizationYearOut] = []
    compact_rows: List[CompactMortgageRowOut] = []


@router.post("/mortgage", response_model=MortgageResponse)
async def calculate_mortgage(inputs: MortgageInput):
    """Generate the mortgage amortization schedule."""
    max_rows = inputs.max_rows if inputs.max_rows is not None else settings.default_max_rows

    data = amortization.amortize(
        inputs.purchase_price,
        inputs.down_payment_percentage,
        inputs.annual_interest_rate,
        inputs.amortization_years,
        inputs.round_mode,
    )
    logger.info(
        f"Mortgage amortization: price={inputs.purchase_price}, "
        f"years={inputs.amortization_years}, computed={data is not None}"
    )

    if data is None:
        return MortgageResponse()

    yearly = amortization.yearly_summary(data, inputs.round_mode)
    compact_rows = compression.compress_mortgage_years(data, max_rows, inputs.round_mode)
    return MortgageResponse(
        amortization=data.to_dict(),
        yearly=[asdict(row) for row in yearly],
        compact_rows=[asdict(row) for row in compact_rows],
    )
