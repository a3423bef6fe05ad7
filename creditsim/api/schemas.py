"""Pydantic schemas for API request/response models.

JSON keys are camelCase; Python attributes stay snake_case.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Request schemas ----

class AmortizationRequest(CamelModel):
    principal: Decimal = Field(..., description="Borrowed amount")
    annual_rate_percent: Decimal | None = Field(
        None, description="Nominal annual rate in percent; defaults to the market average"
    )
    duration_years: int = Field(..., description="Loan term in whole years")
    deferred_months: int = 0
    insurance_rate_percent: Decimal = Decimal("0")


class BorrowingCapacityRequest(CamelModel):
    net_monthly_income: Decimal
    existing_monthly_payments: Decimal = Decimal("0")
    annual_rate_percent: Decimal | None = Field(
        None, description="Nominal annual rate in percent; defaults to the market average"
    )
    duration_years: int


# ---- Response schemas ----

class ScheduleRowResponse(CamelModel):
    month_index: int
    payment: float
    interest_portion: float
    capital_portion: float
    remaining_principal: float
    is_deferred: bool = False
    months_covered: int = 1
    amortization_year: int | None = None


class YearlySummaryResponse(CamelModel):
    year: int
    capital_paid: float
    interest_paid: float
    remaining_principal_at_year_end: float


class AmortizationResponse(CamelModel):
    annual_rate_percent: float
    monthly_payment: float
    monthly_payment_during_deferral: float
    monthly_insurance: float
    total_interest_cost: float
    total_insurance_cost: float
    total_repaid: float
    effective_annual_rate_percent: float
    yearly_summary: list[YearlySummaryResponse]
    display_rows: list[ScheduleRowResponse]


class BorrowingCapacityResponse(CamelModel):
    max_monthly_payment: float
    available_payment: float
    max_loan_amount: float
    annual_rate_percent: float
    duration_years: int


class RateQuoteResponse(CamelModel):
    duration_years: int
    best_rate: float
    avg_rate: float
    updated_at: datetime


class RatesResponse(CamelModel):
    rates: list[RateQuoteResponse]
