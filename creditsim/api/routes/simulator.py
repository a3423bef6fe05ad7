"""Credit simulation routes: amortization and borrowing capacity."""

import functools
import logging
from decimal import Decimal, ROUND_HALF_UP

from fastapi import APIRouter, Depends, HTTPException

from creditsim.api.deps import get_rate_source
from creditsim.api.schemas import (
    AmortizationRequest,
    AmortizationResponse,
    BorrowingCapacityRequest,
    BorrowingCapacityResponse,
    ScheduleRowResponse,
    YearlySummaryResponse,
)
from creditsim.config import settings
from creditsim.data.base import RateQuoteSource
from creditsim.engine.annuity import require_positive
from creditsim.engine.capacity import estimate_capacity
from creditsim.engine.errors import InvalidParameter
from creditsim.engine.simulation import run_simulation
from creditsim.models.capacity import BorrowingCapacityInput
from creditsim.models.loan import LoanParameters
from creditsim.models.results import SimulationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["simulator"])

TWO_PLACES = Decimal("0.01")

# LoanParameters is frozen and hashable; equal parameter sets share an entry
cached_simulation = functools.lru_cache(maxsize=settings.simulation_cache_size)(run_simulation)


def _money(value: Decimal) -> float:
    """Round to cents at the presentation boundary."""
    return float(value.quantize(TWO_PLACES, ROUND_HALF_UP))


async def _resolve_rate(
    requested: Decimal | None, duration_years: int, rates: RateQuoteSource
) -> Decimal:
    """An explicit rate always wins; otherwise the market average for the duration."""
    require_positive("duration_years", duration_years)
    if requested is not None:
        return requested
    quote = await rates.get_current_rate(duration_years)
    logger.info(
        "No rate given for %dy, using %s%% (%dy average)",
        duration_years, quote.avg_rate, quote.duration_years,
    )
    return quote.avg_rate


def _result_to_response(result: SimulationResult) -> AmortizationResponse:
    """Convert engine SimulationResult to API response."""
    s = result.summary
    yearly = [
        YearlySummaryResponse(
            year=y.year,
            capital_paid=_money(y.capital_paid),
            interest_paid=_money(y.interest_paid),
            remaining_principal_at_year_end=_money(y.remaining_principal_at_year_end),
        )
        for y in result.yearly
    ]
    rows = [
        ScheduleRowResponse(
            month_index=r.month_index,
            payment=_money(r.payment),
            interest_portion=_money(r.interest_portion),
            capital_portion=_money(r.capital_portion),
            remaining_principal=_money(r.remaining_principal),
            is_deferred=r.is_deferred,
            months_covered=r.months_covered,
            amortization_year=r.amortization_year,
        )
        for r in result.display_rows
    ]

    return AmortizationResponse(
        annual_rate_percent=float(result.params.annual_rate_percent),
        monthly_payment=_money(s.monthly_payment),
        monthly_payment_during_deferral=_money(s.monthly_payment_during_deferral),
        monthly_insurance=_money(s.monthly_insurance),
        total_interest_cost=_money(s.total_interest_cost),
        total_insurance_cost=_money(s.total_insurance_cost),
        total_repaid=_money(s.total_repaid),
        effective_annual_rate_percent=float(result.effective_annual_rate_percent),
        yearly_summary=yearly,
        display_rows=rows,
    )


@router.post("/amortization", response_model=AmortizationResponse)
async def amortization(
    req: AmortizationRequest,
    rates: RateQuoteSource = Depends(get_rate_source),
):
    """Loan parameters → monthly payment, totals, yearly rollup and table."""
    try:
        rate = await _resolve_rate(req.annual_rate_percent, req.duration_years, rates)
        params = LoanParameters(
            principal=req.principal,
            annual_rate_percent=rate,
            duration_years=req.duration_years,
            deferred_months=req.deferred_months,
            insurance_rate_percent=req.insurance_rate_percent,
        )
        result = cached_simulation(params)
    except InvalidParameter as e:
        logger.info("Rejected amortization request: %s", e)
        raise HTTPException(status_code=400, detail=e.to_dict())

    return _result_to_response(result)


@router.post("/borrowing-capacity", response_model=BorrowingCapacityResponse)
async def borrowing_capacity(
    req: BorrowingCapacityRequest,
    rates: RateQuoteSource = Depends(get_rate_source),
):
    """Net income and existing debt → maximum loan under the 33% ceiling."""
    try:
        rate = await _resolve_rate(req.annual_rate_percent, req.duration_years, rates)
        result = estimate_capacity(BorrowingCapacityInput(
            net_monthly_income=req.net_monthly_income,
            existing_monthly_payments=req.existing_monthly_payments,
            annual_rate_percent=rate,
            duration_years=req.duration_years,
        ))
    except InvalidParameter as e:
        logger.info("Rejected borrowing capacity request: %s", e)
        raise HTTPException(status_code=400, detail=e.to_dict())

    return BorrowingCapacityResponse(
        max_monthly_payment=_money(result.max_monthly_payment),
        available_payment=_money(result.available_payment),
        max_loan_amount=_money(result.max_loan_amount),
        annual_rate_percent=float(result.annual_rate_percent),
        duration_years=result.duration_years,
    )
