"""Market rate routes."""

from fastapi import APIRouter, Depends

from creditsim.api.deps import get_rate_source
from creditsim.api.schemas import RateQuoteResponse, RatesResponse
from creditsim.data.base import RateQuoteSource
from creditsim.models.rates import RateQuote

router = APIRouter(prefix="/api/v1/rates", tags=["market"])


def _quote_response(q: RateQuote) -> RateQuoteResponse:
    return RateQuoteResponse(
        duration_years=q.duration_years,
        best_rate=float(q.best_rate),
        avg_rate=float(q.avg_rate),
        updated_at=q.updated_at,
    )


@router.get("/current", response_model=RatesResponse)
async def get_current_rates(rates: RateQuoteSource = Depends(get_rate_source)):
    """Current best and average rates for every quoted duration."""
    quotes = await rates.get_current_rates()
    return RatesResponse(rates=[_quote_response(q) for q in quotes])


@router.get("/{duration_years}", response_model=RateQuoteResponse)
async def get_rate(duration_years: int, rates: RateQuoteSource = Depends(get_rate_source)):
    """Quote for the duration closest to ``duration_years``."""
    return _quote_response(await rates.get_current_rate(duration_years))
