"""FastAPI dependency injection."""

from creditsim.data.base import RateQuoteSource
from creditsim.data.rates import RateQuoteClient


def get_rate_source() -> RateQuoteSource:
    return RateQuoteClient()
