"""Protocol definitions for data sources.

The engine never calls these; callers use them to default a simulation's rate.
"""

from typing import Protocol, runtime_checkable

from creditsim.models.rates import RateQuote


@runtime_checkable
class RateQuoteSource(Protocol):
    async def get_current_rates(self) -> list[RateQuote]:
        """Fetch the current quote for every available duration."""
        ...

    async def get_current_rate(self, duration_years: int) -> RateQuote:
        """Fetch the quote best matching a loan duration."""
        ...
