"""Market rate quotes: built-in defaults and an HTTP client for a live feed."""

import logging
from datetime import datetime, timezone
from decimal import Decimal

import httpx

from creditsim.config import settings
from creditsim.models.rates import RateQuote

logger = logging.getLogger(__name__)

# (duration_years, best_rate, avg_rate) in percent; used when no feed is available
DEFAULT_RATES = [
    (7, Decimal("2.80"), Decimal("3.05")),
    (10, Decimal("2.85"), Decimal("3.10")),
    (15, Decimal("2.95"), Decimal("3.20")),
    (20, Decimal("3.05"), Decimal("3.35")),
    (25, Decimal("3.15"), Decimal("3.45")),
    (30, Decimal("3.30"), Decimal("3.60")),
]


def default_quotes(updated_at: datetime | None = None) -> list[RateQuote]:
    stamp = updated_at or datetime.now(timezone.utc)
    return [
        RateQuote(duration_years=d, best_rate=best, avg_rate=avg, updated_at=stamp)
        for d, best, avg in DEFAULT_RATES
    ]


def best_match(quotes: list[RateQuote], duration_years: int) -> RateQuote:
    """Exact duration if quoted, else the nearest one (shorter wins a tie)."""
    if not quotes:
        raise ValueError("No rate quotes available")
    return min(
        quotes,
        key=lambda q: (abs(q.duration_years - duration_years), q.duration_years),
    )


def _parse_timestamp(value: str) -> datetime:
    # fromisoformat rejects a trailing "Z" before Python 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def parse_rates_payload(data: dict) -> list[RateQuote]:
    """Parse ``{"rates": [{"duration", "best_rate", "avg_rate", "updated_at"}]}``."""
    return [
        RateQuote(
            duration_years=int(row["duration"]),
            best_rate=Decimal(str(row["best_rate"])),
            avg_rate=Decimal(str(row["avg_rate"])),
            updated_at=_parse_timestamp(row["updated_at"]),
        )
        for row in data["rates"]
    ]


class StaticRateQuotes:
    """Serves the built-in table, stamped at construction."""

    def __init__(self, updated_at: datetime | None = None):
        self.quotes = default_quotes(updated_at)

    async def get_current_rates(self) -> list[RateQuote]:
        return list(self.quotes)

    async def get_current_rate(self, duration_years: int) -> RateQuote:
        return best_match(self.quotes, duration_years)


class RateQuoteClient:
    """Fetches quotes from a rates endpoint, falling back to the built-in table."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = settings.rate_quote_url if url is None else url
        self.timeout = timeout or settings.rate_quote_timeout
        self.transport = transport
        self.fallback = StaticRateQuotes()

    async def get_current_rates(self) -> list[RateQuote]:
        if not self.url:
            logger.debug("Rate quote URL not configured, using default rates")
            return await self.fallback.get_current_rates()

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(self.url)
                resp.raise_for_status()
        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            logger.warning("Rate quote request failed for %s: %s", self.url, e)
            return await self.fallback.get_current_rates()

        try:
            quotes = parse_rates_payload(resp.json())
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            logger.warning("Malformed rate quote payload from %s: %s", self.url, e)
            return await self.fallback.get_current_rates()

        if not quotes:
            logger.info("Rate quote feed returned no rates, using default rates")
            return await self.fallback.get_current_rates()
        return quotes

    async def get_current_rate(self, duration_years: int) -> RateQuote:
        return best_match(await self.get_current_rates(), duration_years)
