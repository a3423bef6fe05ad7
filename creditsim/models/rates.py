"""Market rate quotes supplied by an external source."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class RateQuote:
    duration_years: int
    best_rate: Decimal  # Percent
    avg_rate: Decimal  # Percent; the usual default for a simulation
    updated_at: datetime
