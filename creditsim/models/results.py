from dataclasses import dataclass, field
from decimal import Decimal

from creditsim.models.loan import (
    AmortizationSchedule,
    DisplayRow,
    LoanParameters,
    LoanSummary,
    YearlySummary,
)


@dataclass(frozen=True)
class SimulationResult:
    params: LoanParameters
    schedule: AmortizationSchedule
    summary: LoanSummary
    yearly: list[YearlySummary] = field(default_factory=list)
    display_rows: list[DisplayRow] = field(default_factory=list)

    # Annual rate equating all outflows (payments + insurance) with the principal
    effective_annual_rate_percent: Decimal = Decimal("0")
