from dataclasses import dataclass
from decimal import Decimal

from creditsim.engine.annuity import MONTHS_PER_YEAR, monthly_rate, to_decimal, to_whole


@dataclass(frozen=True)
class LoanParameters:
    """Inputs to amortization. Numbers are coerced to Decimal on construction."""
    principal: Decimal
    annual_rate_percent: Decimal  # 3.35 means 3.35%
    duration_years: int
    deferred_months: int = 0  # Leading interest-only months
    insurance_rate_percent: Decimal = Decimal("0")  # Annual, on the original principal

    def __post_init__(self):
        object.__setattr__(self, "principal", to_decimal("principal", self.principal))
        object.__setattr__(
            self, "annual_rate_percent",
            to_decimal("annual_rate_percent", self.annual_rate_percent),
        )
        object.__setattr__(self, "duration_years", to_whole("duration_years", self.duration_years))
        object.__setattr__(self, "deferred_months", to_whole("deferred_months", self.deferred_months))
        object.__setattr__(
            self, "insurance_rate_percent",
            to_decimal("insurance_rate_percent", self.insurance_rate_percent),
        )

    @property
    def total_months(self) -> int:
        return self.duration_years * MONTHS_PER_YEAR

    @property
    def active_months(self) -> int:
        return self.total_months - self.deferred_months

    @property
    def monthly_rate(self) -> Decimal:
        return monthly_rate(self.annual_rate_percent)

    @property
    def monthly_insurance(self) -> Decimal:
        """Constant premium, charged every month including the deferred ones."""
        return self.principal * self.insurance_rate_percent / Decimal(100) / Decimal(MONTHS_PER_YEAR)

    @property
    def interest_only_payment(self) -> Decimal:
        return self.principal * self.monthly_rate


@dataclass(frozen=True)
class ScheduleRow:
    month_index: int  # 1-indexed
    payment: Decimal  # Principal + interest only; insurance is tracked separately
    interest_portion: Decimal
    capital_portion: Decimal
    remaining_principal: Decimal  # Balance after this month's capital portion
    is_deferred: bool = False

    @property
    def year(self) -> int:
        return (self.month_index - 1) // MONTHS_PER_YEAR + 1


@dataclass(frozen=True)
class AmortizationSchedule:
    monthly_payment: Decimal  # Steady-state payment of the active phase
    rows: list[ScheduleRow]


@dataclass(frozen=True)
class YearlySummary:
    year: int
    capital_paid: Decimal
    interest_paid: Decimal
    remaining_principal_at_year_end: Decimal


@dataclass(frozen=True)
class DisplayRow:
    """One line of the compacted amortization table.

    The deferred block is a single synthetic row covering ``months_covered``
    months; every other row is a sampled schedule row.
    """
    month_index: int
    payment: Decimal
    interest_portion: Decimal
    capital_portion: Decimal
    remaining_principal: Decimal
    is_deferred: bool = False
    months_covered: int = 1
    amortization_year: int | None = None  # Counted from the end of the deferral


@dataclass(frozen=True)
class LoanSummary:
    monthly_payment: Decimal
    monthly_payment_during_deferral: Decimal
    monthly_insurance: Decimal
    total_interest_cost: Decimal
    total_insurance_cost: Decimal
    total_repaid: Decimal

    @property
    def monthly_payment_with_insurance(self) -> Decimal:
        return self.monthly_payment + self.monthly_insurance
