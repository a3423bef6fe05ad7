from dataclasses import dataclass
from decimal import Decimal

from creditsim.engine.annuity import to_decimal, to_whole


@dataclass(frozen=True)
class BorrowingCapacityInput:
    net_monthly_income: Decimal
    annual_rate_percent: Decimal
    duration_years: int
    existing_monthly_payments: Decimal = Decimal("0")  # Other loans already being repaid

    def __post_init__(self):
        object.__setattr__(
            self, "net_monthly_income", to_decimal("net_monthly_income", self.net_monthly_income)
        )
        object.__setattr__(
            self, "annual_rate_percent", to_decimal("annual_rate_percent", self.annual_rate_percent)
        )
        object.__setattr__(self, "duration_years", to_whole("duration_years", self.duration_years))
        object.__setattr__(
            self, "existing_monthly_payments",
            to_decimal("existing_monthly_payments", self.existing_monthly_payments),
        )


@dataclass(frozen=True)
class BorrowingCapacityResult:
    max_monthly_payment: Decimal  # Debt-to-income ceiling applied to net income
    available_payment: Decimal  # Ceiling minus existing obligations, floored at 0
    max_loan_amount: Decimal
    annual_rate_percent: Decimal
    duration_years: int
