"""Borrowing capacity: the largest principal a household can repay.

Inverts the annuity payment used by the amortization schedule, so feeding
``max_loan_amount`` back into :func:`compute_schedule` reproduces
``available_payment``.
"""

from decimal import Decimal

from creditsim.engine.annuity import (
    MONTHS_PER_YEAR,
    ZERO,
    annuity_principal,
    monthly_rate,
    require_non_negative,
    require_positive,
)
from creditsim.engine.errors import InvalidIncome
from creditsim.models.capacity import BorrowingCapacityInput, BorrowingCapacityResult

DEBT_TO_INCOME_CEILING = Decimal("0.33")  # Max share of net income spent on debt


def estimate_capacity(req: BorrowingCapacityInput) -> BorrowingCapacityResult:
    """Maximum loan under the debt-to-income ceiling.

    max_payment = income * 33%
    available   = max(0, max_payment - existing payments)
    max_loan    = available * (1 - (1 + r)^-n) / r   (available * n at 0%)
    """
    if req.net_monthly_income <= 0:
        raise InvalidIncome()
    require_non_negative("existing_monthly_payments", req.existing_monthly_payments)
    require_non_negative("annual_rate_percent", req.annual_rate_percent)
    require_positive("duration_years", req.duration_years)

    max_payment = req.net_monthly_income * DEBT_TO_INCOME_CEILING
    available = max(ZERO, max_payment - req.existing_monthly_payments)
    n = req.duration_years * MONTHS_PER_YEAR

    return BorrowingCapacityResult(
        max_monthly_payment=max_payment,
        available_payment=available,
        max_loan_amount=annuity_principal(available, monthly_rate(req.annual_rate_percent), n),
        annual_rate_percent=req.annual_rate_percent,
        duration_years=req.duration_years,
    )
