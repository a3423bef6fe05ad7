"""Canonical test fixtures used across all engine tests.

Fixture: 200K loan at 3.35% over 20 years, 0.34% insurance on the principal.
Household: 3,500/month net income, no existing debt.
"""

import pytest
from decimal import Decimal

from creditsim.models.capacity import BorrowingCapacityInput
from creditsim.models.loan import LoanParameters


@pytest.fixture
def canonical_loan() -> LoanParameters:
    """200K over 20 years, no deferral."""
    return LoanParameters(
        principal=Decimal("200000"),
        annual_rate_percent=Decimal("3.35"),
        duration_years=20,
        deferred_months=0,
        insurance_rate_percent=Decimal("0.34"),
    )


@pytest.fixture
def deferred_loan() -> LoanParameters:
    """Canonical loan with a 12-month interest-only deferral."""
    return LoanParameters(
        principal=Decimal("200000"),
        annual_rate_percent=Decimal("3.35"),
        duration_years=20,
        deferred_months=12,
        insurance_rate_percent=Decimal("0.34"),
    )


@pytest.fixture
def zero_rate_loan() -> LoanParameters:
    """100K interest-free over 10 years."""
    return LoanParameters(
        principal=Decimal("100000"),
        annual_rate_percent=Decimal("0"),
        duration_years=10,
    )


@pytest.fixture
def canonical_household() -> BorrowingCapacityInput:
    return BorrowingCapacityInput(
        net_monthly_income=Decimal("3500"),
        existing_monthly_payments=Decimal("0"),
        annual_rate_percent=Decimal("3.35"),
        duration_years=20,
    )
