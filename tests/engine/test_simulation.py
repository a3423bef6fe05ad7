"""End-to-end tests for the simulation orchestrator."""

from decimal import Decimal

import pytest

from creditsim.engine.errors import InvalidParameter
from creditsim.engine.simulation import run_simulation
from creditsim.models.loan import LoanParameters


class TestRunSimulation:
    def test_canonical_dashboard(self, canonical_loan):
        result = run_simulation(canonical_loan)
        s = result.summary
        assert s.monthly_payment.quantize(Decimal("0.01")) == Decimal("1144.56")
        assert s.monthly_insurance.quantize(Decimal("0.01")) == Decimal("56.67")
        assert s.total_interest_cost.quantize(Decimal("0.01")) == Decimal("74695.13")
        assert s.total_insurance_cost.quantize(Decimal("0.01")) == Decimal("13600.00")
        assert s.total_repaid.quantize(Decimal("0.01")) == Decimal("288295.13")

    def test_components_are_consistent(self, deferred_loan):
        result = run_simulation(deferred_loan)
        assert result.params == deferred_loan
        assert len(result.schedule.rows) == 240
        assert len(result.yearly) == 20
        assert result.display_rows[0].is_deferred
        assert result.summary.monthly_payment == result.schedule.monthly_payment

    def test_effective_rate_included(self, canonical_loan):
        result = run_simulation(canonical_loan)
        assert result.effective_annual_rate_percent > canonical_loan.annual_rate_percent

    def test_plain_numbers_are_accepted(self):
        params = LoanParameters(
            principal=150000,
            annual_rate_percent=3.1,
            duration_years=15,
            deferred_months=6,
            insurance_rate_percent=0.25,
        )
        assert params.principal == Decimal("150000")
        assert params.annual_rate_percent == Decimal("3.1")
        result = run_simulation(params)
        assert len(result.schedule.rows) == 180

    def test_invalid_input_yields_no_result(self):
        with pytest.raises(InvalidParameter):
            run_simulation(LoanParameters(
                principal=Decimal("200000"),
                annual_rate_percent=Decimal("3.35"),
                duration_years=20,
                deferred_months=240,
            ))
