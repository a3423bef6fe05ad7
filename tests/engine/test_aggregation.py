from decimal import Decimal

from creditsim.engine.aggregation import to_display_rows, to_yearly_summary
from creditsim.engine.amortization import compute_schedule
from creditsim.models.loan import LoanParameters

EPS = Decimal("0.000001")


class TestYearlySummary:
    def test_one_entry_per_year(self, canonical_loan):
        rows = compute_schedule(canonical_loan).rows
        yearly = to_yearly_summary(rows, 20)
        assert [y.year for y in yearly] == list(range(1, 21))

    def test_first_year(self, canonical_loan):
        rows = compute_schedule(canonical_loan).rows
        first = to_yearly_summary(rows, 20)[0]
        assert abs(first.capital_paid - Decimal("7143.7806")) < Decimal("0.0001")
        assert abs(first.interest_paid - Decimal("6590.9757")) < Decimal("0.0001")
        assert abs(first.remaining_principal_at_year_end - Decimal("192856.2194")) < Decimal("0.0001")

    def test_year_end_balance_is_twelfth_row(self, canonical_loan):
        rows = compute_schedule(canonical_loan).rows
        yearly = to_yearly_summary(rows, 20)
        for y in yearly:
            assert y.remaining_principal_at_year_end == rows[y.year * 12 - 1].remaining_principal

    def test_yearly_totals_match(self, deferred_loan):
        rows = compute_schedule(deferred_loan).rows
        yearly = to_yearly_summary(rows, 20)
        assert abs(sum(y.capital_paid for y in yearly) - sum(r.capital_portion for r in rows)) < EPS
        assert abs(sum(y.interest_paid for y in yearly) - sum(r.interest_portion for r in rows)) < EPS

    def test_deferred_year_repays_no_capital(self, deferred_loan):
        rows = compute_schedule(deferred_loan).rows
        first = to_yearly_summary(rows, 20)[0]
        assert first.capital_paid == 0
        assert first.remaining_principal_at_year_end == Decimal("200000")
        # Twelve interest-only months at 558.33
        assert abs(first.interest_paid - Decimal("6700")) < EPS

    def test_final_year_closes_the_loan(self, deferred_loan):
        rows = compute_schedule(deferred_loan).rows
        last = to_yearly_summary(rows, 20)[-1]
        assert abs(last.remaining_principal_at_year_end) < EPS

    def test_rows_bucketed_by_loan_year(self, canonical_loan):
        rows = compute_schedule(canonical_loan).rows
        assert [rows[i].year for i in (0, 11, 12, 23, 239)] == [1, 1, 2, 2, 20]
        second = to_yearly_summary(rows, 20)[1]
        assert second.capital_paid == sum((r.capital_portion for r in rows[12:24]), Decimal("0"))
        assert second.remaining_principal_at_year_end == rows[23].remaining_principal

    def test_rows_past_the_term_are_ignored(self, canonical_loan):
        rows = compute_schedule(canonical_loan).rows
        yearly = to_yearly_summary(rows, 2)
        assert len(yearly) == 2
        assert yearly[-1].remaining_principal_at_year_end == rows[23].remaining_principal

    def test_missing_year_is_empty(self):
        yearly = to_yearly_summary([], 2)
        assert len(yearly) == 2
        assert yearly[1].capital_paid == 0
        assert yearly[1].remaining_principal_at_year_end == 0


class TestDisplayRows:
    def test_one_row_per_year_plus_final(self, canonical_loan):
        rows = compute_schedule(canonical_loan).rows
        display = to_display_rows(rows, 0)
        # Months 1, 13, ..., 229, then month 240
        assert [d.month_index for d in display] == list(range(1, 240, 12)) + [240]
        assert [d.amortization_year for d in display] == list(range(1, 21)) + [20]
        assert not any(d.is_deferred for d in display)

    def test_deferred_block_collapses_to_one_row(self, deferred_loan):
        rows = compute_schedule(deferred_loan).rows
        display = to_display_rows(rows, 12)
        block = display[0]
        assert block.is_deferred
        assert block.months_covered == 12
        assert block.month_index == 12
        assert block.capital_portion == 0
        assert block.amortization_year is None
        assert abs(block.payment - Decimal("558.333333")) < EPS
        assert sum(1 for d in display if d.is_deferred) == 1

    def test_years_counted_from_end_of_deferral(self, deferred_loan):
        rows = compute_schedule(deferred_loan).rows
        display = to_display_rows(rows, 12)[1:]
        # 228 active months: months 13, 25, ..., 229, then month 240
        assert [d.month_index for d in display] == list(range(13, 240, 12)) + [240]
        assert display[0].amortization_year == 1
        assert display[-2].amortization_year == 19
        assert display[-1].amortization_year == 19

    def test_samples_are_schedule_values(self, deferred_loan):
        rows = compute_schedule(deferred_loan).rows
        by_month = {r.month_index: r for r in rows}
        for d in to_display_rows(rows, 12)[1:]:
            source = by_month[d.month_index]
            assert d.payment == source.payment
            assert d.remaining_principal == source.remaining_principal

    def test_final_row_not_duplicated(self):
        params = LoanParameters(
            principal=Decimal("1000"),
            annual_rate_percent=Decimal("5"),
            duration_years=1,
            deferred_months=11,
        )
        display = to_display_rows(compute_schedule(params).rows, 11)
        assert [d.month_index for d in display] == [11, 12]

    def test_empty_schedule(self):
        assert to_display_rows([], 0) == []
