"""Amortization schedule computation with an optional interest-only deferral.

Pure functions: LoanParameters in, dataclass out. No I/O, no rounding.
"""

from decimal import Decimal

from creditsim.engine.annuity import ZERO, annuity_payment, require_non_negative, require_positive
from creditsim.engine.errors import InvalidParameter
from creditsim.models.loan import AmortizationSchedule, LoanParameters, LoanSummary, ScheduleRow


def validate_loan_parameters(params: LoanParameters) -> None:
    """Raise InvalidParameter for the first violated constraint."""
    require_positive("principal", params.principal)
    require_positive("duration_years", params.duration_years)
    require_non_negative("annual_rate_percent", params.annual_rate_percent)
    require_non_negative("insurance_rate_percent", params.insurance_rate_percent)
    require_non_negative("deferred_months", params.deferred_months)
    if params.deferred_months >= params.total_months:
        # A fully deferred loan never repays its principal
        raise InvalidParameter(
            "deferred_months",
            f"must be less than the loan term ({params.total_months} months)",
        )


def monthly_payment(params: LoanParameters) -> Decimal:
    """Steady-state payment of the amortizing phase.

    The deferral does not touch the principal, so the full principal is
    amortized over the remaining active months.
    """
    if params.active_months <= 0:
        return params.interest_only_payment
    return annuity_payment(params.principal, params.monthly_rate, params.active_months)


def compute_schedule(params: LoanParameters) -> AmortizationSchedule:
    """Generate the full month-by-month schedule.

    Deferred months pay interest only and leave the balance untouched; the
    remaining months pay the constant annuity payment.
    """
    validate_loan_parameters(params)

    pmt = monthly_payment(params)
    r = params.monthly_rate

    rows: list[ScheduleRow] = []
    remaining = params.principal

    for month in range(1, params.total_months + 1):
        interest = remaining * r

        if month <= params.deferred_months:
            rows.append(ScheduleRow(
                month_index=month,
                payment=interest,
                interest_portion=interest,
                capital_portion=ZERO,
                remaining_principal=remaining,
                is_deferred=True,
            ))
            continue

        capital = pmt - interest
        remaining = max(ZERO, remaining - capital)
        rows.append(ScheduleRow(
            month_index=month,
            payment=pmt,
            interest_portion=interest,
            capital_portion=capital,
            remaining_principal=remaining,
        ))

    return AmortizationSchedule(monthly_payment=pmt, rows=rows)


def loan_summary(params: LoanParameters, schedule: AmortizationSchedule) -> LoanSummary:
    """Dashboard totals from the closed forms, without re-summing rows."""
    io_payment = params.interest_only_payment
    pmt = schedule.monthly_payment
    deferred = Decimal(params.deferred_months)
    active = Decimal(max(params.active_months, 0))

    if params.monthly_rate == 0:
        # P / n * n is not exact in Decimal; a 0% loan repays exactly its principal
        paid_before_insurance = params.principal
    else:
        paid_before_insurance = io_payment * deferred + pmt * active
    total_insurance = params.monthly_insurance * Decimal(params.total_months)

    return LoanSummary(
        monthly_payment=pmt,
        monthly_payment_during_deferral=io_payment,
        monthly_insurance=params.monthly_insurance,
        total_interest_cost=paid_before_insurance - params.principal,
        total_insurance_cost=total_insurance,
        total_repaid=paid_before_insurance + total_insurance,
    )
