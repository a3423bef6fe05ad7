"""Effective annual rate of a loan, insurance included, using scipy.

Pure functions. No I/O.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from scipy.optimize import brentq

from creditsim.models.loan import AmortizationSchedule, LoanParameters

FOUR_PLACES = Decimal("0.0001")
MAX_MONTHLY_RATE = 1e6


def effective_annual_rate(params: LoanParameters, schedule: AmortizationSchedule) -> Decimal:
    """Annual percent rate equating monthly outflows with the principal.

    Outflows are each row's payment plus the constant insurance premium.
    Solves PV(x) = principal for the monthly rate x with Brent's method and
    annualizes it as (1 + x)^12 - 1.
    """
    insurance = float(params.monthly_insurance)
    outflows = [float(row.payment) + insurance for row in schedule.rows]
    principal = float(params.principal)

    def pv_gap(rate: float) -> float:
        # Discount in log space: (1 + rate) ** t overflows past ~1000 months at 100%
        log_growth = math.log1p(rate)
        return sum(
            cf * math.exp(-t * log_growth) for t, cf in enumerate(outflows, start=1)
        ) - principal

    if pv_gap(0.0) <= 0:
        # Outflows never exceed the principal: nothing is charged
        return Decimal("0")

    # Widen the bracket until PV drops below the principal
    upper = 1.0
    while pv_gap(upper) > 0 and upper < MAX_MONTHLY_RATE:
        upper *= 10

    try:
        monthly = brentq(pv_gap, 0.0, upper, xtol=1e-12, maxiter=1000)
    except ValueError:
        # No sign change inside the bracket
        return Decimal("0")

    annual = (1 + monthly) ** 12 - 1
    with localcontext() as ctx:
        # (1 + 1e6) ** 12 has 73 integer digits
        ctx.prec = 100
        return (Decimal(str(annual)) * 100).quantize(FOUR_PLACES, ROUND_HALF_UP)
