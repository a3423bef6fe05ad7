"""Credit simulation orchestrator: composes the engine units into one result.

Pure computation. No I/O. LoanParameters in, SimulationResult out.
"""

from creditsim.engine.aggregation import to_display_rows, to_yearly_summary
from creditsim.engine.amortization import compute_schedule, loan_summary
from creditsim.engine.apr import effective_annual_rate
from creditsim.models.loan import LoanParameters
from creditsim.models.results import SimulationResult


def run_simulation(params: LoanParameters) -> SimulationResult:
    """Run a complete credit simulation.

    Returns the full schedule, the dashboard totals, the yearly rollup for
    charts and the compacted table rows.
    """
    schedule = compute_schedule(params)

    return SimulationResult(
        params=params,
        schedule=schedule,
        summary=loan_summary(params, schedule),
        yearly=to_yearly_summary(schedule.rows, params.duration_years),
        display_rows=to_display_rows(schedule.rows, params.deferred_months),
        effective_annual_rate_percent=effective_annual_rate(params, schedule),
    )
