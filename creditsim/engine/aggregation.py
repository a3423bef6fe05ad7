"""Schedule rollups for charts and the compacted amortization table.

Pure functions over an existing schedule. Nothing here re-derives payments.
"""

from creditsim.engine.annuity import MONTHS_PER_YEAR, ZERO
from creditsim.models.loan import DisplayRow, ScheduleRow, YearlySummary


def to_yearly_summary(rows: list[ScheduleRow], duration_years: int) -> list[YearlySummary]:
    """Aggregate the schedule by loan year.

    Month m belongs to year ceil(m / 12). Deferred months count like any
    other: zero capital, their own interest.
    """
    buckets: dict[int, list[ScheduleRow]] = {year: [] for year in range(1, duration_years + 1)}
    for row in rows:
        if row.year in buckets:
            buckets[row.year].append(row)

    yearly: list[YearlySummary] = []
    for year, bucket in buckets.items():
        yearly.append(YearlySummary(
            year=year,
            capital_paid=sum((r.capital_portion for r in bucket), ZERO),
            interest_paid=sum((r.interest_portion for r in bucket), ZERO),
            remaining_principal_at_year_end=bucket[-1].remaining_principal if bucket else ZERO,
        ))

    return yearly


def _deferred_block(deferred: list[ScheduleRow]) -> DisplayRow:
    last = deferred[-1]
    return DisplayRow(
        month_index=last.month_index,
        payment=last.payment,
        interest_portion=last.interest_portion,
        capital_portion=ZERO,
        remaining_principal=last.remaining_principal,
        is_deferred=True,
        months_covered=len(deferred),
    )


def _sampled(row: ScheduleRow, deferred_months: int) -> DisplayRow:
    active_month = row.month_index - deferred_months
    return DisplayRow(
        month_index=row.month_index,
        payment=row.payment,
        interest_portion=row.interest_portion,
        capital_portion=row.capital_portion,
        remaining_principal=row.remaining_principal,
        amortization_year=(active_month - 1) // MONTHS_PER_YEAR + 1,
    )


def to_display_rows(rows: list[ScheduleRow], deferred_months: int) -> list[DisplayRow]:
    """Compact the schedule to roughly one row per year.

    The deferred block collapses into one synthetic row; after it, the first
    month of each amortization year is shown, plus the final month. Display
    only: totals always come from the full schedule.
    """
    if not rows:
        return []

    display: list[DisplayRow] = []

    deferred = [r for r in rows if r.is_deferred and r.month_index <= deferred_months]
    if deferred:
        display.append(_deferred_block(deferred))

    active = [r for r in rows if r.month_index > deferred_months]
    for i, row in enumerate(active):
        is_year_start = (row.month_index - deferred_months) % MONTHS_PER_YEAR == 1
        is_final = i == len(active) - 1
        if is_year_start or is_final:
            display.append(_sampled(row, deferred_months))

    return display
