"""Lookups over a computed allocation plan: today's entry and current phase."""

from datetime import date

from goalpace.allocation.types import AllocationPlan, DayAllocation, PhaseSummary


def today_allocation(plan: AllocationPlan | None, today: date) -> DayAllocation | None:
    """Return today's plan entry, falling back to the first day of the plan."""
    if plan is None or plan.is_expired or not plan.days:
        return None
    for day in plan.days:
        if day.date == today:
            return day
    return plan.days[0]


def current_phase(plan: AllocationPlan | None, today_item: DayAllocation | None, today: date) -> PhaseSummary | None:
    """Return the phase containing today.

    Today's position is counted among effective days only. When today is an
    excluded day (or outside the plan) the first phase is returned; a
    position past every phase resolves to the last one.
    """
    if plan is None or not plan.phases or today_item is None:
        return None

    effective_dates = [d.date for d in plan.days if not d.is_excluded]
    if today not in effective_dates:
        return plan.phases[0]
    today_index = effective_dates.index(today)

    for phase in plan.phases:
        if phase.start_day_index - 1 <= today_index < phase.end_day_index:
            return phase
    return plan.phases[-1]
