"""Allocation plan validator.

Runs after the engine builds a plan. A failure here is a defect in the
engine, never a consequence of user input.
"""

from goalpace.allocation.errors import AllocationInvariantError
from goalpace.allocation.types import AllocationPlan


def validate_allocation_plan(plan: AllocationPlan, *, remaining_quantity: int) -> None:
    """Validate a computed plan against all allocation invariants.

    Args:
        plan: Plan produced by the engine
        remaining_quantity: Quantity the plan was asked to distribute

    Raises:
        AllocationInvariantError: If any invariant is violated
    """
    if plan.is_expired:
        return

    errors: list[str] = []
    allocations = [d.allocated for d in plan.days]

    # ---- Exact reconciliation ----
    if plan.effective_day_count > 0 and sum(allocations) != remaining_quantity:
        errors.append("SUM_MISMATCH")

    # ---- Non-negativity ----
    if any(a < 0 for a in allocations):
        errors.append("NEGATIVE_ALLOCATION")

    # ---- Excluded-day zeroing ----
    if any(d.is_excluded and d.allocated != 0 for d in plan.days):
        errors.append("EXCLUDED_DAY_ALLOCATED")

    # ---- Cumulative monotonicity ----
    previous = 0
    for day in plan.days:
        if day.cumulative_allocated < previous:
            errors.append("CUMULATIVE_DECREASING")
            break
        previous = day.cumulative_allocated
    else:
        if plan.days and plan.effective_day_count > 0 and previous != plan.total_allocated:
            errors.append("CUMULATIVE_DECREASING")

    if errors:
        raise AllocationInvariantError("INVALID_PLAN", errors)
