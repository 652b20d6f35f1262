"""Deadline allocation engine.

Distributes a remaining quantity over the days between ``today`` and the
deadline. LINEAR gives every effective day the same weight; EXPONENTIAL
weights effective days along the ease-in curve so the load grows as the
deadline approaches. Excluded weekdays get nothing and do not consume a
curve position.

Per-day values are rounded half-up, then the rounding difference is
settled on the last effective day so the plan sums exactly to the
remaining quantity. A negative difference larger than that day's share
keeps walking backward over earlier effective days, clamping each at 0.
"""

from collections.abc import Callable
from datetime import date

from loguru import logger

from goalpace.allocation.curve import exponential_factor
from goalpace.allocation.errors import AllocationInvariantError
from goalpace.allocation.logging import log_allocation_invariant_failure
from goalpace.allocation.phases import calculate_phases
from goalpace.allocation.types import AllocationPlan, AllocationRequest, DayAllocation, DistributionType
from goalpace.allocation.validate import validate_allocation_plan
from goalpace.utils.dates import add_days, day_name, day_of_week, days_between
from goalpace.utils.formatting import format_date_short
from goalpace.utils.numbers import percent_of, round_half_up

DateFormatter = Callable[[date], str]


def _reconcile(allocations: list[int], excluded: list[bool], remaining: int) -> None:
    """Settle the rounding difference in place, starting at the last effective day."""
    diff = remaining - sum(allocations)
    if diff == 0:
        return

    for i in range(len(allocations) - 1, -1, -1):
        if excluded[i]:
            continue
        if diff > 0:
            allocations[i] += diff
            return
        taken = min(allocations[i], -diff)
        allocations[i] -= taken
        diff += taken
        if diff == 0:
            return


def _zero_days(dates: list[date], excluded: list[bool], formatter: DateFormatter) -> tuple[DayAllocation, ...]:
    return tuple(
        DayAllocation(
            date=d,
            weekday=day_of_week(d),
            weekday_name=day_name(day_of_week(d)),
            allocated=0,
            is_excluded=is_excluded,
            cumulative_allocated=0,
            percent_of_average=0,
            formatted_date=formatter(d),
        )
        for d, is_excluded in zip(dates, excluded, strict=True)
    )


def allocate(request: AllocationRequest, *, date_formatter: DateFormatter | None = None) -> AllocationPlan:
    """Build the day-by-day allocation plan for one goal.

    Args:
        request: Remaining quantity, window and distribution settings
        date_formatter: Display formatter for each day (defaults to "20 dez")

    Returns:
        AllocationPlan. Expired when the deadline is today or earlier;
        zero-filled when nothing remains; zero-filled with
        ``effective_day_count == 0`` when every day is excluded.

    Raises:
        AllocationInvariantError: Only on an internal defect (logged first)
    """
    formatter = date_formatter or format_date_short
    total_days = days_between(request.today, request.deadline)

    if total_days <= 0:
        logger.debug(
            "allocation: Deadline reached, plan expired",
            today=request.today.isoformat(),
            deadline=request.deadline.isoformat(),
        )
        return AllocationPlan.expired()

    dates = [add_days(request.today, i) for i in range(total_days)]
    excluded = [day_of_week(d) in request.excluded_weekdays for d in dates]
    effective_count = excluded.count(False)
    remaining = max(0, request.remaining_quantity)

    if remaining == 0 or effective_count == 0:
        logger.debug(
            "allocation: Nothing to distribute",
            remaining=remaining,
            total_days=total_days,
            effective_days=effective_count,
        )
        return AllocationPlan(
            days=_zero_days(dates, excluded, formatter),
            total_allocated=remaining,
            effective_day_count=effective_count,
            average_per_effective_day=0.0,
            phases=(),
            is_expired=False,
        )

    # ---- Weights ----
    is_exponential = request.distribution == DistributionType.EXPONENTIAL
    weights: list[float] = []
    effective_index = 0
    for is_excluded in excluded:
        if is_excluded:
            weights.append(0.0)
            continue
        if is_exponential:
            weights.append(exponential_factor(effective_index, effective_count, request.intensity))
        else:
            weights.append(1.0)
        effective_index += 1

    weight_sum = sum(weights)

    # ---- Distribution ----
    allocations = [
        0 if is_excluded or weight_sum <= 0 else round_half_up(weight / weight_sum * remaining)
        for weight, is_excluded in zip(weights, excluded, strict=True)
    ]
    _reconcile(allocations, excluded, remaining)

    average = remaining / effective_count
    days: list[DayAllocation] = []
    cumulative = 0
    for d, allocated, is_excluded in zip(dates, allocations, excluded, strict=True):
        cumulative += allocated
        weekday = day_of_week(d)
        days.append(
            DayAllocation(
                date=d,
                weekday=weekday,
                weekday_name=day_name(weekday),
                allocated=allocated,
                is_excluded=is_excluded,
                cumulative_allocated=cumulative,
                percent_of_average=0 if is_excluded else percent_of(allocated, average),
                formatted_date=formatter(d),
            )
        )

    plan = AllocationPlan(
        days=tuple(days),
        total_allocated=remaining,
        effective_day_count=effective_count,
        average_per_effective_day=average,
        phases=tuple(calculate_phases(days, average)),
        is_expired=False,
    )

    try:
        validate_allocation_plan(plan, remaining_quantity=remaining)
    except AllocationInvariantError as e:
        log_allocation_invariant_failure(
            e,
            {
                "remaining": remaining,
                "total_days": total_days,
                "effective_days": effective_count,
                "distribution": request.distribution.value,
                "intensity": request.intensity,
            },
        )
        raise

    logger.debug(
        "allocation: Plan built",
        remaining=remaining,
        total_days=total_days,
        effective_days=effective_count,
        distribution=request.distribution.value,
        intensity=request.intensity,
        phases=len(plan.phases),
    )
    return plan
