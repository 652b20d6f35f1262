"""Tests for the allocation plan validator."""

from datetime import date

import pytest

from goalpace.allocation.errors import AllocationInvariantError
from goalpace.allocation.types import AllocationPlan, DayAllocation
from goalpace.allocation.validate import validate_allocation_plan


def _day(offset: int, allocated: int, cumulative: int, excluded: bool = False) -> DayAllocation:
    return DayAllocation(
        date=date(2025, 1, 6 + offset),
        weekday=(1 + offset) % 7,
        weekday_name="",
        allocated=allocated,
        is_excluded=excluded,
        cumulative_allocated=cumulative,
        percent_of_average=0,
        formatted_date="",
    )


def _plan(*days: DayAllocation, total: int, effective: int) -> AllocationPlan:
    return AllocationPlan(
        days=days,
        total_allocated=total,
        effective_day_count=effective,
        average_per_effective_day=total / effective if effective else 0.0,
        phases=(),
        is_expired=False,
    )


def test_valid_plan_passes():
    validate_allocation_plan(_plan(_day(0, 4, 4), _day(1, 6, 10), total=10, effective=2), remaining_quantity=10)


def test_expired_plan_is_not_checked():
    validate_allocation_plan(AllocationPlan.expired(), remaining_quantity=50)


def test_sum_mismatch():
    with pytest.raises(AllocationInvariantError) as exc_info:
        validate_allocation_plan(_plan(_day(0, 4, 4), _day(1, 5, 9), total=10, effective=2), remaining_quantity=10)
    assert exc_info.value.code == "INVALID_PLAN"
    assert "SUM_MISMATCH" in exc_info.value.details


def test_negative_and_excluded_allocations():
    plan = _plan(_day(0, 12, 12), _day(1, 1, 13, excluded=True), _day(2, -3, 10), total=10, effective=2)
    with pytest.raises(AllocationInvariantError) as exc_info:
        validate_allocation_plan(plan, remaining_quantity=10)
    assert "NEGATIVE_ALLOCATION" in exc_info.value.details
    assert "EXCLUDED_DAY_ALLOCATED" in exc_info.value.details
    assert "CUMULATIVE_DECREASING" in exc_info.value.details


def test_fully_blocked_plan_skips_sum_check():
    plan = _plan(_day(0, 0, 0, excluded=True), total=30, effective=0)
    validate_allocation_plan(plan, remaining_quantity=30)
