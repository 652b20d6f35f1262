"""Tests for phase bucketing."""

from datetime import timedelta

from goalpace.allocation.engine import allocate
from goalpace.allocation.phases import calculate_phases
from goalpace.allocation.types import AllocationRequest, DistributionType


def _plan(today, remaining, days, **kwargs):
    return allocate(
        AllocationRequest(remaining_quantity=remaining, today=today, deadline=today + timedelta(days=days), **kwargs)
    )


def test_four_phases_with_short_last_bucket(today):
    plan = _plan(today, 100, 10)
    assert [(p.start_day_index, p.end_day_index) for p in plan.phases] == [(1, 3), (4, 6), (7, 9), (10, 10)]
    assert [p.name for p in plan.phases] == ["Início", "Ramp", "Pico", "Final"]
    assert [p.symbol for p in plan.phases] == ["🌱", "📈", "🚀", "⭐"]
    assert [p.total_allocated for p in plan.phases] == [30, 30, 30, 10]
    assert all(p.average_per_day == 10 for p in plan.phases)
    assert all(p.percent_range_label == "100%-100%" for p in plan.phases)


def test_trailing_phases_omitted_for_short_windows(today):
    assert [p.name for p in _plan(today, 50, 5).phases] == ["Início", "Ramp", "Pico"]
    assert [(p.start_day_index, p.end_day_index) for p in _plan(today, 50, 5).phases] == [(1, 2), (3, 4), (5, 5)]
    assert [p.name for p in _plan(today, 50, 2).phases] == ["Início", "Ramp"]


def test_phase_labels_use_reconciled_values(today):
    plan = _plan(today, 100, 14)
    final = plan.phases[-1]
    assert (final.start_day_index, final.end_day_index) == (13, 14)
    assert final.total_allocated == 16
    assert final.average_per_day == 8
    assert final.percent_range_label == "98%-126%"
    assert plan.phases[0].percent_range_label == "98%-98%"


def test_phases_count_effective_days_only(today):
    plan = _plan(today, 100, 14, excluded_weekdays={0, 6})
    assert [(p.start_day_index, p.end_day_index) for p in plan.phases] == [(1, 3), (4, 6), (7, 9), (10, 10)]
    assert sum(p.total_allocated for p in plan.phases) == 100


def test_exponential_phase_totals_grow(today):
    plan = _plan(today, 400, 20, distribution=DistributionType.EXPONENTIAL, intensity=1.0)
    totals = [p.total_allocated for p in plan.phases]
    assert totals == sorted(totals)
    assert sum(totals) == 400


def test_no_effective_days_gives_no_phases():
    assert calculate_phases([], 0.0) == []
