"""Weekly agenda progress.

Day progress compares logged minutes with the day's effective goals, each
item capped at its own target so overachieving one item never covers for
another. Week progress is the ratio of the summed day totals, not the mean
of the daily percentages, so days without goals do not skew it.
"""

from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import date

from loguru import logger

from goalpace.agenda.types import DayProgress, GoalKind, ItemProgress, ResolvedDayGoals, WeekProgress, WeeklyGoalTable
from goalpace.utils.dates import day_of_week
from goalpace.utils.numbers import percent_of

# (item_id, kind, date) -> logged minutes, or None when the item no longer exists
MinutesLookup = Callable[[str, GoalKind, date], int | None]


def resolve_day_goals(day: date, table: WeeklyGoalTable) -> ResolvedDayGoals:
    """Resolve the goals in force on ``day``.

    Priority: exact-date override > weekday default > no goals.
    """
    override = table.override_for(day)
    if override is not None:
        return ResolvedDayGoals(goals=tuple(override.goals), is_override=True, reason=override.reason)

    weekday_goals = table.weekday_goals.get(day_of_week(day))
    if weekday_goals:
        return ResolvedDayGoals(goals=tuple(weekday_goals), is_override=False)

    return ResolvedDayGoals(goals=(), is_override=False)


def day_progress(day: date, table: WeeklyGoalTable, minutes_lookup: MinutesLookup) -> DayProgress:
    """Compute progress for a single day.

    Args:
        day: Calendar day
        table: Weekly goal table
        minutes_lookup: Logged minutes per item and day

    Returns:
        DayProgress with per-item details
    """
    resolved = resolve_day_goals(day, table)
    details: list[ItemProgress] = []
    total_target = 0
    total_completed = 0

    for goal in resolved.goals:
        completed = minutes_lookup(goal.item_id, goal.kind, day)
        if completed is None:
            logger.debug(
                "agenda: Skipping goal for unknown item",
                item_id=goal.item_id,
                kind=goal.kind,
                date=day.isoformat(),
            )
            continue

        total_target += goal.target_minutes
        total_completed += min(completed, goal.target_minutes)
        details.append(ItemProgress(item_id=goal.item_id, kind=goal.kind, completed=completed, target=goal.target_minutes))

    return DayProgress(
        date=day,
        percentage=percent_of(total_completed, total_target),
        completed_minutes=total_completed,
        target_minutes=total_target,
        details=tuple(details),
        is_override=resolved.is_override,
        reason=resolved.reason,
    )


def week_progress(
    week_dates: Sequence[date],
    table: WeeklyGoalTable,
    minutes_lookup: MinutesLookup,
    today: date | None = None,
) -> WeekProgress:
    """Compute progress for a week.

    Args:
        week_dates: The 7 days of the week (see week_dates_from_monday)
        table: Weekly goal table
        minutes_lookup: Logged minutes per item and day
        today: Day flagged as ``is_today`` in the result, if any

    Returns:
        WeekProgress with one DayProgress per date
    """
    if len(week_dates) != 7:
        raise ValueError(f"week_progress expects 7 dates, got {len(week_dates)}")

    days: list[DayProgress] = []
    total_target = 0
    total_completed = 0

    for day in week_dates:
        result = day_progress(day, table, minutes_lookup)
        total_target += result.target_minutes
        total_completed += result.completed_minutes
        days.append(replace(result, is_today=day == today))

    logger.debug(
        "agenda: Week progress computed",
        week_start=week_dates[0].isoformat(),
        completed=total_completed,
        target=total_target,
    )

    return WeekProgress(
        percentage=percent_of(total_completed, total_target),
        completed_minutes=total_completed,
        target_minutes=total_target,
        days=tuple(days),
    )
