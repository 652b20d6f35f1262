"""Flat daily requirement.

The quick answer shown next to a goal: how many units per day are needed
to finish by the deadline if the remainder were spread evenly over every
calendar day. Work-session goals are also expressed in pomodoros and hours.
"""

import math
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from goalpace.config.settings import settings
from goalpace.utils.dates import days_between


class SessionGoalType(StrEnum):
    MINUTES = "MINUTES"
    POMODOROS = "POMODOROS"


@dataclass(frozen=True)
class DailyRequirement:
    remaining_days: int
    per_day: int
    is_expired: bool


@dataclass(frozen=True)
class SessionRequirement:
    remaining_days: int
    pomodoros_per_day: int
    hours_per_day: float
    is_expired: bool


def calculate_daily_requirement(remaining: int, today: date, deadline: date) -> DailyRequirement:
    """Units per day (rounded up) needed to finish ``remaining`` by ``deadline``.

    Args:
        remaining: Units left; negative values are treated as 0
        today: Anchor day
        deadline: Due date

    Returns:
        DailyRequirement; expired with zero fields when the deadline is today or earlier
    """
    remaining_days = days_between(today, deadline)
    if remaining_days <= 0:
        return DailyRequirement(remaining_days=0, per_day=0, is_expired=True)

    remaining = max(0, remaining)
    if remaining == 0:
        return DailyRequirement(remaining_days=remaining_days, per_day=0, is_expired=False)

    return DailyRequirement(
        remaining_days=remaining_days,
        per_day=math.ceil(remaining / remaining_days),
        is_expired=False,
    )


def calculate_session_requirement(
    goal_type: SessionGoalType | str,
    goal: int,
    completed: int,
    today: date,
    deadline: date,
) -> SessionRequirement:
    """Daily pomodoros and hours needed to reach a work-session goal.

    Args:
        goal_type: Whether ``goal`` and ``completed`` count pomodoros or minutes
        goal: Target units
        completed: Units already done
        today: Anchor day
        deadline: Due date

    Returns:
        SessionRequirement
    """
    goal_type = SessionGoalType(goal_type)
    requirement = calculate_daily_requirement(goal - completed, today, deadline)
    if requirement.is_expired:
        return SessionRequirement(remaining_days=0, pomodoros_per_day=0, hours_per_day=0.0, is_expired=True)

    units = requirement.per_day
    pomodoro = settings.pomodoro_minutes
    if goal_type == SessionGoalType.POMODOROS:
        pomodoros_per_day = units
        hours_per_day = units * pomodoro / 60
    else:
        pomodoros_per_day = math.ceil(units / pomodoro)
        hours_per_day = units / 60

    return SessionRequirement(
        remaining_days=requirement.remaining_days,
        pomodoros_per_day=pomodoros_per_day,
        hours_per_day=hours_per_day,
        is_expired=False,
    )
