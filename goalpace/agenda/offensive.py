"""Daily offensive: combined reading and study progress for today.

Each goal scores min(100, done / daily goal) so one strong goal cannot
carry the others. Goals without a usable daily target are left out, and a
category with no goals scores 0 to nudge the user into configuring one.
"""

import math
from dataclasses import dataclass

from pydantic import BaseModel, Field

from goalpace.config.settings import settings
from goalpace.utils.numbers import round_half_up


class ReadingGoal(BaseModel):
    daily_goal: int | None = None
    pages_read_today: int = Field(default=0, ge=0)


class StudyGoal(BaseModel):
    goal_minutes: int = Field(default=0, ge=0)
    minutes_today: int = Field(default=0, ge=0)


@dataclass(frozen=True)
class DailyOffensive:
    reading_progress: int
    study_progress: int
    average_progress: int
    is_offensive: bool


def _capped_score(done: int, goal: int) -> float:
    return min(100.0, done / goal * 100)


def calculate_reading_progress(goals: list[ReadingGoal]) -> int:
    scored = [g for g in goals if g.daily_goal and g.daily_goal > 0]
    if not scored:
        return 0
    total = sum(_capped_score(g.pages_read_today, g.daily_goal) for g in scored)
    return round_half_up(total / len(scored))


def study_daily_goal(goal_minutes: int) -> int:
    """Daily study target derived from a total goal spread over the project."""
    if goal_minutes <= 0:
        return 30
    return max(settings.study_min_daily_goal_minutes, math.ceil(goal_minutes / settings.project_days))


def calculate_study_progress(goals: list[StudyGoal]) -> int:
    scored = [g for g in goals if g.goal_minutes > 0]
    if not scored:
        return 0
    total = sum(_capped_score(g.minutes_today, study_daily_goal(g.goal_minutes)) for g in scored)
    return round_half_up(total / len(scored))


def calculate_daily_offensive(reading: list[ReadingGoal], study: list[StudyGoal]) -> DailyOffensive:
    """Average reading and study progress; an empty category counts as 0."""
    reading_progress = calculate_reading_progress(reading)
    study_progress = calculate_study_progress(study)
    average = round_half_up((reading_progress + study_progress) / 2)

    return DailyOffensive(
        reading_progress=reading_progress,
        study_progress=study_progress,
        average_progress=average,
        is_offensive=average >= settings.offensive_threshold,
    )
