"""Agenda module - weekly minute goals and daily progress.

This module provides:
- Goal resolution with per-date overrides over weekday defaults
- Capped per-day and per-week completion percentages
- The daily offensive score across reading and study goals
"""

from goalpace.agenda.offensive import (
    DailyOffensive,
    ReadingGoal,
    StudyGoal,
    calculate_daily_offensive,
    calculate_reading_progress,
    calculate_study_progress,
)
from goalpace.agenda.progress import MinutesLookup, day_progress, resolve_day_goals, week_progress
from goalpace.agenda.types import (
    DayOverride,
    DayProgress,
    GoalItem,
    ItemProgress,
    ResolvedDayGoals,
    WeekProgress,
    WeeklyGoalTable,
)

__all__ = [
    "DailyOffensive",
    "DayOverride",
    "DayProgress",
    "GoalItem",
    "ItemProgress",
    "MinutesLookup",
    "ReadingGoal",
    "ResolvedDayGoals",
    "StudyGoal",
    "WeekProgress",
    "WeeklyGoalTable",
    "calculate_daily_offensive",
    "calculate_reading_progress",
    "calculate_study_progress",
    "day_progress",
    "resolve_day_goals",
    "week_progress",
]
