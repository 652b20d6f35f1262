"""Weekly agenda schemas.

A weekly goal table maps each weekday (0 = Sunday) to a list of minute
targets. An override for an exact date replaces the weekday list entirely,
including when its goal list is empty.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, field_validator

GoalKind = Literal["skill", "activity"]


class GoalItem(BaseModel):
    item_id: str
    target_minutes: int = Field(..., ge=0)
    kind: GoalKind = "skill"


class DayOverride(BaseModel):
    day: date
    goals: list[GoalItem] = Field(default_factory=list)
    reason: str | None = None


class WeeklyGoalTable(BaseModel):
    """Weekday defaults plus per-date overrides.

    Attributes:
        weekday_goals: Goals per weekday (0 = Sunday ... 6 = Saturday)
        overrides: Date-specific goal lists that win over the weekday default
    """

    weekday_goals: dict[int, list[GoalItem]] = Field(default_factory=dict)
    overrides: list[DayOverride] = Field(default_factory=list)

    @field_validator("weekday_goals")
    @classmethod
    def _weekdays_in_range(cls, value: dict[int, list[GoalItem]]) -> dict[int, list[GoalItem]]:
        invalid = sorted(d for d in value if d < 0 or d > 6)
        if invalid:
            raise ValueError(f"weekday_goals keys must be within 0..6, got {invalid}")
        return value

    def override_for(self, day: date) -> DayOverride | None:
        for override in self.overrides:
            if override.day == day:
                return override
        return None


@dataclass(frozen=True)
class ResolvedDayGoals:
    goals: tuple[GoalItem, ...]
    is_override: bool
    reason: str | None = None


@dataclass(frozen=True)
class ItemProgress:
    """Progress on one goal item.

    ``completed`` is the raw logged amount; only the capped amount counts
    toward the day total.
    """

    item_id: str
    kind: GoalKind
    completed: int
    target: int


@dataclass(frozen=True)
class DayProgress:
    date: date
    percentage: int
    completed_minutes: int
    target_minutes: int
    details: tuple[ItemProgress, ...] = ()
    is_override: bool = False
    reason: str | None = None
    is_today: bool = False


@dataclass(frozen=True)
class WeekProgress:
    percentage: int
    completed_minutes: int
    target_minutes: int
    days: tuple[DayProgress, ...] = field(default_factory=tuple)
