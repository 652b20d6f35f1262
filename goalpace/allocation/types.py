"""Allocation request and plan schemas.

The request is a validated pydantic model; the plan and its parts are frozen
dataclasses computed by the engine. None of them carry identity or mutable
state: identical requests always yield identical plans.
"""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from goalpace.allocation.invariants import MAX_INTENSITY, MIN_INTENSITY
from goalpace.utils.dates import start_of_day


class DistributionType(StrEnum):
    LINEAR = "LINEAR"
    EXPONENTIAL = "EXPONENTIAL"


class AllocationRequest(BaseModel):
    """Input to the allocation engine.

    Attributes:
        remaining_quantity: Units left to distribute (pages, chapters, minutes)
        today: Anchor day, captured once by the caller
        deadline: Due date; the plan covers today .. deadline - 1
        excluded_weekdays: Weekdays (0 = Sunday) that receive no allocation
        distribution: LINEAR or EXPONENTIAL
        intensity: Curve intensity in [0, 1]; clamped, only used by EXPONENTIAL
    """

    model_config = ConfigDict(frozen=True)

    remaining_quantity: int
    today: date
    deadline: date
    excluded_weekdays: frozenset[int] = Field(default_factory=frozenset)
    distribution: DistributionType = DistributionType.LINEAR
    intensity: float = 1.0

    @field_validator("today", "deadline", mode="before")
    @classmethod
    def _normalize_day(cls, value: object) -> object:
        if isinstance(value, (date, str)):
            return start_of_day(value)
        return value

    @field_validator("excluded_weekdays")
    @classmethod
    def _weekdays_in_range(cls, value: frozenset[int]) -> frozenset[int]:
        invalid = sorted(d for d in value if d < 0 or d > 6)
        if invalid:
            raise ValueError(f"excluded_weekdays must be within 0..6, got {invalid}")
        return value

    @field_validator("intensity")
    @classmethod
    def _clamp_intensity(cls, value: float) -> float:
        return min(MAX_INTENSITY, max(MIN_INTENSITY, value))

    @classmethod
    def from_progress(
        cls,
        *,
        total: int,
        done: int,
        today: date,
        deadline: date,
        excluded_weekdays: frozenset[int] | set[int] | None = None,
        distribution: DistributionType | str = DistributionType.LINEAR,
        intensity: float = 1.0,
    ) -> "AllocationRequest":
        """Build a request from a goal's total and completed units."""
        return cls(
            remaining_quantity=max(0, total - done),
            today=today,
            deadline=deadline,
            excluded_weekdays=frozenset(excluded_weekdays or ()),
            distribution=DistributionType(distribution),
            intensity=intensity,
        )


@dataclass(frozen=True)
class DayAllocation:
    """One calendar day of an allocation plan.

    Attributes:
        date: Calendar day
        weekday: 0 = Sunday ... 6 = Saturday
        weekday_name: Display name of the weekday
        allocated: Units assigned to this day (0 when excluded)
        is_excluded: Whether the weekday is blocked by the user
        cumulative_allocated: Running total up to and including this day
        percent_of_average: allocated / average per effective day, in percent
        formatted_date: Short display date (e.g. "20 dez")
    """

    date: date
    weekday: int
    weekday_name: str
    allocated: int
    is_excluded: bool
    cumulative_allocated: int
    percent_of_average: int
    formatted_date: str


@dataclass(frozen=True)
class PhaseSummary:
    """Summary of a contiguous bucket of effective days.

    Attributes:
        name: Phase name (Início, Ramp, Pico, Final)
        symbol: Phase emoji
        start_day_index: 1-based first effective day of the phase
        end_day_index: 1-based last effective day of the phase (inclusive)
        average_per_day: Rounded mean allocation of the phase
        total_allocated: Sum of the phase's allocations
        percent_range_label: "min%-max%" relative to the plan average
    """

    name: str
    symbol: str
    start_day_index: int
    end_day_index: int
    average_per_day: int
    total_allocated: int
    percent_range_label: str


@dataclass(frozen=True)
class AllocationPlan:
    """Day-by-day allocation for one goal.

    ``total_allocated`` equals the request's remaining quantity whenever the
    plan is not expired. When every day is excluded it is an unallocated carry
    value and ``effective_day_count`` is 0.
    """

    days: tuple[DayAllocation, ...]
    total_allocated: int
    effective_day_count: int
    average_per_effective_day: float
    phases: tuple[PhaseSummary, ...]
    is_expired: bool

    @property
    def is_fully_blocked(self) -> bool:
        """True when work remains but every day in the window is excluded."""
        return not self.is_expired and bool(self.days) and self.effective_day_count == 0 and self.total_allocated > 0

    @classmethod
    def expired(cls) -> "AllocationPlan":
        return cls(
            days=(),
            total_allocated=0,
            effective_day_count=0,
            average_per_effective_day=0.0,
            phases=(),
            is_expired=True,
        )
