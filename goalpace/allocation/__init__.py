"""Allocation module - deadline-driven daily plans.

This module provides:
- Linear and exponential day-by-day distribution with exact reconciliation
- Phase summaries over effective days
- Today's entry and current-phase lookups
- Flat daily requirements for quick estimates
"""

from goalpace.allocation.curve import exponential_factor
from goalpace.allocation.engine import allocate
from goalpace.allocation.errors import AllocationInvariantError
from goalpace.allocation.lookup import current_phase, today_allocation
from goalpace.allocation.requirement import (
    DailyRequirement,
    SessionGoalType,
    SessionRequirement,
    calculate_daily_requirement,
    calculate_session_requirement,
)
from goalpace.allocation.types import (
    AllocationPlan,
    AllocationRequest,
    DayAllocation,
    DistributionType,
    PhaseSummary,
)

__all__ = [
    "AllocationInvariantError",
    "AllocationPlan",
    "AllocationRequest",
    "DailyRequirement",
    "DayAllocation",
    "DistributionType",
    "PhaseSummary",
    "SessionGoalType",
    "SessionRequirement",
    "allocate",
    "calculate_daily_requirement",
    "calculate_session_requirement",
    "current_phase",
    "exponential_factor",
    "today_allocation",
]
