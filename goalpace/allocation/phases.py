"""Phase bucketing for allocation plans.

Effective days are split into up to four contiguous buckets of
ceil(effective / 4) days; the last bucket may be short and buckets that
would start past the end are omitted.
"""

import math

from goalpace.allocation.invariants import PHASE_CONFIGS, PHASE_COUNT
from goalpace.allocation.types import DayAllocation, PhaseSummary
from goalpace.utils.numbers import percent_of, round_half_up


def calculate_phases(days: list[DayAllocation], average_per_effective_day: float) -> list[PhaseSummary]:
    """Group the effective days of a plan into phases.

    Args:
        days: All plan days, excluded ones included
        average_per_effective_day: Plan average used for the percent labels

    Returns:
        Ordered phases; empty when there are no effective days
    """
    effective = [d for d in days if not d.is_excluded]
    if not effective:
        return []

    phase_size = math.ceil(len(effective) / PHASE_COUNT)
    phases: list[PhaseSummary] = []

    for p, (name, symbol) in enumerate(PHASE_CONFIGS):
        start = p * phase_size
        if start >= len(effective):
            break
        end = min(start + phase_size, len(effective))

        members = effective[start:end]
        total = sum(d.allocated for d in members)
        min_pct = percent_of(min(d.allocated for d in members), average_per_effective_day)
        max_pct = percent_of(max(d.allocated for d in members), average_per_effective_day)

        phases.append(
            PhaseSummary(
                name=name,
                symbol=symbol,
                start_day_index=start + 1,
                end_day_index=end,
                average_per_day=round_half_up(total / len(members)),
                total_allocated=total,
                percent_range_label=f"{min_pct}%-{max_pct}%",
            )
        )

    return phases
