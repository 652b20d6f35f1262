"""Allocation error types.

Expired deadlines, completed goals and fully excluded windows are plan
states, not errors. The only error is an internal invariant violation,
detected after a plan is built.

Standard error codes:
- SUM_MISMATCH: Day allocations do not add up to the remaining quantity
- NEGATIVE_ALLOCATION: A day received fewer than 0 units
- EXCLUDED_DAY_ALLOCATED: An excluded weekday received units
- CUMULATIVE_DECREASING: Running total goes down or does not end at the total
"""


class AllocationInvariantError(RuntimeError):
    """Raised when a computed plan violates an allocation invariant.

    Attributes:
        code: Error code (always "INVALID_PLAN" for plan validation)
        details: List of violated invariant codes
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")
