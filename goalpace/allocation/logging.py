"""Allocation invariant observability.

Call this before re-raising AllocationInvariantError.
"""

from loguru import logger

from goalpace.allocation.errors import AllocationInvariantError


def log_allocation_invariant_failure(err: AllocationInvariantError, context: dict[str, str | int | float | bool | None]) -> None:
    """Log an allocation invariant failure with context.

    Args:
        err: The AllocationInvariantError that occurred
        context: Additional context dictionary for logging
    """
    logger.error(
        "ALLOCATION_INVARIANT_FAILED",
        code=err.code,
        details=err.details,
        **context,
    )
