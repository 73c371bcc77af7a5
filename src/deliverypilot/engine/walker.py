"""
DeliveryPilot Business Day Walker

Advances a date by N qualifying days under a caller-supplied exclusion test.

The search is bounded: at most ``MAX_ATTEMPTS`` calendar days are examined.
A configuration that excludes every day (all seven weekdays closed) ends
the search at the bound and returns the last date reached, flagged as
exhausted. The walk also stops at ``date.max``.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from ..logging_config import get_logger
from .clock import ExclusionTest

logger = get_logger("engine.walker")

MAX_ATTEMPTS = 60


@dataclass(frozen=True)
class WalkResult:
    """
    Outcome of a bounded walk.

    Attributes:
        date: Date reached
        counted: Qualifying days found
        exhausted: True when the bound stopped the walk before ``count``
    """
    date: date
    counted: int
    exhausted: bool = False


def walk(
    from_date: date,
    is_excluded: ExclusionTest,
    count: int,
    max_attempts: int = MAX_ATTEMPTS,
) -> WalkResult:
    """
    Walk forward from the day after ``from_date``.

    Args:
        from_date: Starting date (never itself counted)
        is_excluded: True for days that do not count
        count: Qualifying days to find; ``count <= 0`` returns ``from_date``
        max_attempts: Calendar days to examine at most

    Returns:
        WalkResult with the date of the ``count``-th qualifying day, or the
        last date examined when the bound was hit
    """
    if count <= 0:
        return WalkResult(date=from_date, counted=0)

    current = from_date
    counted = 0
    attempts = 0
    while counted < count and attempts < max_attempts and current < date.max:
        current += timedelta(days=1)
        attempts += 1
        if not is_excluded(current):
            counted += 1

    exhausted = counted < count
    if exhausted:
        logger.warning(
            "No %s qualifying days within %s days of %s; using %s",
            count,
            max_attempts,
            from_date.isoformat(),
            current.isoformat(),
            extra={"attempts": attempts},
        )
    return WalkResult(date=current, counted=counted, exhausted=exhausted)


def advance(from_date: date, is_excluded: ExclusionTest, count: int) -> date:
    """Date of the ``count``-th qualifying day after ``from_date`` (best effort)."""
    return walk(from_date, is_excluded, count).date
