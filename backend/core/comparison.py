"""
Comparison Engine: today's session against the most recent prior session.

Only complete sessions are compared. A session qualifies when its set count
is exactly the exercise's target sets (see
backend.core.grouping.find_qualifying_group). When there is nothing to
compare against, the engine returns a ``ComparisonRejection`` instead of
comparing against zero.

Percentage changes are ``None`` when the previous value is zero, so no
``NaN`` or ``inf`` ever reaches a response.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Sequence, Union

from domain.models import WorkoutSet
from backend.core.grouping import (
    end_of_day,
    find_qualifying_group,
    group_by_date,
    sort_chronologically,
    start_of_day,
    to_utc,
)
from backend.core.metrics import SessionStats, compute_session_stats


class RejectionReason(str, Enum):
    """Why two sessions could not be compared."""

    INSUFFICIENT_HISTORY = "insufficient_history"


REJECTION_MESSAGES = {
    RejectionReason.INSUFFICIENT_HISTORY: (
        "Cannot compare as there is only one completed session available"
    ),
}


@dataclass
class Improvements:
    """Percentage change from the previous session (None if undefined)."""
    volume_change: Optional[float]
    weight_change: Optional[float]
    reps_change: Optional[float]


@dataclass
class ComparisonResult:
    """
    Stats for both sessions and the change between them.

    ``today`` and ``improvements`` stay None until today's session is
    complete, so the previous session can be shown as the target to beat.
    """
    previous: SessionStats
    today: Optional[SessionStats] = None
    improvements: Optional[Improvements] = None


@dataclass
class ComparisonRejection:
    """A comparison that could not be made."""
    reason: RejectionReason

    @property
    def message(self) -> str:
        return REJECTION_MESSAGES[self.reason]


def percent_change(current: float, previous: float) -> Optional[float]:
    """(current - previous) / previous * 100, or None when previous is zero."""
    if previous == 0:
        return None
    return (current - previous) / previous * 100


def compare_sessions(
    all_sets: Sequence[WorkoutSet],
    target_sets: int,
    today: datetime,
) -> Union[ComparisonResult, ComparisonRejection]:
    """
    Compare today's completed session with the most recent completed one.

    Args:
        all_sets: Every set logged for the exercise (any order)
        target_sets: Sets that make a session complete
        today: Reference instant; its UTC day is "today"

    Returns:
        ComparisonResult, or ComparisonRejection when no earlier session
        qualifies. Groups are never empty (target_sets >= 1 to qualify).
    """
    day_start = start_of_day(today)
    day_end = end_of_day(today)

    todays_sets = [s for s in all_sets if day_start <= to_utc(s.created_at) <= day_end]
    prior_sets = [s for s in all_sets if to_utc(s.created_at) < day_start]

    # newest first so the first qualifying group is the most recent one
    previous_group = find_qualifying_group(
        group_by_date(sort_chronologically(prior_sets, descending=True)),
        target_sets,
    )
    if previous_group is None:
        return ComparisonRejection(reason=RejectionReason.INSUFFICIENT_HISTORY)

    previous_stats = compute_session_stats(sort_chronologically(previous_group.sets))

    today_group = find_qualifying_group(
        group_by_date(sort_chronologically(todays_sets)),
        target_sets,
    )
    if today_group is None:
        return ComparisonResult(previous=previous_stats)

    today_stats = compute_session_stats(today_group.sets)

    return ComparisonResult(
        previous=previous_stats,
        today=today_stats,
        improvements=Improvements(
            volume_change=percent_change(today_stats.total_volume, previous_stats.total_volume),
            weight_change=percent_change(today_stats.avg_weight, previous_stats.avg_weight),
            reps_change=percent_change(today_stats.avg_reps, previous_stats.avg_reps),
        ),
    )
