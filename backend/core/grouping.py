"""
Grouping Engine for logged sets.

Turns a flat list of sets into per-calendar-day buckets and picks out the
sessions that count for comparison. Calendar days are UTC days: a set's day is
the date portion of its ``created_at`` converted to UTC, regardless of where
the lifter is.

Also hosts the UTC day and reporting-period boundary helpers used when
querying sets for "today", a week, a month or a year.
"""
import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from domain.models import WorkoutSet


class TimeFrame(str, Enum):
    """Reporting periods supported by history and analytics."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass
class SetGroup:
    """Sets that share a UTC calendar date."""
    date: date
    sets: List[WorkoutSet] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.sets)


# =============================================================================
# UTC day helpers
# =============================================================================


def to_utc(moment: datetime) -> datetime:
    """Normalize a timestamp to UTC. Naive values are taken to be UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def utc_date(moment: datetime) -> date:
    """Calendar date of a timestamp in UTC."""
    return to_utc(moment).date()


def start_of_day(moment: datetime) -> datetime:
    """First instant of the UTC day containing ``moment``."""
    return datetime.combine(utc_date(moment), time.min, tzinfo=timezone.utc)


def end_of_day(moment: datetime) -> datetime:
    """Last instant of the UTC day containing ``moment``."""
    return datetime.combine(utc_date(moment), time.max, tzinfo=timezone.utc)


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Inclusive UTC bounds of a calendar date."""
    return (
        datetime.combine(day, time.min, tzinfo=timezone.utc),
        datetime.combine(day, time.max, tzinfo=timezone.utc),
    )


def time_frame_bounds(time_frame: TimeFrame, now: datetime) -> Tuple[datetime, datetime]:
    """
    Inclusive UTC bounds of the period containing ``now``.

    Weeks run Sunday through Saturday.

    Args:
        time_frame: week, month or year
        now: Reference instant

    Returns:
        (start, end) tuple of aware datetimes
    """
    today = utc_date(now)
    time_frame = TimeFrame(time_frame)

    if time_frame == TimeFrame.WEEK:
        # date.weekday(): Monday=0 .. Sunday=6
        first = today - timedelta(days=(today.weekday() + 1) % 7)
        last = first + timedelta(days=6)
    elif time_frame == TimeFrame.MONTH:
        first = today.replace(day=1)
        last = today.replace(day=calendar.monthrange(today.year, today.month)[1])
    else:
        first = date(today.year, 1, 1)
        last = date(today.year, 12, 31)

    return day_bounds(first)[0], day_bounds(last)[1]


# =============================================================================
# Grouping
# =============================================================================


def group_by_date(sets: Iterable[WorkoutSet]) -> List[SetGroup]:
    """
    Partition sets into per-day groups.

    Groups come out in the order their dates are first seen in ``sets``;
    they are not sorted. Sort the input by ``created_at`` first when
    chronological order matters. Within a group, sets keep input order.
    """
    groups: Dict[date, SetGroup] = {}
    for workout_set in sets:
        day = utc_date(workout_set.created_at)
        group = groups.get(day)
        if group is None:
            group = groups[day] = SetGroup(date=day)
        group.sets.append(workout_set)
    # dicts preserve insertion order
    return list(groups.values())


def find_qualifying_group(
    groups: Sequence[SetGroup],
    target_sets: int,
) -> Optional[SetGroup]:
    """
    Return the first group whose size is exactly ``target_sets``.

    Partial (fewer sets) and over-logged (more sets) sessions never qualify.
    Pass groups newest-first to get the most recent qualifying session.
    """
    for group in groups:
        if group.count == target_sets:
            return group
    return None


def sort_chronologically(
    sets: Iterable[WorkoutSet],
    *,
    descending: bool = False,
) -> List[WorkoutSet]:
    """Sort sets by ``created_at`` (ties keep input order)."""
    return sorted(sets, key=lambda s: to_utc(s.created_at), reverse=descending)
