"""
Metrics Engine for logged sets.

Pure functions that turn sets (usually one day's group, see
backend.core.grouping) into the numbers shown on history, report and
analytics screens:
- Session statistics (volume, averages, maxima)
- Estimated one-rep-max using the Brzycki formula
- Achievement rate against the exercise's rep ceiling
- Rest time between consecutive sets
- Rep completion rate against the middle of the rep range
- Personal bests, consistency and progress over a reporting period

Empty input yields ``None`` rather than zero-valued results so callers can
tell "no data" apart from "zero volume". Nothing here raises for well-typed
input; undefined arithmetic (division by zero, Brzycki past 36 reps) maps to
``None`` or a documented fallback.
"""
import math
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence

from domain.models import WorkoutSet
from backend.core.grouping import SetGroup, sort_chronologically, to_utc

# Brzycki is undefined at 37 reps and meaningless beyond it
MAX_BRZYCKI_REPS = 36

# Size of the "recent sets" window checked for new personal bests
RECENT_RECORDS_WINDOW = 5

# Thresholds for the period milestones
CENTURY_CLUB_SETS = 100
HEAVY_LIFTER_VOLUME = 10_000


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to `digits` places with halves going up (0.5 -> 1, -0.5 -> 0)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


# =============================================================================
# Result types
# =============================================================================


@dataclass
class SessionStats:
    """Aggregate numbers for one group of sets."""
    total_volume: float
    avg_weight: float
    avg_reps: float
    max_weight: float
    max_reps: int
    sets: List[WorkoutSet] = field(default_factory=list)


@dataclass
class DailyProgress:
    """One row of the history table."""
    date: date
    total_sets: int
    rep_range: str
    achieved_reps: int
    avg_weight: float
    achievement_rate: int


@dataclass
class SetCompletion:
    """A set scored against the middle of the exercise's rep range."""
    set_number: int
    weight: float
    reps: int
    min_reps: int
    max_reps: int
    completion_rate: int


@dataclass
class SessionMetrics:
    """Summary of a single day's training for one exercise."""
    total_sets: int
    total_reps: int
    total_volume: float
    avg_weight: float
    max_weight: float
    estimated_one_rep_max: Optional[float]
    avg_rest_time: float
    rest_times: List[int]
    avg_completion_rate: int
    sets: List[SetCompletion] = field(default_factory=list)


@dataclass
class PersonalBests:
    """Best single-set numbers in a period."""
    max_weight: float
    max_reps: int
    max_volume: float
    recent_records: int


@dataclass
class ConsistencySummary:
    """How regularly an exercise was trained in a period."""
    workout_days: int
    total_sets: int
    avg_sets_per_workout: float


@dataclass
class ProgressInsight:
    """Change in average weight between the first and last training day."""
    weight_change: float
    time_span_days: int
    first_avg_weight: float
    last_avg_weight: float


@dataclass
class Milestone:
    """A volume or set-count achievement."""
    key: str
    title: str
    description: str


# =============================================================================
# Session statistics
# =============================================================================


def compute_session_stats(sets: Sequence[WorkoutSet]) -> Optional[SessionStats]:
    """
    Compute volume, averages and maxima for a group of sets.

    ``max_weight`` and ``max_reps`` are independent per-field maxima and need
    not come from the same set.

    Returns:
        SessionStats, or None when ``sets`` is empty
    """
    if not sets:
        return None

    weights = [s.weight for s in sets]
    reps = [s.reps for s in sets]

    return SessionStats(
        total_volume=sum(s.weight * s.reps for s in sets),
        avg_weight=_mean(weights),
        avg_reps=_mean(reps),
        max_weight=max(weights),
        max_reps=max(reps),
        sets=list(sets),
    )


# =============================================================================
# One-rep-max
# =============================================================================


def estimate_one_rep_max(weight: float, reps: int) -> Optional[float]:
    """
    Estimate 1RM using the Brzycki formula.

    Formula: 1RM = weight * (36 / (37 - reps))

    Only defined for 1-36 reps; anything else returns None instead of a
    capped or infinite value.
    """
    if reps < 1 or reps > MAX_BRZYCKI_REPS:
        return None
    return weight * (36.0 / (37.0 - reps))


def session_one_rep_max(sets: Sequence[WorkoutSet]) -> Optional[float]:
    """Best Brzycki estimate across ``sets``, ignoring sets outside 1-36 reps."""
    estimates = [
        estimate
        for estimate in (estimate_one_rep_max(s.weight, s.reps) for s in sets)
        if estimate is not None
    ]
    return max(estimates) if estimates else None


# =============================================================================
# Achievement and completion rates
# =============================================================================


def achievement_rate(achieved_reps: int, max_reps: int, set_count: int) -> int:
    """
    Percentage of the rep ceiling reached across ``set_count`` sets.

    The target is ``max_reps * set_count``. A zero target yields 0.
    """
    target_reps = max_reps * set_count
    if target_reps <= 0:
        return 0
    return int(round_half_up(achieved_reps / target_reps * 100))


def set_completion_rate(reps: int, min_reps: int, max_reps: int) -> int:
    """Reps as a percentage of the middle of the rep range."""
    target = (min_reps + max_reps) / 2
    if target <= 0:
        return 0
    return int(round_half_up(reps / target * 100))


def average_completion_rate(
    sets: Sequence[WorkoutSet],
    min_reps: int,
    max_reps: int,
) -> int:
    """Mean completion ratio of ``sets`` as a rounded percentage (0 if empty)."""
    target = (min_reps + max_reps) / 2
    if not sets or target <= 0:
        return 0
    return int(round_half_up(_mean([s.reps / target for s in sets]) * 100))


# =============================================================================
# Rest times
# =============================================================================


def rest_times(sets: Sequence[WorkoutSet]) -> List[int]:
    """Whole minutes between consecutive sets, in chronological order."""
    ordered = sort_chronologically(sets)
    deltas = []
    for previous, current in zip(ordered, ordered[1:]):
        seconds = (to_utc(current.created_at) - to_utc(previous.created_at)).total_seconds()
        deltas.append(int(round_half_up(seconds / 60)))
    return deltas


def average_rest_time(sets: Sequence[WorkoutSet]) -> float:
    """Mean rest time in minutes (1 decimal); 0 when fewer than two sets."""
    deltas = rest_times(sets)
    if not deltas:
        return 0.0
    return round_half_up(_mean(deltas), 1)


# =============================================================================
# Per-day and per-session summaries
# =============================================================================


def daily_progress(
    groups: Sequence[SetGroup],
    min_reps: int,
    max_reps: int,
) -> List[DailyProgress]:
    """Build history rows for each day group, keeping group order."""
    rows = []
    for group in groups:
        achieved = sum(s.reps for s in group.sets)
        rows.append(DailyProgress(
            date=group.date,
            total_sets=group.count,
            rep_range=f"{min_reps}-{max_reps}",
            achieved_reps=achieved,
            avg_weight=round_half_up(_mean([s.weight for s in group.sets]), 2),
            achievement_rate=achievement_rate(achieved, max_reps, group.count),
        ))
    return rows


def session_metrics(
    sets: Sequence[WorkoutSet],
    min_reps: int,
    max_reps: int,
) -> Optional[SessionMetrics]:
    """
    Summarize one session for the report screen.

    Sets are scored in chronological order and numbered from 1.

    Returns:
        SessionMetrics, or None when ``sets`` is empty
    """
    if not sets:
        return None

    ordered = sort_chronologically(sets)
    stats = compute_session_stats(ordered)
    one_rep_max = session_one_rep_max(ordered)
    deltas = rest_times(ordered)

    return SessionMetrics(
        total_sets=len(ordered),
        total_reps=sum(s.reps for s in ordered),
        total_volume=stats.total_volume,
        avg_weight=round_half_up(stats.avg_weight, 1),
        max_weight=stats.max_weight,
        estimated_one_rep_max=round_half_up(one_rep_max, 1) if one_rep_max is not None else None,
        avg_rest_time=round_half_up(_mean(deltas), 1) if deltas else 0.0,
        rest_times=deltas,
        avg_completion_rate=average_completion_rate(ordered, min_reps, max_reps),
        sets=[
            SetCompletion(
                set_number=index,
                weight=s.weight,
                reps=s.reps,
                min_reps=min_reps,
                max_reps=max_reps,
                completion_rate=set_completion_rate(s.reps, min_reps, max_reps),
            )
            for index, s in enumerate(ordered, start=1)
        ],
    )


# =============================================================================
# Period analytics
# =============================================================================


def personal_bests(
    sets: Sequence[WorkoutSet],
    recent_window: int = RECENT_RECORDS_WINDOW,
) -> Optional[PersonalBests]:
    """
    Heaviest weight, most reps and biggest single-set volume in ``sets``.

    ``recent_records`` counts how many of the last ``recent_window`` sets
    (input order) match at least one of those bests.
    """
    if not sets:
        return None

    best_weight = max(s.weight for s in sets)
    best_reps = max(s.reps for s in sets)
    best_volume = max(s.weight * s.reps for s in sets)

    recent = list(sets)[-recent_window:] if recent_window > 0 else []
    records = [
        s for s in recent
        if s.weight == best_weight or s.reps == best_reps or s.weight * s.reps == best_volume
    ]

    return PersonalBests(
        max_weight=best_weight,
        max_reps=best_reps,
        max_volume=best_volume,
        recent_records=len(records),
    )


def consistency_summary(groups: Sequence[SetGroup]) -> ConsistencySummary:
    """Training days, total sets and sets per training day."""
    workout_days = len(groups)
    total_sets = sum(g.count for g in groups)
    return ConsistencySummary(
        workout_days=workout_days,
        total_sets=total_sets,
        avg_sets_per_workout=round_half_up(total_sets / (workout_days or 1), 1),
    )


def progress_insight(groups: Sequence[SetGroup]) -> Optional[ProgressInsight]:
    """
    Average-weight change from the first to the last day group.

    Groups are taken in the order given (pass them oldest first).

    Returns:
        ProgressInsight, or None with fewer than two groups or a zero
        starting average
    """
    if len(groups) < 2:
        return None

    first, last = groups[0], groups[-1]
    first_avg = _mean([s.weight for s in first.sets])
    last_avg = _mean([s.weight for s in last.sets])
    if first_avg == 0:
        return None

    return ProgressInsight(
        weight_change=round_half_up((last_avg - first_avg) / first_avg * 100, 1),
        time_span_days=(last.date - first.date).days,
        first_avg_weight=round_half_up(first_avg, 2),
        last_avg_weight=round_half_up(last_avg, 2),
    )


def daily_average_weights(groups: Sequence[SetGroup]) -> List[float]:
    """Mean weight of each day group, in group order."""
    return [_mean([s.weight for s in g.sets]) for g in groups]


def milestones(sets: Sequence[WorkoutSet]) -> List[Milestone]:
    """Milestones unlocked by the sets in a period."""
    unlocked = []
    if len(sets) >= CENTURY_CLUB_SETS:
        unlocked.append(Milestone(
            key="century_club",
            title="Century Club",
            description=f"Completed {CENTURY_CLUB_SETS}+ sets",
        ))
    if sum(s.weight * s.reps for s in sets) >= HEAVY_LIFTER_VOLUME:
        unlocked.append(Milestone(
            key="heavy_lifter",
            title="Heavy Lifter",
            description=f"Lifted over {HEAVY_LIFTER_VOLUME:,} in total volume",
        ))
    return unlocked
