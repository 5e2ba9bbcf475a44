"""
Report Service (report assembler).

Each call fetches the exercise and its sets once, then runs them through the
grouping, metrics and comparison engines. Nothing is cached between calls.

Reports:
- Exercise details with today's sets
- Raw sets for a week, month or year
- Per-day history with achievement rates
- Single-day report (used for both "today" and past dates)
- Period analytics (stats cards, personal bests, consistency, progress)
- Today vs. previous session comparison
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import List, Optional
import logging

from application.exceptions import InsufficientHistoryError, NoDataError, NotFoundError
from application.ports import ExerciseRepository, SetRepository
from backend.core.comparison import ComparisonRejection, ComparisonResult, compare_sessions
from backend.core.grouping import (
    TimeFrame,
    day_bounds,
    end_of_day,
    group_by_date,
    sort_chronologically,
    time_frame_bounds,
    to_utc,
    utc_date,
)
from backend.core.metrics import (
    ConsistencySummary,
    DailyProgress,
    Milestone,
    PersonalBests,
    ProgressInsight,
    SessionMetrics,
    consistency_summary,
    daily_average_weights,
    daily_progress,
    milestones,
    personal_bests,
    progress_insight,
    round_half_up,
    session_metrics,
)
from domain.converters import db_row_to_exercise, db_rows_to_sets
from domain.models import Exercise, WorkoutSet

logger = logging.getLogger(__name__)

EXERCISE_NOT_FOUND_MESSAGE = "Exercise not found"


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass
class ExerciseDetails:
    """An exercise with the sets logged today."""
    exercise: Exercise
    sets: List[WorkoutSet] = field(default_factory=list)


@dataclass
class DayReport:
    """All sets of one day for an exercise, with session metrics."""
    exercise: Exercise
    date: date
    sets: List[WorkoutSet]
    metrics: SessionMetrics


@dataclass
class DailyAverageWeight:
    """Point on the strength-progress chart."""
    date: date
    avg_weight: float


@dataclass
class AnalyticsSummary:
    """Headline numbers for a period."""
    avg_weight: float
    max_weight: float
    total_sessions: int
    total_volume: float


@dataclass
class AnalyticsReport:
    """Everything the analytics screen shows for a period."""
    exercise: Exercise
    time_frame: TimeFrame
    start: datetime
    end: datetime
    summary: AnalyticsSummary
    personal_bests: PersonalBests
    consistency: ConsistencySummary
    progress: Optional[ProgressInsight]
    weight_trend: List[DailyAverageWeight] = field(default_factory=list)
    milestones: List[Milestone] = field(default_factory=list)


def _now(now: Optional[datetime]) -> datetime:
    return to_utc(now) if now is not None else datetime.now(timezone.utc)


# =============================================================================
# Report Service
# =============================================================================


class ReportService:
    """
    Service for exercise reports and analytics.

    All methods take the local user ID and check ownership through the
    exercise's program; a foreign exercise looks the same as a missing one.
    Methods that depend on "today" accept ``now`` for deterministic tests.
    """

    def __init__(
        self,
        exercise_repo: ExerciseRepository,
        set_repo: SetRepository,
    ):
        """
        Initialize the report service.

        Args:
            exercise_repo: Repository for exercise metadata and ownership
            set_repo: Repository for logged sets
        """
        self.exercise_repo = exercise_repo
        self.set_repo = set_repo

    def _get_exercise(self, user_id: int, exercise_id: int) -> Exercise:
        row = self.exercise_repo.get_for_user(user_id, exercise_id)
        if not row:
            raise NotFoundError(EXERCISE_NOT_FOUND_MESSAGE)
        return db_row_to_exercise(row)

    def _sets_in_frame(
        self,
        exercise_id: int,
        time_frame: TimeFrame,
        now: datetime,
    ) -> List[WorkoutSet]:
        start, end = time_frame_bounds(time_frame, now)
        rows = self.set_repo.list_for_exercise(exercise_id, start=start, end=end)
        return sort_chronologically(db_rows_to_sets(rows))

    # -------------------------------------------------------------------------
    # Details
    # -------------------------------------------------------------------------

    def get_exercise_details(
        self,
        user_id: int,
        exercise_id: int,
        now: Optional[datetime] = None,
    ) -> ExerciseDetails:
        """Exercise metadata plus the sets logged in today's validity window."""
        exercise = self._get_exercise(user_id, exercise_id)
        rows = self.set_repo.list_valid_upto(exercise_id, end_of_day(_now(now)))
        return ExerciseDetails(
            exercise=exercise,
            sets=sort_chronologically(db_rows_to_sets(rows)),
        )

    def get_time_frame_sets(
        self,
        user_id: int,
        exercise_id: int,
        time_frame: TimeFrame,
        now: Optional[datetime] = None,
    ) -> List[WorkoutSet]:
        """
        Raw sets in the current week, month or year, oldest first.

        Raises:
            NoDataError: If no sets were logged in the period
        """
        time_frame = TimeFrame(time_frame)
        self._get_exercise(user_id, exercise_id)
        sets = self._sets_in_frame(exercise_id, time_frame, _now(now))
        if not sets:
            raise NoDataError(f"No exercise data found for the selected {time_frame.value}")
        return sets

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def get_history(
        self,
        user_id: int,
        exercise_id: int,
        time_frame: TimeFrame,
        now: Optional[datetime] = None,
    ) -> List[DailyProgress]:
        """
        Per-day progress rows for the current period, oldest day first.

        Raises:
            NoDataError: If no sets were logged in the period
        """
        time_frame = TimeFrame(time_frame)
        exercise = self._get_exercise(user_id, exercise_id)
        sets = self._sets_in_frame(exercise_id, time_frame, _now(now))
        if not sets:
            raise NoDataError(
                f"No sets found for this exercise in the selected {time_frame.value}."
            )
        return daily_progress(group_by_date(sets), exercise.min_reps, exercise.max_reps)

    # -------------------------------------------------------------------------
    # Day reports
    # -------------------------------------------------------------------------

    def get_day_report(self, user_id: int, exercise_id: int, day: date) -> DayReport:
        """
        Report for one UTC calendar day.

        Raises:
            NoDataError: If nothing was logged that day
        """
        exercise = self._get_exercise(user_id, exercise_id)
        start, end = day_bounds(day)
        rows = self.set_repo.list_for_exercise(exercise_id, start=start, end=end)
        sets = sort_chronologically(db_rows_to_sets(rows))
        if not sets:
            raise NoDataError("No sets found for this date")

        return DayReport(
            exercise=exercise,
            date=day,
            sets=sets,
            metrics=session_metrics(sets, exercise.min_reps, exercise.max_reps),
        )

    def get_session_report(
        self,
        user_id: int,
        exercise_id: int,
        now: Optional[datetime] = None,
    ) -> DayReport:
        """Report for today's session."""
        return self.get_day_report(user_id, exercise_id, utc_date(_now(now)))

    # -------------------------------------------------------------------------
    # Analytics
    # -------------------------------------------------------------------------

    def get_analytics(
        self,
        user_id: int,
        exercise_id: int,
        time_frame: TimeFrame,
        now: Optional[datetime] = None,
    ) -> AnalyticsReport:
        """
        Period analytics for the analytics screen.

        Raises:
            NoDataError: If no sets were logged in the period
        """
        time_frame = TimeFrame(time_frame)
        now = _now(now)
        exercise = self._get_exercise(user_id, exercise_id)
        sets = self._sets_in_frame(exercise_id, time_frame, now)
        if not sets:
            raise NoDataError(f"No exercise data found for the selected {time_frame.value}")

        groups = group_by_date(sets)
        daily_averages = daily_average_weights(groups)
        start, end = time_frame_bounds(time_frame, now)

        return AnalyticsReport(
            exercise=exercise,
            time_frame=time_frame,
            start=start,
            end=end,
            summary=AnalyticsSummary(
                avg_weight=round_half_up(sum(daily_averages) / len(daily_averages), 2),
                max_weight=max(s.weight for s in sets),
                total_sessions=len(groups),
                total_volume=sum(s.volume for s in sets),
            ),
            personal_bests=personal_bests(sets),
            consistency=consistency_summary(groups),
            progress=progress_insight(groups),
            weight_trend=[
                DailyAverageWeight(date=g.date, avg_weight=round_half_up(avg, 2))
                for g, avg in zip(groups, daily_averages)
            ],
            milestones=milestones(sets),
        )

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(
        self,
        user_id: int,
        exercise_id: int,
        now: Optional[datetime] = None,
    ) -> ComparisonResult:
        """
        Compare today's completed session with the most recent earlier one.

        Only sets up to the end of today are considered.

        Raises:
            InsufficientHistoryError: If there is no earlier completed session
        """
        now = _now(now)
        exercise = self._get_exercise(user_id, exercise_id)
        rows = self.set_repo.list_for_exercise(exercise_id, end=end_of_day(now))

        result = compare_sessions(db_rows_to_sets(rows), exercise.target_sets, now)
        if isinstance(result, ComparisonRejection):
            logger.debug(f"Comparison rejected for exercise {exercise_id}: {result.reason.value}")
            raise InsufficientHistoryError(result.message)
        return result
