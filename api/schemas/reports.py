"""
Pydantic models for history, report, analytics and comparison responses.

These mirror the dataclasses produced by backend.core.metrics,
backend.core.comparison and backend.core.report_service.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from api.schemas.common import AttributeModel
from api.schemas.programs import ExerciseResponse, SetResponse
from backend.core.grouping import TimeFrame


class DailyProgressResponse(AttributeModel):
    """One row of the history table."""
    date: date
    total_sets: int
    rep_range: str
    achieved_reps: int
    avg_weight: float
    achievement_rate: int


class SetCompletionResponse(AttributeModel):
    set_number: int
    weight: float
    reps: int
    min_reps: int
    max_reps: int
    completion_rate: int


class SessionMetricsResponse(AttributeModel):
    total_sets: int
    total_reps: int
    total_volume: float
    avg_weight: float
    max_weight: float
    estimated_one_rep_max: Optional[float] = None
    avg_rest_time: float
    rest_times: List[int] = Field(default_factory=list)
    avg_completion_rate: int
    sets: List[SetCompletionResponse] = Field(default_factory=list)


class DayReportResponse(AttributeModel):
    """All sets of one day with session metrics."""
    exercise: ExerciseResponse
    date: date
    sets: List[SetResponse]
    metrics: SessionMetricsResponse


class SessionStatsResponse(AttributeModel):
    total_volume: float
    avg_weight: float
    avg_reps: float
    max_weight: float
    max_reps: int
    sets: List[SetResponse] = Field(default_factory=list)


class ImprovementsResponse(AttributeModel):
    """Percentage changes; null when the previous value was zero."""
    volume_change: Optional[float] = None
    weight_change: Optional[float] = None
    reps_change: Optional[float] = None


class ComparisonResponse(AttributeModel):
    previous: SessionStatsResponse
    today: Optional[SessionStatsResponse] = None
    improvements: Optional[ImprovementsResponse] = None


class PersonalBestsResponse(AttributeModel):
    max_weight: float
    max_reps: int
    max_volume: float
    recent_records: int


class ConsistencyResponse(AttributeModel):
    workout_days: int
    total_sets: int
    avg_sets_per_workout: float


class ProgressInsightResponse(AttributeModel):
    weight_change: float
    time_span_days: int
    first_avg_weight: float
    last_avg_weight: float


class DailyAverageWeightResponse(AttributeModel):
    date: date
    avg_weight: float


class MilestoneResponse(AttributeModel):
    key: str
    title: str
    description: str


class AnalyticsSummaryResponse(AttributeModel):
    avg_weight: float
    max_weight: float
    total_sessions: int
    total_volume: float


class AnalyticsResponse(AttributeModel):
    """Period analytics for one exercise."""
    exercise: ExerciseResponse
    time_frame: TimeFrame
    start: datetime
    end: datetime
    summary: AnalyticsSummaryResponse
    personal_bests: PersonalBestsResponse
    consistency: ConsistencyResponse
    progress: Optional[ProgressInsightResponse] = None
    weight_trend: List[DailyAverageWeightResponse] = Field(default_factory=list)
    milestones: List[MilestoneResponse] = Field(default_factory=list)
