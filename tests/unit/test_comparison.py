"""
Unit tests for backend/core/comparison.py

Today's completed session is compared with the most recent earlier
completed session; anything else is rejected or returned without
improvements.
"""

from datetime import datetime, timedelta, timezone

import pytest

from backend.core.comparison import (
    ComparisonRejection,
    ComparisonResult,
    RejectionReason,
    compare_sessions,
    percent_change,
)
from domain.models import WorkoutSet

UTC = timezone.utc
TODAY = datetime(2024, 5, 15, 18, 0, tzinfo=UTC)


def _session(day_offset, pairs, hour=9):
    start = datetime(2024, 5, 15, hour, 0, tzinfo=UTC) + timedelta(days=day_offset)
    return [
        WorkoutSet(
            id=abs(day_offset) * 100 + i,
            weight=weight,
            reps=reps,
            exercise_id=1,
            created_at=start + timedelta(minutes=2 * i),
        )
        for i, (weight, reps) in enumerate(pairs)
    ]


@pytest.mark.unit
class TestPercentChange:
    def test_change(self):
        assert percent_change(2295, 2160) == pytest.approx(6.25)

    def test_zero_previous_is_none(self):
        assert percent_change(10, 0) is None


@pytest.mark.unit
class TestCompareSessions:
    """Session selection and improvement math."""

    def test_no_history_is_rejected(self):
        today = _session(0, [(60, 12)] * 3)
        result = compare_sessions(today, 3, TODAY)

        assert isinstance(result, ComparisonRejection)
        assert result.reason == RejectionReason.INSUFFICIENT_HISTORY
        assert result.message == "Cannot compare as there is only one completed session available"

    def test_partial_prior_session_is_rejected(self):
        sets = _session(-1, [(60, 12)] * 2) + _session(0, [(60, 12)] * 3)
        assert isinstance(compare_sessions(sets, 3, TODAY), ComparisonRejection)

    def test_over_logged_prior_session_is_rejected(self):
        sets = _session(-1, [(60, 12)] * 4) + _session(0, [(60, 12)] * 3)
        assert isinstance(compare_sessions(sets, 3, TODAY), ComparisonRejection)

    def test_improvements(self):
        sets = _session(-2, [(60, 12)] * 3) + _session(0, [(63.75, 12)] * 3)
        result = compare_sessions(sets, 3, TODAY)

        assert isinstance(result, ComparisonResult)
        assert result.previous.total_volume == 2160
        assert result.today.total_volume == pytest.approx(2295)
        assert result.improvements.volume_change == pytest.approx(6.25)
        assert result.improvements.weight_change == pytest.approx(6.25)
        assert result.improvements.reps_change == 0

    def test_uses_most_recent_qualifying_session(self):
        sets = (
            _session(-5, [(50, 10)] * 3)
            + _session(-3, [(55, 10)] * 3)
            + _session(-1, [(70, 10)] * 2)
            + _session(0, [(60, 10)] * 3)
        )
        result = compare_sessions(sets, 3, TODAY)

        assert result.previous.avg_weight == 55

    def test_input_order_does_not_matter(self):
        sets = _session(-3, [(55, 10)] * 3) + _session(-5, [(50, 10)] * 3) + _session(0, [(60, 10)] * 3)
        result = compare_sessions(list(reversed(sets)), 3, TODAY)

        assert result.previous.avg_weight == 55

    def test_incomplete_today_returns_previous_only(self):
        sets = _session(-1, [(60, 12)] * 3) + _session(0, [(60, 12)] * 2)
        result = compare_sessions(sets, 3, TODAY)

        assert isinstance(result, ComparisonResult)
        assert result.previous.total_volume == 2160
        assert result.today is None
        assert result.improvements is None

    def test_sets_after_today_are_ignored(self):
        sets = _session(-1, [(60, 12)] * 3) + _session(1, [(80, 12)] * 3)
        result = compare_sessions(sets, 3, TODAY)

        assert result.today is None

    def test_zero_previous_values_give_none(self):
        sets = _session(-1, [(0, 10)] * 3) + _session(0, [(20, 10)] * 3)
        result = compare_sessions(sets, 3, TODAY)

        assert result.improvements.volume_change is None
        assert result.improvements.weight_change is None
        assert result.improvements.reps_change == 0

    def test_previous_sets_are_chronological(self):
        sets = _session(-1, [(60, 12), (62.5, 10), (65, 8)]) + _session(0, [(60, 12)] * 3)
        result = compare_sessions(sets, 3, TODAY)

        assert [s.weight for s in result.previous.sets] == [60, 62.5, 65]
