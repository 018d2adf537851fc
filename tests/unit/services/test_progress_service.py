"""Tests for the progress dashboard service."""

import pytest
from fastapi import HTTPException

from app.core.exceptions import FetchFailure
from app.models.measurement import MeasurementEntry
from app.models.user import User
from app.services.progress_service import ProgressService
from app.services.sample_store import SampleStore
from conftest import day


# ======================================================================
# Helpers
# ======================================================================


def _add_member(session, email: str, name: str, baseline, weights: dict[int, float], groups=("morning",),
                role: str = "user") -> User:
    user = User(email=email, full_name=name, role=role, group_names=list(groups), baselines={"weight": baseline})
    session.add(user)
    session.commit()
    session.refresh(user)
    session.add_all([MeasurementEntry(user_id=user.id, date=day(offset), weight=value)
                     for offset, value in weights.items()])
    session.commit()
    return user


class FailingSampleStore(SampleStore):
    def fetch_samples(self, subject_ids, metrics, date_range=None):
        raise FetchFailure("fetch_samples", "timeout")


# ======================================================================
# Subject views
# ======================================================================


class TestSubjectViews:
    def test_series(self, session, trainee):
        response = ProgressService(session).subject_series(trainee.id, "weight", day(0), day(10))
        assert [(p.date, p.value) for p in response.points] == [(day(1), 90.0), (day(5), 88.0)]
        assert response.baseline == 92.0
        assert response.latest == 88.0

    def test_series_unknown_metric(self, session, trainee):
        with pytest.raises(HTTPException) as exc:
            ProgressService(session).subject_series(trainee.id, "height", day(0), day(10))
        assert exc.value.status_code == 400

    def test_series_unknown_subject(self, session):
        with pytest.raises(HTTPException) as exc:
            ProgressService(session).subject_series(404, "weight", day(0), day(10))
        assert exc.value.status_code == 404

    def test_inverted_range(self, session, trainee):
        with pytest.raises(HTTPException) as exc:
            ProgressService(session).exercise_progress(trainee.id, day(10), day(0))
        assert exc.value.status_code == 400

    def test_exercise_progress(self, session, trainee):
        response = ProgressService(session).exercise_progress(trainee.id, day(0), day(10))
        assert [(s.exercise_name, s.occurrence_count) for s in response.exercises] == [("Squat", 2)]


# ======================================================================
# Group trend
# ======================================================================


class TestGroupTrend:
    def test_forward_filled_total(self, session):
        _add_member(session, "a@example.com", "Anna", 80, {})
        _add_member(session, "b@example.com", "Bruno", 70, {3: 65})
        _add_member(session, "c@example.com", "Carla", 0, {1: 100})
        _add_member(session, "d@example.com", "Dario", 90, {2: 89}, groups=("evening",))
        _add_member(session, "coach@example.com", "Coach", 75, {2: 74}, role="coach")

        response = ProgressService(session).group_trend("weight", day(0), day(10), "morning")

        assert [(p.date, p.total) for p in response.trend.points] == [(day(0), 150.0), (day(3), 145.0)]
        assert response.trend.member_count == 2
        assert response.summary.total_change == -5.0
        assert [m.name for m in response.summary.members] == ["Anna", "Bruno"]
        assert response.chart.key == "group:weight"

    def test_all_trainees_without_group(self, session):
        _add_member(session, "a@example.com", "Anna", 80, {})
        _add_member(session, "d@example.com", "Dario", 90, {2: 89}, groups=("evening",))
        response = ProgressService(session).group_trend("weight", day(0), day(10))
        assert response.trend.member_count == 2
        assert [(p.date, p.total) for p in response.trend.points] == [(day(0), 170.0), (day(2), 169.0)]

    def test_no_qualifying_members(self, session):
        _add_member(session, "a@example.com", "Anna", -1, {1: 80})
        response = ProgressService(session).group_trend("weight", day(0), day(10), "morning")
        assert response.trend is None
        assert response.summary is None
        assert response.chart is None

    def test_fetch_failure_propagates(self, session):
        _add_member(session, "a@example.com", "Anna", 80, {})
        service = ProgressService(session, store=FailingSampleStore(session))
        with pytest.raises(FetchFailure) as exc:
            service.group_trend("weight", day(0), day(10))
        assert exc.value.operation == "fetch_samples"
