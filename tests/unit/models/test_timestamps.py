"""Tests for the timezone-aware timestamps of the table models."""

import datetime

import pytest

from app.models.measurement import MeasurementEntry
from app.models.report import CoachNotification
from app.models.timestamps import timestamp_type, utcnow
from app.models.user import User
from app.models.workout import Workout


class TestUtcNow:
    def test_is_aware_utc(self):
        now = utcnow()
        assert now.tzinfo is not None
        assert now.utcoffset() == datetime.timedelta(0)

    def test_column_type_keeps_timezone(self):
        assert timestamp_type().timezone is True


class TestModelDefaults:
    @pytest.mark.parametrize(
        "row",
        [
            User(email="a@example.com"),
            MeasurementEntry(user_id=1, date=datetime.date(2026, 3, 1)),
            Workout(user_id=1, date=datetime.date(2026, 3, 1)),
            CoachNotification(user_id=1, notification_type="report_generated"),
        ],
    )
    def test_created_at_is_aware(self, row):
        assert row.created_at.tzinfo is not None

    def test_timestamp_columns_are_timezone_aware(self):
        for model in (User, MeasurementEntry, Workout, CoachNotification):
            assert model.__table__.c.created_at.type.timezone is True
