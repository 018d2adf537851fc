"""
Sample store.

The single read gateway between the progress engine and the record
store.  It converts store rows into engine inputs and turns any database
error into :class:`~app.core.exceptions.FetchFailure`, which aborts the
request that needed the data.
"""

import logging
from typing import Any, Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.exceptions import FetchFailure
from app.db.repositories.measurement import MeasurementRepository
from app.db.repositories.user import UserRepository
from app.db.repositories.workout import WorkoutRepository
from app.models.user import User
from app.models.workout import WORKOUT_STATUS_COMPLETED, Workout
from app.progress.timeseries import samples_from_entries
from app.schemas.progress import DateRange, MeasurementSample

logger = logging.getLogger(__name__)


class SampleStore:
    """Read access to measurements, workouts and subject baselines."""

    def __init__(self, session: Session):
        self.measurements = MeasurementRepository(session)
        self.workouts = WorkoutRepository(session)
        self.users = UserRepository(session)

    def fetch_samples(self, subject_ids: Iterable[int], metrics: Iterable[str],
                      date_range: Optional[DateRange] = None, ) -> list[MeasurementSample]:
        """Measurement samples of the subjects, one per entry and metric.

        Without *date_range* the full history is returned (baselines
        predate reporting windows).
        """
        ids = list(subject_ids)
        start = date_range.start if date_range else None
        end = date_range.end if date_range else None
        try:
            entries = self.measurements.get_by_users(ids, start, end)
        except SQLAlchemyError as e:
            logger.error("Measurement fetch failed for subjects %s: %s", ids, e)
            raise FetchFailure("fetch_samples", str(e)) from e
        return samples_from_entries(entries, metrics)

    def fetch_workouts(self, subject_id: int, status: Optional[str] = WORKOUT_STATUS_COMPLETED,
                       date_range: Optional[DateRange] = None, ) -> list[Workout]:
        """Workouts of a subject, completed ones only by default."""
        start = date_range.start if date_range else None
        end = date_range.end if date_range else None
        try:
            return self.workouts.get_by_user(subject_id, status, start, end)
        except SQLAlchemyError as e:
            logger.error("Workout fetch failed for subject %s: %s", subject_id, e)
            raise FetchFailure("fetch_workouts", str(e)) from e

    def fetch_subjects(self, subject_ids: Iterable[int]) -> list[User]:
        ids = list(subject_ids)
        try:
            return self.users.get_by_ids(ids)
        except SQLAlchemyError as e:
            logger.error("Subject fetch failed for %s: %s", ids, e)
            raise FetchFailure("fetch_subjects", str(e)) from e

    def fetch_group_subjects(self, group_name: Optional[str] = None) -> list[User]:
        """Trainees of a group, or every trainee when *group_name* is None."""
        try:
            return self.users.get_trainees(group_name)
        except SQLAlchemyError as e:
            logger.error("Group fetch failed for %r: %s", group_name, e)
            raise FetchFailure("fetch_group_subjects", str(e)) from e

    def fetch_subject_baselines(self, subject_ids: Iterable[int]) -> dict[int, dict[str, Any]]:
        """``{subject_id: {metric: baseline}}``; values are returned unvalidated."""
        return {user.id: dict(user.baselines or {}) for user in self.fetch_subjects(subject_ids)}
