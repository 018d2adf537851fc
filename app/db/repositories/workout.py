"""
Workout repository.

Handles read access to workouts for progress analysis.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.workout import Workout


class WorkoutRepository:
    """Repository for Workout database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user(self, user_id: int, status: Optional[str] = None, start: Optional[datetime.date] = None,
                    end: Optional[datetime.date] = None, ) -> list[Workout]:
        """Workouts of a user, optionally filtered by status and date range (inclusive)."""
        statement = select(Workout).where(Workout.user_id == user_id)
        if status is not None:
            statement = statement.where(Workout.status == status)
        if start is not None:
            statement = statement.where(Workout.date >= start)
        if end is not None:
            statement = statement.where(Workout.date <= end)
        statement = statement.order_by(Workout.date, Workout.id)
        return list(self.session.exec(statement).all())
