"""
Measurement entry repository.

Read-only access to body measurements.  Rows are returned in
(date, id) order so that "first entry of the day" is well defined.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.measurement import MeasurementEntry


class MeasurementRepository:
    """Repository for MeasurementEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_users(self, user_ids: list[int], start: Optional[datetime.date] = None,
                     end: Optional[datetime.date] = None, ) -> list[MeasurementEntry]:
        """Entries for the given users, optionally limited to ``[start, end]``."""
        if not user_ids:
            return []
        statement = select(MeasurementEntry).where(MeasurementEntry.user_id.in_(user_ids))
        if start is not None:
            statement = statement.where(MeasurementEntry.date >= start)
        if end is not None:
            statement = statement.where(MeasurementEntry.date <= end)
        statement = statement.order_by(MeasurementEntry.date, MeasurementEntry.id)
        return list(self.session.exec(statement).all())
