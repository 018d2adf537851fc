"""
Weekly task repository.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.weekly_task import WeeklyTask


class WeeklyTaskRepository:
    """Repository for WeeklyTask database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_week(self, user_id: int, week: int) -> Optional[WeeklyTask]:
        statement = select(WeeklyTask).where(WeeklyTask.user_id == user_id, WeeklyTask.week == week)
        return self.session.exec(statement).first()
