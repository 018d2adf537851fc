"""
Weekly task database model.

One row per program week per user.  The program-completion report reads
week 1 and the final week to determine its period.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

TASK_STATUS_COMPLETED = "completed"


class WeeklyTask(SQLModel, table=True):
    """A program week for one user."""

    __tablename__ = "weekly_tasks"
    __table_args__ = (
        UniqueConstraint("user_id", "week", name="uq_weekly_task_user_week"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    week: int = Field(nullable=False, ge=1)
    week_start_date: Optional[datetime.date] = Field(default=None)
    week_end_date: Optional[datetime.date] = Field(default=None)
    status: str = Field(default="pending", max_length=20, nullable=False)
