"""
Generated report and coach notification database models.

Reports are append-only: a new generation writes a new row, older rows
stay viewable.  The computed sections are stored as JSON snapshots.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from app.models.timestamps import timestamp_type, utcnow


class GeneratedReport(SQLModel, table=True):
    """A compiled progress report for one subject and period."""

    __tablename__ = "generated_reports"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    report_kind: str = Field(nullable=False, max_length=50)
    period_start: datetime.date = Field(nullable=False)
    period_end: datetime.date = Field(nullable=False)

    metrics_table: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    chart_specs: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    exercise_summaries: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    generated_at: datetime.datetime = Field(nullable=False, index=True, sa_type=timestamp_type())


class CoachNotification(SQLModel, table=True):
    """Notification for the coaching staff, consumed by the messaging service."""

    __tablename__ = "coach_notifications"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    notification_type: str = Field(nullable=False, max_length=50)
    report_kind: Optional[str] = Field(default=None, max_length=50)
    report_id: Optional[int] = Field(default=None, foreign_key="generated_reports.id")
    details: str = Field(default="", max_length=1000)
    is_read: bool = Field(default=False)

    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=timestamp_type())
