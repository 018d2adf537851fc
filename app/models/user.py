"""
User database model.

A user is a trainee (the *subject* of progress analytics) or a coach.
Authentication and profile editing live outside this service; only the
fields the progress engine reads or flags are modelled here.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from app.models.timestamps import timestamp_type, utcnow


class User(SQLModel, table=True):
    """
    Trainee or coach account.

    ``baselines`` maps a metric key (e.g. ``"weight"``) to the value
    recorded at onboarding.  ``group_names`` lists the training groups the
    user belongs to.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)

    # Profile
    full_name: Optional[str] = Field(default=None, max_length=255)
    role: str = Field(default="user", max_length=20, nullable=False)
    start_date: Optional[datetime.date] = Field(default=None)
    group_names: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    baselines: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    # Program follow-up
    needs_final_feedback: bool = Field(default=False)
    last_program_report_id: Optional[int] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=timestamp_type())
    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_type=timestamp_type())
