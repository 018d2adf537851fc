"""
Workout database model.

Exercises are stored as JSON grouped by section (``part_1``, ``part_2``,
``part_3`` and the free ``exercises`` list).  Each exercise entry is::

    {"name": "Squat", "sets": [{"weight": 60, "repetitions": 8,
                                "duration": null, "completed": true}, ...]}
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from app.models.timestamps import timestamp_type, utcnow

WORKOUT_STATUS_ACTIVE = "active"
WORKOUT_STATUS_COMPLETED = "completed"


class Workout(SQLModel, table=True):
    """A workout performed (or in progress) by a user."""

    __tablename__ = "workouts"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    status: str = Field(default=WORKOUT_STATUS_ACTIVE, max_length=20, nullable=False, index=True)
    title: Optional[str] = Field(default=None, max_length=255)

    # Section name -> list of exercise entries
    sections: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=timestamp_type())
    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_type=timestamp_type())
