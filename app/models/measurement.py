"""
Body measurement database model.

Defines the measurement_entries table.  Each row is one weigh-in and may
carry any subset of the body-composition metrics; absent metrics are NULL.
Several rows per user per day are allowed.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.models.timestamps import timestamp_type, utcnow


class MeasurementEntry(SQLModel, table=True):
    """A single measurement entry for one user."""

    __tablename__ = "measurement_entries"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    # Scale
    weight: Optional[float] = Field(default=None)
    bmi: Optional[float] = Field(default=None)
    fat_percentage: Optional[float] = Field(default=None)
    muscle_mass: Optional[float] = Field(default=None)
    bmr: Optional[float] = Field(default=None)
    metabolic_age: Optional[float] = Field(default=None)
    visceral_fat: Optional[float] = Field(default=None)
    body_water_percentage: Optional[float] = Field(default=None)
    physique_rating: Optional[float] = Field(default=None)

    # Tape
    chest_circumference: Optional[float] = Field(default=None)
    waist_circumference: Optional[float] = Field(default=None)
    glutes_circumference: Optional[float] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=timestamp_type())
