"""SQLModel database models."""

from app.models.user import User
from app.models.measurement import MeasurementEntry
from app.models.workout import Workout
from app.models.weekly_task import WeeklyTask
from app.models.report import CoachNotification, GeneratedReport

__all__ = [
    "User",
    "MeasurementEntry",
    "Workout",
    "WeeklyTask",
    "GeneratedReport",
    "CoachNotification",
]
