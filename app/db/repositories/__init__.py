"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.measurement import MeasurementRepository
from app.db.repositories.workout import WorkoutRepository
from app.db.repositories.weekly_task import WeeklyTaskRepository
from app.db.repositories.report import NotificationRepository, ReportRepository

__all__ = [
    "UserRepository",
    "MeasurementRepository",
    "WorkoutRepository",
    "WeeklyTaskRepository",
    "ReportRepository",
    "NotificationRepository",
]
