"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.measurement import MeasurementEntry  # noqa: F401
from app.models.workout import Workout  # noqa: F401
from app.models.weekly_task import WeeklyTask  # noqa: F401
from app.models.report import CoachNotification, GeneratedReport  # noqa: F401
