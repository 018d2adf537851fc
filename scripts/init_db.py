"""
Database initialization script.

Creates the progress engine tables.  With ``--demo`` it also adds a demo
trainee with three months of weigh-ins, workouts and a completed
12-week program, so every endpoint has something to show.

Usage:
    python scripts/init_db.py [--demo]
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.config import settings
from app.db.init_db import init_db
from app.db.session import engine
from app.models.measurement import MeasurementEntry
from app.models.user import User
from app.models.weekly_task import TASK_STATUS_COMPLETED, WeeklyTask
from app.models.workout import WORKOUT_STATUS_COMPLETED, Workout

DEMO_EMAIL = "demo.trainee@example.com"
DEMO_START = datetime.date(2026, 1, 5)


def seed_demo(session: Session) -> User:
    """Insert the demo trainee and their history; returns the trainee."""
    user = User(email=DEMO_EMAIL, full_name="Demo Trainee", start_date=DEMO_START, group_names=["demo"],
                baselines={"weight": 92.0, "fat_percentage": 31.5})
    session.add(user)
    session.flush()

    for week in range(settings.PROGRAM_WEEKS):
        week_start = DEMO_START + datetime.timedelta(weeks=week)
        session.add(WeeklyTask(user_id=user.id, week=week + 1, week_start_date=week_start,
                               week_end_date=week_start + datetime.timedelta(days=6), status=TASK_STATUS_COMPLETED))
        session.add(MeasurementEntry(user_id=user.id, date=week_start, weight=round(92.0 - 0.4 * week, 1),
                                     fat_percentage=round(31.5 - 0.2 * week, 1), bmi=round(30.0 - 0.13 * week, 1)))
        session.add(Workout(user_id=user.id, date=week_start + datetime.timedelta(days=2),
                            status=WORKOUT_STATUS_COMPLETED, title=f"Week {week + 1}", sections={
                "part_1": [{"name": "Back Squat",
                            "sets": [{"weight": 50 + 2.5 * week, "repetitions": 8, "completed": True}] * 3}],
                "exercises": [{"name": "Bench Press",
                               "sets": [{"weight": 35 + 1.25 * week, "repetitions": 10, "completed": True}] * 3}],
            }))
    return user


if __name__ == "__main__":
    print("=" * 50)
    print(f"{settings.PROJECT_NAME} - Database Initialization")
    print("=" * 50)
    print()

    try:
        init_db()
        if "--demo" in sys.argv:
            with Session(engine) as session:
                demo = seed_demo(session)
                session.commit()
                print(f"Demo trainee created with id {demo.id}")
    except SQLAlchemyError as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)

    print()
    print("=" * 50)
    print("SUCCESS: Database initialized!")
    print("=" * 50)
